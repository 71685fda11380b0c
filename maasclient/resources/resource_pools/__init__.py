from .resource_pools import ResourcePools

__all__ = ["ResourcePools"]

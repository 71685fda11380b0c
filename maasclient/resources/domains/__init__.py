from .domains import Domains

__all__ = ["Domains"]

from .ip_addresses import IPAddresses

__all__ = ["IPAddresses"]

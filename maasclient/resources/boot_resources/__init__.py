from .boot_resources import BootResourceBuilder, BootResourceHandle, BootResources

__all__ = ["BootResourceBuilder", "BootResourceHandle", "BootResources"]

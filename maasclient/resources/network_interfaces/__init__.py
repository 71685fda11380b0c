from .network_interfaces import NetworkInterfaceHandle, NetworkInterfaces

__all__ = ["NetworkInterfaceHandle", "NetworkInterfaces"]

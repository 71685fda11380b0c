from .boot_resource import BootResource, BootResourceSet, BootResourceSetFile
from .dns_resource import DNSResource
from .domain import Domain
from .ip_address import IPAddress
from .machine import BootInterface, Machine
from .network_interface import IPConfigurationUpdate, NetworkInterface, NetworkInterfaceLink
from .resource_pool import ResourcePool
from .space import Space
from .ssh_key import SSHKey
from .subnet import VLAN, Subnet
from .tag import Tag
from .user import User
from .vm_host import ResourceSummary, StoragePool, VMHost
from .zone import Zone

__all__ = [
    "BootResource",
    "BootResourceSet",
    "BootResourceSetFile",
    "DNSResource",
    "Domain",
    "IPAddress",
    "BootInterface",
    "Machine",
    "IPConfigurationUpdate",
    "NetworkInterface",
    "NetworkInterfaceLink",
    "ResourcePool",
    "Space",
    "SSHKey",
    "VLAN",
    "Subnet",
    "Tag",
    "User",
    "ResourceSummary",
    "StoragePool",
    "VMHost",
    "Zone",
]

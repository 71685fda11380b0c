from .boot_resources import BootResources
from .dns_resources import DNSResources
from .domains import Domains
from .ip_addresses import IPAddresses
from .machines import Machines
from .network_interfaces import NetworkInterfaces
from .rack_controllers import RackControllers
from .resource_pools import ResourcePools
from .spaces import Spaces
from .ssh_keys import SSHKeys
from .subnets import Subnets
from .tags import Tags
from .users import Users
from .vm_hosts import VMHosts
from .zones import Zones

__all__ = [
    "BootResources",
    "DNSResources",
    "Domains",
    "IPAddresses",
    "Machines",
    "NetworkInterfaces",
    "RackControllers",
    "ResourcePools",
    "Spaces",
    "SSHKeys",
    "Subnets",
    "Tags",
    "Users",
    "VMHosts",
    "Zones",
]

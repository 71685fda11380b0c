from dataclasses import dataclass

from pydantic import Field

from maasclient.models.base import MAASModel, StrID
from maasclient.models.subnet import VLAN, Subnet


class NetworkInterfaceLink(MAASModel):
    """IP configuration binding an interface to a subnet."""

    id: StrID = ""
    mode: str = ""
    subnet: Subnet | None = None
    ip_address: str | None = None


class NetworkInterface(MAASModel):
    id: StrID = ""
    name: str = ""
    type: str = ""
    enabled: bool = False
    mac_address: str | None = None
    links: list[NetworkInterfaceLink] = []
    children: list[str] = []
    parents: list[str] = []
    vlan: VLAN | None = None
    system_id: str = Field("", description="Owning machine; filled in by the controller, not the API.")


@dataclass(frozen=True)
class IPConfigurationUpdate:
    """Replacement IP configuration for one existing link."""

    link_id: str
    mode: str
    subnet_id: str | None = None
    ip_address: str | None = None

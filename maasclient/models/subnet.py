from pydantic import Field

from maasclient.models.base import MAASModel


class VLAN(MAASModel):
    id: int = 0
    vid: int = 0
    name: str = ""
    fabric_id: int = 0
    fabric_name: str = Field("", alias="fabric")
    mtu: int = 0
    dhcp_on: bool = False


class Subnet(MAASModel):
    id: int = 0
    name: str = ""
    space: str | None = None
    vlan: VLAN | None = None
    cidr: str = ""

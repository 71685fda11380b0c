from maasclient.models.base import MAASModel
from maasclient.models.network_interface import NetworkInterface


class IPAddress(MAASModel):
    ip: str = ""
    alloc_type_name: str | None = None
    interface_set: list[NetworkInterface] = []

from maasclient.models.base import MAASModel
from maasclient.models.ip_address import IPAddress


class DNSResource(MAASModel):
    id: int = 0
    fqdn: str = ""
    address_ttl: int | None = None
    ip_addresses: list[IPAddress] = []

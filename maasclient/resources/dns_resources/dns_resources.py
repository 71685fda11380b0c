"""/dnsresources/ endpoints."""
from __future__ import annotations

from maasclient.models.dns_resource import DNSResource
from maasclient.params import Params
from maasclient.resources.base import BaseResource, Builder

FQDN_KEY = "fqdn"
DOMAIN_KEY = "domain"
NAME_KEY = "name"
ADDRESS_TTL_KEY = "address_ttl"
IP_ADDRESSES_KEY = "ip_addresses"
ID_KEY = "id"
ALL_KEY = "all"


class _DNSResourcesCore:
    ENDPOINT = "/dnsresources/"
    DNS_RESOURCE_PATH = "/dnsresources/{id}/"

    def parse_one(self, envelope) -> DNSResource:
        return self._decode(envelope, DNSResource)

    def parse_many(self, envelope) -> list[DNSResource]:
        return self._decode(envelope, DNSResource, many=True)


class DNSResources(BaseResource, _DNSResourcesCore):
    def list(self, params: Params | None = None) -> list[DNSResource]:
        """List DNS resources; without ``params`` every resource is returned (``all=true``)."""
        if params is None:
            params = Params().set(ALL_KEY, "true")
        return self.parse_many(self._t.get(self.api_path, params))

    def builder(self) -> DNSResourceBuilder:
        return DNSResourceBuilder(self)

    def dns_resource(self, id: int) -> DNSResourceHandle:
        return DNSResourceHandle(self._t, id)


class DNSResourceBuilder(Builder):
    def with_fqdn(self, fqdn: str) -> DNSResourceBuilder:
        self.params.add(FQDN_KEY, fqdn)
        return self

    def with_domain(self, domain: str) -> DNSResourceBuilder:
        self.params.set(DOMAIN_KEY, domain)
        return self

    def with_name(self, name: str) -> DNSResourceBuilder:
        self.params.set(NAME_KEY, name)
        return self

    def with_address_ttl(self, address_ttl: int | str) -> DNSResourceBuilder:
        self.params.add(ADDRESS_TTL_KEY, str(address_ttl))
        return self

    def with_ip_addresses(self, ip_addresses: list[str]) -> DNSResourceBuilder:
        self.params.add(IP_ADDRESSES_KEY, " ".join(ip_addresses))
        return self

    def create(self) -> DNSResource:
        return self._owner.parse_one(self._owner._t.post(self._owner.api_path, self.params))


class DNSResourceHandle(BaseResource, _DNSResourcesCore):
    def __init__(self, transport, id: int):
        super().__init__(transport, self.DNS_RESOURCE_PATH.format(id=id))
        self.id = id

    def get(self) -> DNSResource:
        return self.parse_one(self._t.get(self.api_path, Params()))

    def delete(self) -> None:
        self._decode(self._t.delete(self.api_path))

    def modifier(self) -> DNSResourceModifier:
        return DNSResourceModifier(self)


class DNSResourceModifier(Builder):
    def set_fqdn(self, fqdn: str) -> DNSResourceModifier:
        self.params.add(FQDN_KEY, fqdn)
        return self

    def set_address_ttl(self, address_ttl: int) -> DNSResourceModifier:
        self.params.add(ADDRESS_TTL_KEY, str(address_ttl))
        return self

    def set_ip_addresses(self, ip_addresses: list[str]) -> DNSResourceModifier:
        self.params.add(IP_ADDRESSES_KEY, " ".join(ip_addresses))
        return self

    def set_name(self, name: str) -> DNSResourceModifier:
        self.params.add(NAME_KEY, name)
        return self

    def set_domain(self, domain: str) -> DNSResourceModifier:
        self.params.add(DOMAIN_KEY, domain)
        return self

    def modify(self) -> DNSResource:
        self.params.set(ID_KEY, str(self._owner.id))
        return self._owner.parse_one(self._owner._t.put_params(self._owner.api_path, self.params))

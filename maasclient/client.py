"""Sync Client façade."""
from __future__ import annotations

from dataclasses import replace

import httpx

from .auth.oauth1 import Credential
from .config import Config
from .models.user import User
from .transport.base import Transport
from .transport.httpx_sync import HttpxSyncTransport
# Add resources here
from .resources.boot_resources import BootResources
from .resources.dns_resources import DNSResources
from .resources.domains import Domains
from .resources.ip_addresses import IPAddresses
from .resources.machines import Machines
from .resources.network_interfaces import NetworkInterfaces
from .resources.rack_controllers import RackControllers
from .resources.resource_pools import ResourcePools
from .resources.spaces import Spaces
from .resources.ssh_keys import SSHKeys
from .resources.subnets import Subnets
from .resources.tags import Tags
from .resources.users import Users
from .resources.vm_hosts import VMHosts
from .resources.zones import Zones


class Client:
    """Single public entry-point: one signed transport shared by every controller.

    Controllers stage parameters on themselves, so a Client must not be
    shared across threads without external locking.
    """

    # -------------- resources -------------- #
    machines: Machines
    boot_resources: BootResources
    network_interfaces: NetworkInterfaces
    dns_resources: DNSResources
    vm_hosts: VMHosts
    tags: Tags
    zones: Zones
    users: Users
    rack_controllers: RackControllers
    resource_pools: ResourcePools
    spaces: Spaces
    subnets: Subnets
    domains: Domains
    ssh_keys: SSHKeys
    ip_addresses: IPAddresses

    def __init__(
        self,
        endpoint: str | None = None,
        api_key: str | None = None,
        *,
        transport: Transport | None = None,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
    ):
        if transport is not None:
            self._config = Config(endpoint=endpoint or "", api_key=api_key or "")
        else:
            self._config = Config.load(endpoint, api_key)
        if timeout:
            self._config = replace(self._config, timeout=timeout)

        # -------------- core plumbing -------------- #
        self._transport = transport or HttpxSyncTransport(
            base_url=self._config.api_url,
            api_key=self._config.api_key,
            timeout=self._config.timeout,
            client=http_client,
            refresh_interval=self._config.refresh_interval,
        )

        # -------------- resources -------------- #
        t = self._transport
        self.machines = Machines(t)
        self.boot_resources = BootResources(t)
        self.network_interfaces = NetworkInterfaces(t)
        self.dns_resources = DNSResources(t)
        self.vm_hosts = VMHosts(t)
        self.tags = Tags(t)
        self.zones = Zones(t)
        self.users = Users(t)
        self.rack_controllers = RackControllers(t)
        self.resource_pools = ResourcePools(t)
        self.spaces = Spaces(t)
        self.subnets = Subnets(t)
        self.domains = Domains(t)
        self.ssh_keys = SSHKeys(t)
        self.ip_addresses = IPAddresses(t)

    @property
    def config(self) -> Config:
        return self._config

    def authenticate(self) -> User:
        """Check the API key's shape, then ask the server who it belongs to.

        :raises MAASConfigError: the key is not ``consumer:token:secret``.
        :raises MAASHTTPError: the server rejected the key.
        """
        Credential.parse(self._config.api_key)
        return self.users.whoami()

    # -------------- context mgr -------------- #
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self._transport.close()

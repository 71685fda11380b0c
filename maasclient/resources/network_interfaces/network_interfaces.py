"""/nodes/{system_id}/interfaces/ endpoints and IP (re)configuration."""
from __future__ import annotations

from maasclient.errors import MAASConfigError
from maasclient.models.network_interface import IPConfigurationUpdate, NetworkInterface, NetworkInterfaceLink
from maasclient.params import Params
from maasclient.resources.base import OPERATION, BaseResource
from maasclient.resources.machines.machines import MachineHandle
from maasclient.resources.network_interfaces.network_interfaces_core import (
    IP_ADDRESS_KEY,
    LINK_ID_KEY,
    MODE_DHCP,
    MODE_KEY,
    MODE_STATIC,
    OP_LINK_SUBNET,
    OP_UNLINK_SUBNET,
    SUBNET_KEY,
    _NetworkInterfacesCore,
)
from maasclient.utils.logging import logger


class NetworkInterfaces(BaseResource, _NetworkInterfacesCore):
    """
    Resources to inspect machine interfaces and change their IP configuration.

    Example usage::

        with maasclient.Client() as client:
            client.network_interfaces.set_boot_interface_static_ip("abc123", "10.0.0.50")
    """

    def __init__(self, transport):
        super().__init__(transport, "/nodes/")

    def get(self, system_id: str) -> list[NetworkInterface]:
        """All interfaces of machine ``system_id``."""
        return self.parse_many(self._t.get(self.interfaces_path(system_id), Params()), system_id)

    def interface(self, system_id: str, interface_id: str) -> NetworkInterfaceHandle:
        return NetworkInterfaceHandle(self._t, system_id, interface_id)

    def set_boot_interface_static_ip(self, system_id: str, ip_address: str) -> None:
        """
        Give the machine's boot interface a static address.

        :param system_id: Machine to reconfigure.
        :type system_id: str
        :param ip_address: Address to assign, inside the subnet of the replaced link.
        :type ip_address: str
        :raises MAASConfigError: the machine reports no boot interface, or the
            interface has neither links nor children.
        """
        machine = MachineHandle(self._t, system_id).get()
        if not machine.boot_interface_id:
            raise MAASConfigError(f"no boot interface found for machine {system_id}")

        handle = self.interface(system_id, machine.boot_interface_id)
        handle.set_static_ip(ip_address, handle.get())


class NetworkInterfaceHandle(BaseResource, _NetworkInterfacesCore):
    """
    One interface of one machine.

    MAAS has no "update link" operation: every change of an existing link is
    an unlink followed by a link. If the second call fails the interface is
    left unlinked; nothing is rolled back.
    """

    def __init__(self, transport, system_id: str, interface_id: str):
        super().__init__(transport, self.interface_path(system_id, interface_id))
        self.system_id = system_id
        self.interface_id = str(interface_id)

    def get(self) -> NetworkInterface:
        return self.parse_one(self._t.get(self.api_path, Params()), self.system_id)

    def link_subnet(self, subnet_id: str, ip_address: str = "") -> None:
        """Link ``subnet_id``: ``static`` with ``ip_address`` when given, ``dhcp`` otherwise."""
        self.params.reset()
        self.params.set(OPERATION, OP_LINK_SUBNET)
        self.params.set(SUBNET_KEY, str(subnet_id))
        if ip_address:
            self.params.set(IP_ADDRESS_KEY, ip_address)
            self.params.set(MODE_KEY, MODE_STATIC)
        else:
            self.params.set(MODE_KEY, MODE_DHCP)
        self._decode(self._t.post(self.api_path, self.params))

    def unlink_subnet(self, link_id: str) -> None:
        self.params.reset()
        self.params.set(OPERATION, OP_UNLINK_SUBNET)
        self.params.set(LINK_ID_KEY, str(link_id))
        self._decode(self._t.post(self.api_path, self.params))

    def update_ip_configuration(self, config: IPConfigurationUpdate) -> None:
        if not config.link_id:
            raise MAASConfigError("link_id is required")
        if not config.mode:
            raise MAASConfigError("mode is required")
        if config.subnet_id is None:
            raise MAASConfigError("subnet_id is required")
        if config.mode == MODE_STATIC and not config.ip_address:
            raise MAASConfigError("ip_address is required for static mode")

        self.unlink_subnet(config.link_id)

        if config.mode == MODE_STATIC:
            self.link_subnet(config.subnet_id, config.ip_address)
            return

        self.params.reset()
        self.params.set(OPERATION, OP_LINK_SUBNET)
        self.params.set(SUBNET_KEY, str(config.subnet_id))
        self.params.set(MODE_KEY, config.mode)
        self._decode(self._t.post(self.api_path, self.params))

    def set_static_ip(self, ip_address: str, interface: NetworkInterface | None = None) -> None:
        """
        Replace one link of this interface with a static ``ip_address``.

        With direct links, the first DHCP link is replaced (else the first
        link with a subnet, else the first link) on the same subnet. Without
        links, a bridge child that has links is reconfigured instead.

        :param ip_address: Address to assign.
        :param interface: Current snapshot of this interface; fetched when omitted.
        :raises MAASConfigError: no link, no child with links, or the chosen link has no subnet.
        """
        interface = interface or self.get()

        if interface.links:
            link = _pick_link(interface.links)
            if link.subnet is None:
                raise MAASConfigError("target link has no subnet information")
            logger.debug(f"Relinking {interface.name} link {link.id} as static {ip_address}")
            self.update_ip_configuration(IPConfigurationUpdate(
                link_id=link.id,
                mode=MODE_STATIC,
                subnet_id=str(link.subnet.id),
                ip_address=ip_address,
            ))
            return

        if interface.children:
            siblings = self.parse_many(self._t.get(self.interfaces_path(self.system_id), Params()), self.system_id)
            for child_name in interface.children:
                for candidate in siblings:
                    if candidate.name == child_name and candidate.links:
                        logger.debug(f"{interface.name} has no links, configuring child {candidate.name}")
                        child = NetworkInterfaceHandle(self._t, self.system_id, candidate.id)
                        child.set_static_ip(ip_address, candidate)
                        return
            raise MAASConfigError("no child interface with links found for bridge configuration")

        raise MAASConfigError(
            f"invalid boot interface configuration: no links and no children found for interface {interface.name}"
        )

    def set_dhcp(self, subnet_id: str, interface: NetworkInterface | None = None) -> None:
        """Switch the first link to DHCP on ``subnet_id``, or add a DHCP link if there is none."""
        interface = interface or self.get()
        if interface.links:
            self.update_ip_configuration(IPConfigurationUpdate(
                link_id=interface.links[0].id,
                mode=MODE_DHCP,
                subnet_id=str(subnet_id),
            ))
            return
        self.link_subnet(subnet_id)

    def __repr__(self) -> str:
        return f"NetworkInterfaceHandle(system_id={self.system_id!r}, interface_id={self.interface_id!r})"


def _pick_link(links: list[NetworkInterfaceLink]) -> NetworkInterfaceLink:
    for link in links:
        if link.mode == MODE_DHCP:
            return link
    for link in links:
        if link.subnet is not None:
            return link
    return links[0]

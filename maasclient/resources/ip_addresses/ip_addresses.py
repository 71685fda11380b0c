"""/ipaddresses/ endpoints."""
from __future__ import annotations

from maasclient.errors import MAASError
from maasclient.models.ip_address import IPAddress
from maasclient.params import Params
from maasclient.resources.base import OPERATION, BaseResource
from maasclient.utils.logging import logger

IP_KEY = "ip"
ALL_KEY = "all"
FORCE_KEY = "force"
OP_RELEASE = "release"
TRUE = "true"


class IPAddresses(BaseResource):
    """
    Resources to look up and release reserved addresses.

    Example usage::

        with maasclient.Client() as client:
            address = client.ip_addresses.get_all("10.0.0.50")
            client.ip_addresses.force_release(address.ip)
    """

    ENDPOINT = "/ipaddresses/"

    def list(self, params: Params | None = None) -> list[IPAddress]:
        self.params.reset()
        if params is not None:
            self.params.copy(params)
        return self._decode(self._t.get(self.api_path, self.params), IPAddress, many=True)

    def get(self, ip: str) -> IPAddress:
        """Address ``ip`` if the API key's user owns it.

        :raises MAASError: no such address is visible.
        """
        self.params.reset()
        self.params.set(IP_KEY, ip)
        return self._first(ip)

    def get_all(self, ip: str) -> IPAddress:
        """Like ``get`` but searches every user's addresses (admin only)."""
        self.params.reset()
        self.params.set(IP_KEY, ip)
        self.params.set(ALL_KEY, TRUE)
        return self._first(ip)

    def release(self, ip: str) -> None:
        self.params.reset()
        self.params.set(OPERATION, OP_RELEASE)
        self.params.set(IP_KEY, ip)
        self._decode(self._t.post(self.api_path, self.params))

    def force_release(self, ip: str) -> None:
        self.params.reset()
        self.params.set(OPERATION, OP_RELEASE)
        self.params.set(IP_KEY, ip)
        self.params.set(FORCE_KEY, TRUE)
        logger.warning(f"Force releasing {ip}")
        self._decode(self._t.post(self.api_path, self.params))

    def _first(self, ip: str) -> IPAddress:
        addresses = self._decode(self._t.get(self.api_path, self.params), IPAddress, many=True)
        if not addresses:
            raise MAASError(f"no IP address found for {ip}")
        return addresses[0]

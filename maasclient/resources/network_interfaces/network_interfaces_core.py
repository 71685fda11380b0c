from maasclient.models.network_interface import NetworkInterface

SUBNET_KEY = "subnet"
IP_ADDRESS_KEY = "ip_address"
MODE_KEY = "mode"
LINK_ID_KEY = "id"

OP_LINK_SUBNET = "link_subnet"
OP_UNLINK_SUBNET = "unlink_subnet"

# Link modes accepted by link_subnet.
MODE_DHCP = "dhcp"
MODE_STATIC = "static"


class _NetworkInterfacesCore:
    INTERFACES_PATH = "/nodes/{system_id}/interfaces/"
    INTERFACE_PATH = "/nodes/{system_id}/interfaces/{interface_id}/"

    @classmethod
    def interfaces_path(cls, system_id: str) -> str:
        return cls.INTERFACES_PATH.format(system_id=system_id)

    @classmethod
    def interface_path(cls, system_id: str, interface_id: str) -> str:
        return cls.INTERFACE_PATH.format(system_id=system_id, interface_id=interface_id)

    def parse_one(self, envelope, system_id: str) -> NetworkInterface:
        interface = self._decode(envelope, NetworkInterface)
        return interface.model_copy(update={"system_id": system_id})

    def parse_many(self, envelope, system_id: str) -> list[NetworkInterface]:
        return [
            interface.model_copy(update={"system_id": system_id})
            for interface in self._decode(envelope, NetworkInterface, many=True)
        ]

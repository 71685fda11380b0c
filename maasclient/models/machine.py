from pydantic import Field

from maasclient.models.base import MAASModel
from maasclient.models.resource_pool import ResourcePool
from maasclient.models.zone import Zone

BRIDGE = "bridge"
PHYSICAL = "physical"


class BootInterface(MAASModel):
    id: int = 0
    name: str = ""
    type: str = ""
    children: list[str] = []


class Machine(MAASModel):
    """A machine as reported by ``/machines/`` (storage is in decimal megabytes)."""

    system_id: str = ""
    fqdn: str = ""
    hostname: str = ""
    zone: Zone | None = None
    pool: ResourcePool | None = None
    power_state: str = ""
    power_type: str = ""
    ip_addresses: list[str] = []
    state: str = Field("", alias="status_name")
    os_system: str = Field("", alias="osystem")
    distro_series: str = ""
    swap_size: int | None = None
    memory: int = 0
    storage: float = 0.0
    boot_interface: BootInterface | None = None

    @property
    def boot_interface_id(self) -> str:
        if self.boot_interface is None or self.boot_interface.id == 0:
            return ""
        return str(self.boot_interface.id)

    @property
    def boot_interface_name(self) -> str:
        return self.boot_interface.name if self.boot_interface_id else ""

    @property
    def boot_interface_type(self) -> str:
        """``bridge`` when the boot interface has children, else ``physical``.

        Derived from ``children`` only; the API's own ``type`` field is not consulted.
        """
        if not self.boot_interface_id:
            return ""
        return BRIDGE if self.boot_interface.children else PHYSICAL

    @property
    def total_storage_gb(self) -> float:
        # Decimal units, as MAAS reports them: 1 GB = 1000 MB.
        if self.storage <= 0:
            return 0.0
        return self.storage / 1000.0

    @property
    def zone_name(self) -> str:
        return self.zone.name if self.zone else ""

    @property
    def resource_pool_name(self) -> str:
        return self.pool.name if self.pool else ""

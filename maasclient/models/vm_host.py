from pydantic import Field

from maasclient.models.base import MAASModel
from maasclient.models.resource_pool import ResourcePool
from maasclient.models.zone import Zone


class ResourceSummary(MAASModel):
    cores: int = 0
    memory: int = 0


class StoragePool(MAASModel):
    name: str = ""
    driver: str = ""
    total: int = 0
    used: int = 0
    pending: int = 0
    available: int = Field(0, alias="avail")
    remote: bool = False


class VMHost(MAASModel):
    """A hypervisor (LXD or virsh) on which machines can be composed."""

    id: int = 0
    name: str = ""
    type: str = ""
    power_address: str = ""
    zone_ref: Zone | None = Field(None, alias="zone")
    pool_ref: ResourcePool | None = Field(None, alias="pool")
    total: ResourceSummary = ResourceSummary()
    used: ResourceSummary = ResourceSummary()
    available: ResourceSummary = ResourceSummary()
    capabilities: list[str] = []
    projects: list[str] = []
    storage_pools: list[StoragePool] = []

    @property
    def system_id(self) -> str:
        return str(self.id)

    @property
    def zone(self) -> Zone | None:
        if self.zone_ref is None or not self.zone_ref.name or self.zone_ref.id == 0:
            return None
        return self.zone_ref

    @property
    def resource_pool(self) -> ResourcePool | None:
        if self.pool_ref is None or not self.pool_ref.name or self.pool_ref.id <= 0:
            return None
        return self.pool_ref

    @property
    def total_cores(self) -> int:
        return self.total.cores

    @property
    def total_memory(self) -> int:
        return self.total.memory

    @property
    def used_cores(self) -> int:
        return self.used.cores

    @property
    def used_memory(self) -> int:
        return self.used.memory

    @property
    def available_cores(self) -> int:
        return self.available.cores

    @property
    def available_memory(self) -> int:
        return self.available.memory

"""/machines/ endpoints."""
from __future__ import annotations

from maasclient.models.machine import Machine
from maasclient.params import Params
from maasclient.resources.base import OPERATION, BaseResource, Builder
from maasclient.resources.machines.machines_core import (
    COMMENT_KEY,
    CPU_COUNT_KEY,
    DISTRO_SERIES_KEY,
    ERASE_KEY,
    FORCE_KEY,
    HOSTNAME_KEY,
    MEMORY_KEY,
    NAME_KEY,
    OP_ALLOCATE,
    OP_DEPLOY,
    OP_POWER_ON,
    OP_RELEASE,
    OS_SYSTEM_KEY,
    POOL_KEY,
    QUICK_ERASE_KEY,
    SECURE_ERASE_KEY,
    SWAP_SIZE_KEY,
    SYSTEM_ID_KEY,
    TAG_KEY,
    TRUE,
    USER_DATA_KEY,
    ZONE_KEY,
    _MachinesCore,
)
from maasclient.utils.logging import logger


class Machines(BaseResource, _MachinesCore):
    """
    Resources to list, allocate and address machines.

    Example usage::

        with maasclient.Client() as client:
            machine = client.machines.allocator().with_zone("az1").with_tags(["gpu"]).allocate()
            client.machines.machine(machine.system_id).deployer().set_distro_series("jammy").deploy()
    """

    def list(self, params: Params | None = None) -> list[Machine]:
        """
        List machines.

        :param params: Filter parameters such as ``hostname`` or ``zone``.
        :type params: Params or None
        :return: Machines visible to the API key.
        :rtype: list[Machine]
        """
        self.params.reset()
        if params is not None:
            self.params.copy(params)
        return self.parse_many(self._t.get(self.api_path, self.params))

    def machine(self, system_id: str) -> MachineHandle:
        """Handle for one machine; no request is made."""
        return MachineHandle(self._t, system_id)

    def allocator(self) -> MachineAllocator:
        return MachineAllocator(self)


class MachineAllocator(Builder):
    """Staged ``op=allocate`` request; every ``with_*`` narrows the candidate set."""

    def __init__(self, owner: Machines):
        super().__init__(owner)
        self.params.set(OPERATION, OP_ALLOCATE)

    def with_zone(self, zone: str) -> MachineAllocator:
        self.params.set(ZONE_KEY, zone)
        return self

    def with_system_id(self, system_id: str) -> MachineAllocator:
        self.params.set(SYSTEM_ID_KEY, system_id)
        return self

    def with_name(self, name: str) -> MachineAllocator:
        self.params.set(NAME_KEY, name)
        return self

    def with_cpu_count(self, cpu_count: int) -> MachineAllocator:
        self.params.set(CPU_COUNT_KEY, str(cpu_count))
        return self

    def with_memory(self, memory: int) -> MachineAllocator:
        self.params.set(MEMORY_KEY, str(memory))
        return self

    def with_tags(self, tags: list[str]) -> MachineAllocator:
        for tag in tags:
            self.params.add(TAG_KEY, tag)
        return self

    def with_resource_pool(self, pool: str) -> MachineAllocator:
        self.params.set(POOL_KEY, pool)
        return self

    def allocate(self) -> Machine:
        machine = self._owner.parse_one(self._owner._t.post(self._owner.api_path, self.params))
        logger.debug(f"Allocated machine {machine.system_id}")
        return machine


class MachineHandle(BaseResource, _MachinesCore):
    """One machine, addressed by system id. Every call returns a fresh snapshot."""

    def __init__(self, transport, system_id: str):
        super().__init__(transport, self.machine_path(system_id))
        self.system_id = system_id

    def get(self) -> Machine:
        return self.parse_one(self._t.get(self.api_path, Params()))

    def delete(self) -> None:
        self._decode(self._t.delete(self.api_path, Params()))

    def modifier(self) -> MachineModifier:
        return MachineModifier(self)

    def deployer(self) -> MachineDeployer:
        return MachineDeployer(self)

    def releaser(self) -> MachineReleaser:
        return MachineReleaser(self)

    def power_manager_on(self) -> PowerManagerOn:
        return PowerManagerOn(self)

    def __repr__(self) -> str:
        return f"MachineHandle(system_id={self.system_id!r})"


class MachineModifier(Builder):
    def set_swap_size(self, size: int) -> MachineModifier:
        self.params.set(SWAP_SIZE_KEY, str(size))
        return self

    def set_hostname(self, hostname: str) -> MachineModifier:
        self.params.set(HOSTNAME_KEY, hostname)
        return self

    def update(self) -> Machine:
        return self._owner.parse_one(self._owner._t.put_params(self._owner.api_path, self.params))


class MachineDeployer(Builder):
    def __init__(self, owner: MachineHandle):
        super().__init__(owner)
        self.params.set(OPERATION, OP_DEPLOY)

    def set_os_system(self, os_system: str) -> MachineDeployer:
        self.params.set(OS_SYSTEM_KEY, os_system)
        return self

    def set_user_data(self, user_data: str) -> MachineDeployer:
        """``user_data`` must already be base64 encoded."""
        self.params.set(USER_DATA_KEY, user_data)
        return self

    def set_distro_series(self, distro_series: str) -> MachineDeployer:
        self.params.set(DISTRO_SERIES_KEY, distro_series)
        return self

    def deploy(self) -> Machine:
        logger.debug(f"Deploying machine {self._owner.system_id}")
        return self._owner.parse_one(self._owner._t.post(self._owner.api_path, self.params))


class MachineReleaser(Builder):
    def __init__(self, owner: MachineHandle):
        super().__init__(owner)
        self.params.set(OPERATION, OP_RELEASE)

    def with_erase(self) -> MachineReleaser:
        self.params.set(ERASE_KEY, TRUE)
        return self

    def with_quick_erase(self) -> MachineReleaser:
        self.params.set(QUICK_ERASE_KEY, TRUE)
        return self

    def with_secure_erase(self) -> MachineReleaser:
        self.params.set(SECURE_ERASE_KEY, TRUE)
        return self

    def with_force(self) -> MachineReleaser:
        self.params.set(FORCE_KEY, TRUE)
        return self

    def with_comment(self, comment: str) -> MachineReleaser:
        self.params.set(COMMENT_KEY, comment)
        return self

    def release(self) -> Machine:
        logger.debug(f"Releasing machine {self._owner.system_id}")
        return self._owner.parse_one(self._owner._t.post(self._owner.api_path, self.params))


class PowerManagerOn(Builder):
    def __init__(self, owner: MachineHandle):
        super().__init__(owner)
        self.params.set(OPERATION, OP_POWER_ON)

    def with_power_on_comment(self, comment: str) -> PowerManagerOn:
        self.params.set(COMMENT_KEY, comment)
        return self

    def power_on(self) -> Machine:
        return self._owner.parse_one(self._owner._t.post(self._owner.api_path, self.params))

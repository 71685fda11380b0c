from .machines import (
    MachineAllocator,
    MachineDeployer,
    MachineHandle,
    MachineModifier,
    MachineReleaser,
    Machines,
    PowerManagerOn,
)

__all__ = [
    "MachineAllocator",
    "MachineDeployer",
    "MachineHandle",
    "MachineModifier",
    "MachineReleaser",
    "Machines",
    "PowerManagerOn",
]

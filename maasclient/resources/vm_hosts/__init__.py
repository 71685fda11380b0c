from .vm_hosts import VMComposer, VMHostHandle, VMHostMachines, VMHosts

__all__ = ["VMComposer", "VMHostHandle", "VMHostMachines", "VMHosts"]

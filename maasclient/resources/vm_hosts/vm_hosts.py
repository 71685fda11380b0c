"""/vm-hosts/ endpoints."""
from __future__ import annotations

from maasclient.models.base import MAASModel
from maasclient.models.vm_host import VMHost
from maasclient.params import Params
from maasclient.resources.base import OPERATION, BaseResource
from maasclient.resources.machines.machines import MachineHandle
from maasclient.utils.logging import logger

OP_COMPOSE = "compose"


class _MachineRef(MAASModel):
    system_id: str = ""


class _VMHostsCore:
    ENDPOINT = "/vm-hosts/"
    VM_HOST_PATH = "/vm-hosts/{id}/"
    VM_HOST_MACHINES_PATH = "/vm-hosts/{id}/machines/"

    def parse_one(self, envelope) -> VMHost:
        return self._decode(envelope, VMHost)

    def parse_many(self, envelope) -> list[VMHost]:
        return self._decode(envelope, VMHost, many=True)


class VMHosts(BaseResource, _VMHostsCore):
    """
    Resources to register hypervisors and compose machines on them.

    Example usage::

        with maasclient.Client() as client:
            host = client.vm_hosts.create(Params().set("type", "lxd").set("power_address", "10.0.0.5"))
            machine = client.vm_hosts.vm_host(host.system_id).composer().compose(Params().set("cores", "2"))
    """

    def list(self, params: Params | None = None) -> list[VMHost]:
        return self.parse_many(self._t.get(self.api_path, params or Params()))

    def create(self, params: Params) -> VMHost:
        vm_host = self.parse_one(self._t.post(self.api_path, params))
        logger.debug(f"Registered VM host {vm_host.id} ({vm_host.name})")
        return vm_host

    def vm_host(self, id: int | str) -> VMHostHandle:
        return VMHostHandle(self._t, str(id))


class VMHostHandle(BaseResource, _VMHostsCore):
    def __init__(self, transport, id: str):
        super().__init__(transport, self.VM_HOST_PATH.format(id=id))
        self.system_id = id

    def get(self) -> VMHost:
        return self.parse_one(self._t.get(self.api_path, Params()))

    def update(self, params: Params) -> VMHost:
        return self.parse_one(self._t.put_params(self.api_path, params))

    def delete(self) -> None:
        self._decode(self._t.delete(self.api_path, Params()))

    def composer(self) -> VMComposer:
        return VMComposer(self._t, self.system_id)

    def machines(self) -> VMHostMachines:
        return VMHostMachines(self._t, self.system_id)


class VMComposer(BaseResource, _VMHostsCore):
    def __init__(self, transport, id: str):
        super().__init__(transport, self.VM_HOST_PATH.format(id=id))
        self.system_id = id

    def compose(self, params: Params) -> MachineHandle:
        """
        Compose a VM on this host.

        :param params: Compose options such as ``cores``, ``memory``, ``storage``, ``hostname``.
        :type params: Params
        :return: Handle for the new machine.
        :rtype: MachineHandle
        """
        self.params.reset()
        self.params.copy(params)
        self.params.set(OPERATION, OP_COMPOSE)
        ref = self._decode(self._t.post(self.api_path, self.params), _MachineRef)
        logger.debug(f"Composed machine {ref.system_id} on VM host {self.system_id}")
        return MachineHandle(self._t, ref.system_id)


class VMHostMachines(BaseResource, _VMHostsCore):
    def __init__(self, transport, id: str):
        super().__init__(transport, self.VM_HOST_MACHINES_PATH.format(id=id))
        self.system_id = id

    def list(self) -> list[MachineHandle]:
        refs = self._decode(self._t.get(self.api_path, Params()), _MachineRef, many=True)
        return [MachineHandle(self._t, ref.system_id) for ref in refs]

from maasclient.models.resource_pool import ResourcePool
from maasclient.params import Params
from maasclient.resources.base import BaseResource


class ResourcePools(BaseResource):
    ENDPOINT = "/resourcepools/"

    def list(self) -> list[ResourcePool]:
        return self._decode(self._t.get(self.api_path, Params()), ResourcePool, many=True)

from maasclient.models.subnet import Subnet
from maasclient.params import Params
from maasclient.resources.base import BaseResource


class Subnets(BaseResource):
    ENDPOINT = "/subnets/"

    def list(self) -> list[Subnet]:
        return self._decode(self._t.get(self.api_path, Params()), Subnet, many=True)

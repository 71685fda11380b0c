from maasclient.models.zone import Zone
from maasclient.params import Params
from maasclient.resources.base import BaseResource


class Zones(BaseResource):
    ENDPOINT = "/zones/"

    def list(self) -> list[Zone]:
        return self._decode(self._t.get(self.api_path, Params()), Zone, many=True)

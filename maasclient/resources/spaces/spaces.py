from maasclient.models.space import Space
from maasclient.params import Params
from maasclient.resources.base import BaseResource


class Spaces(BaseResource):
    ENDPOINT = "/spaces/"

    def list(self) -> list[Space]:
        return self._decode(self._t.get(self.api_path, Params()), Space, many=True)

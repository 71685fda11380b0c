from maasclient.models.domain import Domain
from maasclient.params import Params
from maasclient.resources.base import BaseResource


class Domains(BaseResource):
    ENDPOINT = "/domains/"

    def list(self) -> list[Domain]:
        return self._decode(self._t.get(self.api_path, Params()), Domain, many=True)

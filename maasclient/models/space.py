from maasclient.models.base import MAASModel
from maasclient.models.subnet import Subnet


class Space(MAASModel):
    id: int = 0
    name: str = ""
    subnets: list[Subnet] = []

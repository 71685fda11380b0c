from maasclient.models.base import MAASModel


class Zone(MAASModel):
    id: int = 0
    name: str = ""
    description: str = ""

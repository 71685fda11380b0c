from maasclient.models.base import MAASModel


class ResourcePool(MAASModel):
    id: int = 0
    name: str = ""
    description: str = ""

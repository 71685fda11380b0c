from maasclient.models.base import MAASModel


class Domain(MAASModel):
    id: int = 0
    name: str = ""
    authoritative: bool = False
    ttl: int | None = None
    is_default: bool = False
    resource_record_count: int = 0

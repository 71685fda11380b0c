from maasclient.models.base import MAASModel


class Tag(MAASModel):
    name: str = ""
    definition: str = ""
    comment: str = ""
    kernel_opts: str | None = None
    resource_uri: str = ""

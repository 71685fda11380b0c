from pydantic import Field

from maasclient.models.base import MAASModel


class User(MAASModel):
    username: str = ""
    email: str | None = None
    is_superuser: bool = False
    is_local: bool = Field(False, description="Local account rather than an external identity.")

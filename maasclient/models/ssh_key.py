from typing import Any

from pydantic import Field

from maasclient.models.base import MAASModel


class SSHKey(MAASModel):
    id: int = 0
    key: str = ""
    # Either null or an object describing the import source (protocol, auth_id).
    key_source: Any = Field(None, alias="keysource")

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _id_to_str(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    return value


# MAAS sends integer ids; handles and fixtures use strings.
StrID = Annotated[str, BeforeValidator(_id_to_str)]


class MAASModel(BaseModel):
    """Immutable snapshot of one API object. Unknown fields are ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

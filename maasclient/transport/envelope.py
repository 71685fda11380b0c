"""Status + body of one response, and its decoding into pydantic models."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from maasclient.errors import MAASDecodeError, MAASHTTPError

ACCEPTABLE_STATUSES = frozenset({200, 201, 202})
NO_CONTENT = 204

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Envelope:
    status_code: int
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


def decode(envelope: Envelope, model: type[M] | None = None, many: bool = False) -> Any:
    """
    Decode ``envelope`` into ``model`` (or a list of it when ``many``).

    :param envelope: The captured response.
    :type envelope: Envelope
    :param model: Target shape; ``None`` only checks the status.
    :type model: type[BaseModel] or None
    :param many: Decode a JSON array of ``model``.
    :type many: bool
    :return: The decoded value, or None for 204 and for a missing ``model``.
    :raises MAASHTTPError: status is not 200, 201, 202 or 204.
    :raises MAASDecodeError: the body is not JSON or does not fit ``model``.
    """
    if envelope.status_code == NO_CONTENT:
        return None
    if envelope.status_code not in ACCEPTABLE_STATUSES:
        raise MAASHTTPError(envelope.status_code, envelope.text)
    if model is None:
        return None

    try:
        data = json.loads(envelope.body)
    except ValueError as e:
        raise MAASDecodeError(f"invalid JSON in {envelope.status_code} response: {e}") from e

    try:
        if many:
            return TypeAdapter(list[model]).validate_python(data)
        return model.model_validate(data)
    except ValidationError as e:
        raise MAASDecodeError(f"unexpected {model.__name__} payload: {e}") from e

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from maasclient.params import Params
from maasclient.transport.base import Transport
from maasclient.transport.envelope import Envelope, decode

OPERATION = "op"


class BaseResource:
    """Transport, API path and the parameters staged for the next call.

    The path is fixed at construction; without one, ``ENDPOINT`` from the
    resource's core mixin is used. ``params`` is mutated by fluent
    builders, so one resource object must not be shared across threads.
    """

    def __init__(self, transport: Transport, api_path: str | None = None):
        self._t = transport
        self._api_path = api_path if api_path is not None else self.ENDPOINT
        self.params = Params()

    @property
    def api_path(self) -> str:
        return self._api_path

    def _decode(self, envelope: Envelope, model: type[BaseModel] | None = None, many: bool = False) -> Any:
        return decode(envelope, model, many)


class Builder:
    """Fluent chain over its owner's parameters; starts from an empty set."""

    def __init__(self, owner: BaseResource):
        owner.params.reset()
        self._owner = owner

    @property
    def params(self) -> Params:
        return self._owner.params

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO

from maasclient.params import Params
from maasclient.transport.envelope import Envelope


class Transport(ABC):
    """Signed HTTP verbs used by the resource controllers.

    Paths are relative to ``<endpoint>/api/2.0``. Network failures surface
    as ``httpx.HTTPError``; nothing here retries.
    """

    @abstractmethod
    def get(self, path: str, params: Params | None = None) -> Envelope: ...

    @abstractmethod
    def post(self, path: str, params: Params | None = None) -> Envelope: ...

    @abstractmethod
    def post_form(self, path: str, content_type: str, params: Params | None, body: bytes | IO[bytes]) -> Envelope: ...

    @abstractmethod
    def put(self, path: str, params: Params | None, body: bytes, content_length: int) -> Envelope: ...

    @abstractmethod
    def put_params(self, path: str, params: Params | None = None) -> Envelope: ...

    @abstractmethod
    def delete(self, path: str, params: Params | None = None) -> Envelope: ...

    def close(self) -> None:
        pass

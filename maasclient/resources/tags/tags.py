"""/tags/ endpoints."""
from __future__ import annotations

from urllib.parse import quote

from maasclient.models.tag import Tag
from maasclient.params import Params
from maasclient.resources.base import OPERATION, BaseResource
from maasclient.utils.logging import logger

NAME_KEY = "name"
MACHINES_KEY = "machines"
OP_ASSIGN = "assign"
OP_REMOVE = "remove"


class _TagsCore:
    ENDPOINT = "/tags/"

    def tag_path(self, name: str) -> str:
        return f"{self.ENDPOINT}{quote(name, safe='')}/"

    def parse_many(self, envelope) -> list[Tag]:
        return self._decode(envelope, Tag, many=True)


class Tags(BaseResource, _TagsCore):
    """
    Resources to create tags and attach them to machines.

    An empty tag name, or an empty list of system ids, makes ``create``,
    ``assign`` and ``unassign`` return without a request.
    """

    def list(self) -> list[Tag]:
        return self.parse_many(self._t.get(self.api_path, Params()))

    def create(self, name: str) -> None:
        if not name:
            return
        self._decode(self._t.post(self.api_path, Params().set(NAME_KEY, name)))

    def assign(self, name: str, system_ids: list[str]) -> None:
        self._update_machines(name, system_ids, OP_ASSIGN)

    def unassign(self, name: str, system_ids: list[str]) -> None:
        self._update_machines(name, system_ids, OP_REMOVE)

    def _update_machines(self, name: str, system_ids: list[str], op: str) -> None:
        if not name or not system_ids:
            return
        params = Params().set(OPERATION, op).set(MACHINES_KEY, ",".join(system_ids))
        logger.debug(f"Tag {name}: {op} {len(system_ids)} machine(s)")
        self._decode(self._t.post(self.tag_path(name), params))

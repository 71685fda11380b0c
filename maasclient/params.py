"""Ordered multi-value parameters sent as query strings or form bodies."""
from __future__ import annotations

from urllib.parse import urlencode


class Params:
    """
    Ordered multimap of string keys to one or more string values.

    Example usage::

        params = Params().set("op", "allocate").add("tags", "gpu").add("tags", "ssd")
        params.encode()  # 'op=allocate&tags=gpu&tags=ssd'
    """

    def __init__(self, values: dict[str, list[str]] | None = None):
        self._values: dict[str, list[str]] = {}
        for key, items in (values or {}).items():
            self._values[key] = list(items)

    def add(self, key: str, value: str) -> Params:
        """Append ``value`` without dropping the values already stored for ``key``."""
        self._values.setdefault(key, []).append(str(value))
        return self

    def set(self, key: str, value: str) -> Params:
        """Replace every value stored for ``key``."""
        self._values[key] = [str(value)]
        return self

    def reset(self) -> None:
        self._values = {}

    def values(self) -> dict[str, list[str]]:
        return self._values

    def copy(self, other: Params) -> None:
        """Merge ``other`` into this set; keys present in both take ``other``'s values."""
        for key, items in other.values().items():
            self._values[key] = list(items)

    def first(self) -> dict[str, str]:
        """One value per key, the way the request signer consumes them."""
        return {key: items[0] for key, items in self._values.items() if items}

    def items(self) -> list[tuple[str, str]]:
        return [(key, value) for key, items in self._values.items() for value in items]

    def encode(self) -> str:
        return urlencode(self.items())

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"Params({self._values!r})"

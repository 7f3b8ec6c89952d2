"""A set of objects compared by identity."""

from __future__ import annotations

from typing import Any

from minicc.hash_map import HashMap


def _identity_hash(item: Any) -> int:
    return id(item)


def _same_object(first: Any, second: Any) -> bool:
    return first is second


class PointerSet:
    """Set membership by object identity rather than equality."""

    def __init__(self) -> None:
        self._map = HashMap(_identity_hash, _same_object)

    def __contains__(self, item: Any) -> bool:
        return item in self._map

    def __len__(self) -> int:
        return len(self._map)

    def add(self, item: Any) -> None:
        """Add ``item`` to the set; adding it again has no effect."""
        if item is None:
            raise ValueError("cannot add None to a pointer set")
        self._map.insert(item, item)
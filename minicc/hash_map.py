"""Open-addressing hash map with caller-supplied hashing and key equality."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from minicc.errors import panic

HashFunction = Callable[[Any], int]
KeyEqual = Callable[[Any, Any], bool]
FreeFunction = Callable[[Any, Any], None]

_INITIAL_CAPACITY = 16
_MASK_32 = 0xFFFFFFFF


class _Grave:
    """Marker left in a slot whose entry was removed."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<grave>"


_GRAVE = _Grave()


@dataclass
class _Entry:
    key: Any
    hash: int
    data: Any


class HashMap:
    """A linear-probing hash map.

    Keys are hashed by ``hash_func`` and compared with ``key_eq``. When an
    entry is removed, or the map is cleared, ``free_func(key, data)`` is called
    for it if given. Stored data may not be ``None``, since ``get`` uses
    ``None`` to mean "absent".
    """

    def __init__(
        self,
        hash_func: HashFunction,
        key_eq: KeyEqual,
        free_func: Optional[FreeFunction] = None,
    ) -> None:
        self._hash_func = hash_func
        self._key_eq = key_eq
        self._free_func = free_func
        self._reset_storage(_INITIAL_CAPACITY)

    def _reset_storage(self, capacity: int) -> None:
        self._entries: list = [None] * capacity
        self._live = 0
        # Slots ever filled since the last rebuild; graves still count here.
        self._occupied = 0

    def __len__(self) -> int:
        return self._live

    def __contains__(self, key: Any) -> bool:
        return self.get(key) is not None

    def capacity(self) -> int:
        """Number of slots in the underlying table."""
        return len(self._entries)

    def _hash(self, key: Any) -> int:
        return self._hash_func(key) & _MASK_32

    def _positions(self, key_hash: int) -> Iterator[int]:
        capacity = len(self._entries)
        start = key_hash % capacity
        for offset in range(capacity):
            yield (start + offset) % capacity

    def _locate(self, key: Any, key_hash: int) -> tuple[int, Optional[_Entry]]:
        """Find the slot holding ``key``, or the first empty slot for it."""
        for position in self._positions(key_hash):
            slot = self._entries[position]
            if slot is None:
                return position, None
            if slot is _GRAVE:
                continue
            if slot.hash == key_hash and self._key_eq(key, slot.key):
                return position, slot
        panic("hash map has no free slot")
        raise AssertionError("unreachable")

    def _grow_if_needed(self) -> None:
        if self._occupied > len(self._entries) // 2:
            live = [slot for slot in self._entries if isinstance(slot, _Entry)]
            self._reset_storage(len(self._entries) * 2)
            for entry in live:
                position, _ = self._locate(entry.key, entry.hash)
                self._entries[position] = entry
                self._live += 1
                self._occupied += 1

    def _place(self, position: int, key: Any, key_hash: int, data: Any) -> Any:
        self._entries[position] = _Entry(key, key_hash, data)
        self._live += 1
        self._occupied += 1
        return data

    @staticmethod
    def _check_data(data: Any) -> None:
        if data is None:
            raise ValueError("cannot store None in a hash map")

    def get(self, key: Any) -> Any:
        """Return the data stored for ``key``, or ``None`` if absent."""
        _, entry = self._locate(key, self._hash(key))
        return entry.data if entry is not None else None

    def insert(self, key: Any, data: Any) -> Any:
        """Insert ``data`` under ``key`` unless the key is already present.

        Returns the data now associated with the key: the existing data if
        the key was present, otherwise ``data``.
        """
        self._check_data(data)
        self._grow_if_needed()
        key_hash = self._hash(key)
        position, entry = self._locate(key, key_hash)
        if entry is not None:
            return entry.data
        return self._place(position, key, key_hash, data)

    def insert_force(self, key: Any, data: Any) -> Any:
        """Insert or replace the data for ``key``.

        Returns the previous data if the key was present (keeping the
        original key object), otherwise ``data``.
        """
        self._check_data(data)
        self._grow_if_needed()
        key_hash = self._hash(key)
        position, entry = self._locate(key, key_hash)
        if entry is not None:
            old = entry.data
            entry.data = data
            return old
        return self._place(position, key, key_hash, data)

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present, passing its entry to the free function."""
        position, entry = self._locate(key, self._hash(key))
        if entry is None:
            return
        if self._free_func is not None:
            self._free_func(entry.key, entry.data)
        self._entries[position] = _GRAVE
        self._live -= 1

    def clear(self) -> None:
        """Remove every entry, passing each to the free function."""
        if self._free_func is not None:
            for slot in self._entries:
                if isinstance(slot, _Entry):
                    self._free_func(slot.key, slot.data)
        self._reset_storage(_INITIAL_CAPACITY)
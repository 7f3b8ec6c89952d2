"""A growable character buffer with an explicit, doubling capacity."""

from __future__ import annotations

from typing import Any, TextIO

from minicc.errors import panic

DEFAULT_CAPACITY = 40


class Buffer:
    """Characters held together with a capacity that doubles when full.

    The capacity always leaves room for a terminating character, so formatted
    text is only accepted once it fits strictly below the free space.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("buffer capacity must be positive")
        self._chars: list[str] = []
        self._capacity = capacity

    @classmethod
    def from_str(cls, text: str) -> "Buffer":
        """Create a buffer holding ``text`` with room for a terminator."""
        buffer = cls(len(text) + 1)
        buffer._chars.extend(text)
        return buffer

    @classmethod
    def from_format(cls, fmt: str, *args: Any) -> "Buffer":
        """Create a default-sized buffer holding ``fmt % args``."""
        buffer = cls()
        buffer.printf(fmt, *args)
        return buffer

    def __len__(self) -> int:
        return len(self._chars)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Buffer):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self._chars):
            panic("attempted buffer_get with out of range index")
        return self._chars[index]

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"Buffer({str(self)!r}, capacity={self._capacity})"

    def capacity(self) -> int:
        """Number of characters the buffer can hold before growing."""
        return self._capacity

    def _grow(self) -> None:
        self._capacity *= 2

    def add_char(self, c: str) -> None:
        """Append a single character, doubling the capacity when full."""
        if len(c) != 1:
            raise ValueError("add_char expects exactly one character")
        if len(self._chars) == self._capacity:
            self._grow()
        self._chars.append(c)

    def truncate(self, length: int) -> None:
        """Shorten the contents to ``length`` characters."""
        if not 0 <= length <= len(self._chars):
            raise ValueError("length must lie within the current contents")
        del self._chars[length:]

    def reset(self) -> None:
        """Empty the buffer, keeping its capacity."""
        self._chars.clear()

    def read_from(self, stream: TextIO) -> bool:
        """Replace the contents with up to ``capacity()`` characters read
        from ``stream``; return whether anything was read."""
        data = stream.read(self._capacity)
        self._chars = list(data)
        return len(data) > 0

    def printf(self, fmt: str, *args: Any) -> None:
        """Append ``fmt % args``, growing until it fits with a terminator."""
        text = fmt % args
        while len(text) >= self._capacity - len(self._chars):
            self._grow()
        self._chars.extend(text)
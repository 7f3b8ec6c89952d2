"""A chunked bump allocator handing out aligned slices of byte chunks."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_ALIGNMENT = 16


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


def _round_up(used: int, align: int) -> int:
    return (used + align - 1) & ~(align - 1)


@dataclass
class _Chunk:
    memory: bytearray
    used: int = 0


@dataclass(frozen=True)
class Allocation:
    """A region handed out by an :class:`Arena`."""

    chunk: int
    offset: int
    size: int
    memory: memoryview = field(compare=False, repr=False)


class Arena:
    """Bump allocation out of fixed-size chunks.

    Each allocation starts at an offset aligned to ``alignment``. When the
    current chunk cannot fit a request, a fresh chunk follows it.
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        alignment: int = DEFAULT_ALIGNMENT,
    ) -> None:
        if not _is_power_of_two(alignment):
            raise ValueError("alignment must be a power of two")
        if chunk_size <= 0:
            raise ValueError("chunk size must be positive")
        if alignment >= chunk_size:
            raise ValueError("alignment must be smaller than the chunk size")
        self.chunk_size = chunk_size
        self.alignment = alignment
        self._chunks: list[_Chunk] = [self._new_chunk()]
        self._current = 0

    def _new_chunk(self) -> _Chunk:
        return _Chunk(bytearray(self.chunk_size))

    def allocate(self, size: int) -> Allocation:
        """Allocate ``size`` bytes and return where they live."""
        if size < 0:
            raise ValueError("allocation size must not be negative")
        if size > self.chunk_size:
            raise ValueError("allocation larger than the arena chunk size")

        chunk = self._chunks[self._current]
        if chunk.used + size < len(chunk.memory):
            offset = chunk.used
        else:
            # A new chunk follows the current one; any later chunks are dropped.
            del self._chunks[self._current + 1:]
            chunk = self._new_chunk()
            self._chunks.append(chunk)
            self._current += 1
            offset = 0

        chunk.used = _round_up(offset + size, self.alignment)
        view = memoryview(chunk.memory)[offset:offset + size]
        return Allocation(self._current, offset, size, view)

    def reset(self) -> None:
        """Mark every chunk empty and resume allocating from the first."""
        for chunk in self._chunks:
            chunk.used = 0
        self._current = 0

    def chunk_count(self) -> int:
        """Number of chunks the arena currently holds."""
        return len(self._chunks)
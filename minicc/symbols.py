"""Symbol tables mapping interned identifiers to their declarations."""

from __future__ import annotations

from typing import Any, Optional

from minicc.errors import panic
from minicc.hash_map import HashMap


def _identifier_hash(identifier: Any) -> int:
    return getattr(identifier, "hash", id(identifier))


def _same_identifier(first: Any, second: Any) -> bool:
    return first is second


class SymbolTable:
    """Declarations keyed by identifier object identity.

    A declaration is stored under its ``identifier`` attribute. Identifiers
    are expected to be interned, so two distinct objects are distinct names.
    """

    def __init__(self) -> None:
        self._symbols = HashMap(_identifier_hash, _same_identifier)

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, identifier: Any) -> bool:
        return self.lookup(identifier) is not None

    def lookup(self, identifier: Any) -> Optional[Any]:
        """Return the declaration for ``identifier``, or ``None``."""
        return self._symbols.get(identifier)

    def insert(self, declaration: Any) -> None:
        """Add ``declaration``; its identifier must not be present yet."""
        identifier = declaration.identifier
        if identifier in self:
            panic("symbol already declared in this table")
        self._symbols.insert(identifier, declaration)
"""Building blocks for a small C compiler front end: hashing, containers,
arenas, C types, statement nodes, symbol tables and semantic checks."""

__version__ = "0.1.0"

__all__ = [
    "arena",
    "buffer",
    "errors",
    "hash_map",
    "hashing",
    "ptr_set",
    "semantic",
    "statements",
    "symbols",
    "typesys",
]
"""Fatal internal errors raised when the compiler reaches an impossible state."""

from __future__ import annotations

_PREFIX = "internal compiler error: "


class InternalCompilerError(RuntimeError):
    """Raised when an internal invariant of the compiler is broken."""

    def __init__(self, message: str) -> None:
        super().__init__(f"{_PREFIX}{message}")
        self.message = message


def panic(msg: str) -> None:
    """Abort the current operation with an :class:`InternalCompilerError`."""
    raise InternalCompilerError(msg)
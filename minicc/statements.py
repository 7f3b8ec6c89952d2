"""Statement nodes of the abstract syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Iterable, Optional

from minicc.errors import panic


class StatementKind(Enum):
    """What sort of statement a :class:`Statement` is."""

    ERROR = -1
    LABEL = 0
    CASE = 1
    DEFAULT = 2
    COMPOUND = 3
    EXPRESSION = 4
    IF = 5
    SWITCH = 6
    FOR = 7
    WHILE = 8
    DO_WHILE = 9
    GOTO = 10
    CONTINUE = 11
    BREAK = 12
    RETURN = 13
    EMPTY = 14
    DECLARATION = 15


@dataclass(eq=False)
class Statement:
    """Base of every statement; statements compare by identity."""

    kind: ClassVar[StatementKind]

    def is_kind(self, kind: StatementKind) -> bool:
        """Whether this statement is of the given kind."""
        return self.kind is kind


def _check_body_unset(current: Optional[Statement], what: str) -> None:
    if current is not None:
        panic(f"{what} statement already has a body")


@dataclass(eq=False)
class ErrorStatement(Statement):
    """Stands in for a statement that failed to parse."""

    kind: ClassVar[StatementKind] = StatementKind.ERROR


@dataclass(eq=False)
class LabelStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.LABEL

    identifier_location: Any
    colon_location: Any
    label: Any
    statement: Optional[Statement]


@dataclass(eq=False)
class CaseStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.CASE

    case_location: Any
    colon_location: Any
    constant_expression: Any
    value: Any
    statement: Optional[Statement]
    switch_statement: Optional[Statement]


@dataclass(eq=False)
class DefaultStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.DEFAULT

    default_location: Any
    colon_location: Any
    statement: Optional[Statement]
    switch_statement: Optional[Statement]


@dataclass(eq=False)
class CompoundStatement(Statement):
    """A braced block; the given statements are copied into a tuple."""

    kind: ClassVar[StatementKind] = StatementKind.COMPOUND

    opening_curly: Any
    closing_curly: Any
    statements: tuple = field(default=())

    def __post_init__(self) -> None:
        self.statements = tuple(self.statements)

    @classmethod
    def from_statements(
        cls, opening_curly: Any, closing_curly: Any, statements: Iterable[Statement]
    ) -> "CompoundStatement":
        return cls(opening_curly, closing_curly, tuple(statements))

    @property
    def statement_count(self) -> int:
        return len(self.statements)


@dataclass(eq=False)
class ExpressionStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.EXPRESSION

    semi_location: Any
    expression: Any


@dataclass(eq=False)
class IfStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.IF

    if_location: Any
    left_paren: Any
    right_paren: Any
    else_location: Any
    condition: Any
    true_part: Optional[Statement]
    false_part: Optional[Statement] = None


@dataclass(eq=False)
class SwitchStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.SWITCH

    switch_location: Any
    left_paren: Any
    right_paren: Any
    condition: Any
    body: Optional[Statement] = None

    def set_body(self, body: Statement) -> None:
        """Attach the body; it may only be set once."""
        _check_body_unset(self.body, "switch")
        self.body = body


@dataclass(eq=False)
class WhileStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.WHILE

    while_location: Any
    left_paren: Any
    right_paren: Any
    condition: Any
    body: Optional[Statement] = None

    def set_body(self, body: Statement) -> None:
        """Attach the body; it may only be set once."""
        _check_body_unset(self.body, "while")
        self.body = body


@dataclass(eq=False)
class DoWhileStatement(Statement):
    """A do-while loop, known only by its ``do`` until :meth:`finish`."""

    kind: ClassVar[StatementKind] = StatementKind.DO_WHILE

    do_location: Any
    while_location: Any = None
    left_paren: Any = None
    right_paren: Any = None
    condition: Any = None
    body: Optional[Statement] = None

    def finish(
        self,
        while_location: Any,
        left_paren: Any,
        right_paren: Any,
        condition: Any,
        body: Optional[Statement],
    ) -> None:
        """Fill in everything parsed after the ``do`` keyword."""
        self.while_location = while_location
        self.left_paren = left_paren
        self.right_paren = right_paren
        self.condition = condition
        self.body = body


@dataclass(eq=False)
class ForStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.FOR

    for_location: Any
    left_paren: Any
    right_paren: Any
    init: Optional[Statement]
    condition: Any
    increment: Any
    body: Optional[Statement] = None

    def set_body(self, body: Statement) -> None:
        """Attach the body; it may only be set once."""
        _check_body_unset(self.body, "for")
        self.body = body


@dataclass(eq=False)
class GotoStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.GOTO

    goto_location: Any
    semi_location: Any
    label: Any


@dataclass(eq=False)
class ContinueStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.CONTINUE

    continue_location: Any
    semi_location: Any
    target: Optional[Statement]


@dataclass(eq=False)
class BreakStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.BREAK

    break_location: Any
    semi_location: Any
    target: Optional[Statement]


@dataclass(eq=False)
class ReturnStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.RETURN

    return_location: Any
    semi_location: Any
    expression: Any = None


@dataclass(eq=False)
class EmptyStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.EMPTY

    semi_location: Any


@dataclass(eq=False)
class DeclarationStatement(Statement):
    kind: ClassVar[StatementKind] = StatementKind.DECLARATION

    semi_location: Any
    declaration: Any
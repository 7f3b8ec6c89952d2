"""Semantic checks on declaration specifiers and label handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Optional

from minicc.errors import panic
from minicc.typesys import (
    QualifiedType,
    SpecifierComplex,
    SpecifierSign,
    SpecifierType,
    SpecifierWidth,
    StorageSpecifier,
    FunctionSpecifier,
    Type,
    TypeBuiltins,
    TypeQualifiers,
)


class Severity(Enum):
    """How serious a diagnostic is."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A message reported against a source location."""

    severity: Severity
    location: Any
    message: str

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message}"


@dataclass
class DeclarationSpecifiers:
    """The specifiers collected while parsing the start of a declaration."""

    location: Any = None
    storage: StorageSpecifier = StorageSpecifier.NONE
    qualifiers: TypeQualifiers = TypeQualifiers.NONE
    function_specifiers: FunctionSpecifier = FunctionSpecifier.NONE
    type_spec_type: SpecifierType = SpecifierType.NONE
    type_spec_width: SpecifierWidth = SpecifierWidth.NONE
    type_spec_sign: SpecifierSign = SpecifierSign.NONE
    type_spec_complex: SpecifierComplex = SpecifierComplex.NONE


@dataclass(eq=False)
class LabelDeclaration:
    """A label; ``implicit`` while it has only been seen in ``goto``."""

    identifier: Hashable
    location: Any
    implicit: bool = False


class FunctionScope:
    """The labels of one function body."""

    def __init__(self) -> None:
        self._labels: dict[Hashable, LabelDeclaration] = {}
        self.used_labels: list[LabelDeclaration] = []

    def lookup(
        self, name: Hashable, include_implicit: bool = True
    ) -> Optional[LabelDeclaration]:
        """Find a label; implicit ones only when ``include_implicit``."""
        label = self._labels.get(name)
        if label is None or (label.implicit and not include_implicit):
            return None
        return label

    def insert(self, declaration: LabelDeclaration) -> None:
        """Add a label; labels created by a ``goto`` are also recorded as used."""
        if declaration.identifier in self._labels:
            panic("label already present in function scope")
        self._labels[declaration.identifier] = declaration
        if declaration.implicit:
            self.used_labels.append(declaration)


class SemanticChecker:
    """Checks declarations and labels, collecting diagnostics."""

    def __init__(self, builtins: Optional[TypeBuiltins] = None) -> None:
        self.builtins = builtins if builtins is not None else TypeBuiltins.create()
        self.function: Optional[FunctionScope] = None
        self.diagnostics: list[Diagnostic] = []

    # Diagnostics

    def _error(self, location: Any, message: str) -> None:
        self.diagnostics.append(Diagnostic(Severity.ERROR, location, message))

    def _warning(self, location: Any, message: str) -> None:
        self.diagnostics.append(Diagnostic(Severity.WARNING, location, message))

    @property
    def error_count(self) -> int:
        return sum(d.severity is Severity.ERROR for d in self.diagnostics)

    # Declaration specifiers

    def finish_declaration_specifiers(self, specifiers: DeclarationSpecifiers) -> None:
        """Validate the specifier combination, repairing it after each error."""
        spec = specifiers

        if spec.type_spec_sign is not SpecifierSign.NONE:
            if spec.type_spec_type is SpecifierType.NONE:
                spec.type_spec_type = SpecifierType.INT
            elif spec.type_spec_type is not SpecifierType.INT:
                self._error(
                    spec.location,
                    f"'{spec.type_spec_type.spelling()}' cannot be signed or unsigned",
                )
                spec.type_spec_sign = SpecifierSign.NONE

        width = spec.type_spec_width
        if width is not SpecifierWidth.NONE:
            allowed = {SpecifierType.INT}
            if width is SpecifierWidth.LONG:
                allowed.add(SpecifierType.DOUBLE)
            if spec.type_spec_type is SpecifierType.NONE:
                spec.type_spec_type = SpecifierType.INT
            elif spec.type_spec_type not in allowed:
                self._error(
                    spec.location,
                    f"'{width.spelling()} {spec.type_spec_type.spelling()}' is invalid",
                )
                spec.type_spec_type = SpecifierType.INT

        complex_spec = spec.type_spec_complex
        if complex_spec is not SpecifierComplex.NONE:
            if spec.type_spec_type is SpecifierType.NONE:
                self._warning(
                    spec.location,
                    f"'{complex_spec.spelling()}' requires type specifier; "
                    "assuming 'double'",
                )
                spec.type_spec_type = SpecifierType.DOUBLE
            elif spec.type_spec_type not in (SpecifierType.FLOAT, SpecifierType.DOUBLE):
                self._error(
                    spec.location,
                    f"'{complex_spec.spelling()} "
                    f"{spec.type_spec_type.spelling()}' is invalid",
                )
                spec.type_spec_complex = SpecifierComplex.NONE

        if spec.type_spec_type is SpecifierType.NONE:
            self._error(spec.location, "type specifier missing; defaults to 'int'")
            spec.type_spec_type = SpecifierType.INT

    def qualified_type_from_specifiers(
        self, specifiers: DeclarationSpecifiers
    ) -> QualifiedType:
        """Map finished specifiers to a builtin type with their qualifiers."""
        b = self.builtins
        kind = specifiers.type_spec_type
        sign = specifiers.type_spec_sign
        width = specifiers.type_spec_width
        type_: Optional[Type] = None

        if kind is SpecifierType.VOID:
            type_ = b.type_void
        elif kind is SpecifierType.CHAR:
            type_ = {
                SpecifierSign.NONE: b.type_char,
                SpecifierSign.SIGNED: b.type_signed_char,
            }.get(sign, b.type_unsigned_char)
        elif kind is SpecifierType.INT:
            if sign is not SpecifierSign.UNSIGNED:
                table = {
                    SpecifierWidth.NONE: b.type_signed_int,
                    SpecifierWidth.SHORT: b.type_signed_short,
                    SpecifierWidth.LONG: b.type_signed_long,
                    SpecifierWidth.LONG_LONG: b.type_signed_long_long,
                }
            else:
                table = {
                    SpecifierWidth.NONE: b.type_unsigned_int,
                    SpecifierWidth.SHORT: b.type_unsigned_short,
                    SpecifierWidth.LONG: b.type_unsigned_long,
                    SpecifierWidth.LONG_LONG: b.type_unsigned_long_long,
                }
            type_ = table[width]
        elif kind is SpecifierType.FLOAT:
            type_ = b.type_float
        elif kind is SpecifierType.DOUBLE:
            type_ = b.type_long_double if width is SpecifierWidth.LONG else b.type_double
        elif kind is SpecifierType.BOOL:
            type_ = b.type_bool
        elif kind is SpecifierType.ENUM:
            panic("unimplemented -> enum type should be in declaration")
        elif kind is SpecifierType.STRUCT:
            panic("unimplemented -> struct type should be in declaration")
        elif kind is SpecifierType.UNION:
            panic("unimplemented -> union type should be in declaration")
        elif kind is SpecifierType.TYPENAME:
            panic("unimplemented -> typename should be in specifiers")
        else:
            panic("unknown type")

        assert type_ is not None
        return QualifiedType(type_, TypeQualifiers(specifiers.qualifiers))

    # Function scopes and labels

    def push_function_scope(self, function: FunctionScope) -> None:
        """Enter a function body; function scopes do not nest."""
        if self.function is not None:
            panic("should not have a function scope")
        self.function = function

    def pop_function_scope(self) -> None:
        """Leave the current function body."""
        if self.function is None:
            panic("should have a function scope")
        self.function = None

    def _current_function(self) -> FunctionScope:
        if self.function is None:
            panic("no function scope is active")
        assert self.function is not None
        return self.function

    def lookup_label(self, name: Hashable) -> Optional[LabelDeclaration]:
        """Find a label in the current function, implicit ones included."""
        return self._current_function().lookup(name, True)

    def act_on_label(
        self, identifier: Hashable, location: Any
    ) -> Optional[LabelDeclaration]:
        """Handle a label definition; ``None`` if it redefines a label."""
        function = self._current_function()
        current = function.lookup(identifier, True)
        if current is None:
            declaration = LabelDeclaration(identifier, location, implicit=False)
            function.insert(declaration)
            return declaration

        if not current.implicit:
            self._error(location, f"redefinition of label '{identifier}'")
            return None

        current.implicit = False
        current.location = location
        return current

    def act_on_goto(self, identifier: Hashable, location: Any) -> LabelDeclaration:
        """Return the label a ``goto`` names, creating it implicitly if unseen."""
        function = self._current_function()
        declaration = function.lookup(identifier, True)
        if declaration is not None:
            return declaration
        declaration = LabelDeclaration(identifier, location, implicit=True)
        function.insert(declaration)
        return declaration

    def act_on_end_of_function(self) -> None:
        """Report every label used by a ``goto`` but never defined."""
        function = self._current_function()
        for declaration in function.used_labels:
            if function.lookup(declaration.identifier, False) is None:
                self._error(
                    declaration.location,
                    f"use of undeclared label '{declaration.identifier}'",
                )
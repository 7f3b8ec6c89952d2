"""C type kinds, declaration specifiers, qualified types and the builtin types."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum, IntEnum, IntFlag

_INTERNAL_ERROR = "<internal-error>"


def _spelling_of(table: dict, value: object, what: str) -> str:
    try:
        return table[value]
    except KeyError:
        raise ValueError(f"no spelling for {what} {value!r}") from None


class TypeKind(Enum):
    """What sort of type a :class:`Type` is."""

    VOID = 0
    BOOL = 1
    CHAR = 2
    S_CHAR = 3
    U_CHAR = 4
    S_SHORT = 5
    U_SHORT = 6
    S_INT = 7
    U_INT = 8
    S_LONG = 9
    U_LONG = 10
    S_LONG_LONG = 11
    U_LONG_LONG = 12
    FLOAT = 13
    DOUBLE = 14
    LONG_DOUBLE = 15
    IMAGINARY = 16
    COMPLEX = 17
    ARRAY = 18
    STRUCT = 19
    UNION = 20
    ENUM = 21
    FUNCTION = 22
    POINTER = 23
    TYPEDEF = 24
    ERROR = 25


class TypeQualifiers(IntFlag):
    """The set of qualifiers applied to a type."""

    NONE = 0
    CONST = 1 << 0
    RESTRICT = 1 << 1
    VOLATILE = 1 << 2

    def spelling(self) -> str:
        """Keyword for a single qualifier; combinations have no spelling."""
        return _spelling_of(_QUALIFIER_NAMES, int(self), "type qualifier")

    def is_const(self) -> bool:
        return bool(self & TypeQualifiers.CONST)

    def is_restrict(self) -> bool:
        return bool(self & TypeQualifiers.RESTRICT)

    def is_volatile(self) -> bool:
        return bool(self & TypeQualifiers.VOLATILE)

    def already_has(self, other: "TypeQualifiers") -> bool:
        """Whether any qualifier of ``other`` is already present."""
        return bool(self & other)


_QUALIFIER_NAMES = {
    0: _INTERNAL_ERROR,
    1: "const",
    2: "restrict",
    4: "volatile",
}


class StorageSpecifier(IntEnum):
    NONE = 0
    TYPEDEF = 1
    EXTERN = 2
    STATIC = 3
    AUTO = 4
    REGISTER = 5

    def spelling(self) -> str:
        return _STORAGE_NAMES[self]


_STORAGE_NAMES = {
    StorageSpecifier.NONE: _INTERNAL_ERROR,
    StorageSpecifier.AUTO: "auto",
    StorageSpecifier.EXTERN: "extern",
    StorageSpecifier.REGISTER: "register",
    StorageSpecifier.STATIC: "static",
    StorageSpecifier.TYPEDEF: "typedef",
}


class FunctionSpecifier(IntFlag):
    NONE = 0
    INLINE = 1 << 0

    def spelling(self) -> str:
        return _spelling_of(_FUNCTION_NAMES, int(self), "function specifier")


_FUNCTION_NAMES = {0: _INTERNAL_ERROR, 1: "inline"}


class SpecifierType(IntEnum):
    NONE = 0
    VOID = 1
    CHAR = 2
    INT = 3
    FLOAT = 4
    DOUBLE = 5
    BOOL = 6
    ENUM = 7
    STRUCT = 8
    UNION = 9
    TYPENAME = 10

    def spelling(self) -> str:
        return _TYPE_SPEC_NAMES[self]


_TYPE_SPEC_NAMES = {
    SpecifierType.NONE: _INTERNAL_ERROR,
    SpecifierType.VOID: "void",
    SpecifierType.CHAR: "char",
    SpecifierType.INT: "int",
    SpecifierType.FLOAT: "float",
    SpecifierType.DOUBLE: "double",
    SpecifierType.BOOL: "bool",
    SpecifierType.ENUM: "enum",
    SpecifierType.STRUCT: "struct",
    SpecifierType.UNION: "union",
    SpecifierType.TYPENAME: "type-name",
}


class SpecifierWidth(IntEnum):
    NONE = 0
    SHORT = 1 << 0
    LONG = 1 << 1
    LONG_LONG = 1 << 2

    def spelling(self) -> str:
        return _WIDTH_NAMES[self]


_WIDTH_NAMES = {
    SpecifierWidth.NONE: _INTERNAL_ERROR,
    SpecifierWidth.SHORT: "short",
    SpecifierWidth.LONG: "long",
    SpecifierWidth.LONG_LONG: "long long",
}


class SpecifierSign(IntEnum):
    NONE = 0
    SIGNED = 1
    UNSIGNED = 2

    def spelling(self) -> str:
        return _SIGN_NAMES[self]


_SIGN_NAMES = {
    SpecifierSign.NONE: _INTERNAL_ERROR,
    SpecifierSign.SIGNED: "signed",
    SpecifierSign.UNSIGNED: "unsigned",
}


class SpecifierComplex(IntEnum):
    NONE = 0
    COMPLEX = 1
    IMAGINARY = 2

    def spelling(self) -> str:
        return _COMPLEX_NAMES[self]


_COMPLEX_NAMES = {
    SpecifierComplex.NONE: _INTERNAL_ERROR,
    SpecifierComplex.COMPLEX: "_Complex",
    SpecifierComplex.IMAGINARY: "_Imaginairy",
}


@dataclass(eq=False)
class Type:
    """A type, compared by identity so that builtins are canonical."""

    kind: TypeKind
    size: int
    alignment: int
    is_complete: bool


@dataclass(frozen=True)
class QualifiedType:
    """A type together with the qualifiers applied to it."""

    type: Type
    qualifiers: TypeQualifiers = TypeQualifiers.NONE

    def is_equal(self, other: "QualifiedType") -> bool:
        """Same type object and the same qualifiers."""
        return self.type is other.type and self.qualifiers == other.qualifiers

    def is_equal_canonical(self, other: "QualifiedType") -> bool:
        """Same type object, ignoring qualifiers."""
        return self.type is other.type


@dataclass(frozen=True)
class TypeBuiltins:
    """The builtin arithmetic and void types of a translation unit."""

    type_void: Type
    type_bool: Type
    type_char: Type
    type_signed_char: Type
    type_unsigned_char: Type
    type_signed_short: Type
    type_unsigned_short: Type
    type_signed_int: Type
    type_unsigned_int: Type
    type_signed_long: Type
    type_unsigned_long: Type
    type_signed_long_long: Type
    type_unsigned_long_long: Type
    type_float: Type
    type_double: Type
    type_long_double: Type

    @classmethod
    def create(cls) -> "TypeBuiltins":
        """Build a fresh set of builtin types; ``signed char`` is ``char``."""
        char = Type(TypeKind.CHAR, 1, 1, True)
        return cls(
            type_void=Type(TypeKind.VOID, 0, 0, False),
            type_bool=Type(TypeKind.BOOL, 1, 1, True),
            type_char=char,
            type_signed_char=char,
            type_unsigned_char=Type(TypeKind.U_CHAR, 1, 1, True),
            type_signed_short=Type(TypeKind.S_SHORT, 2, 2, True),
            type_unsigned_short=Type(TypeKind.U_SHORT, 2, 2, True),
            type_signed_int=Type(TypeKind.S_INT, 4, 4, True),
            type_unsigned_int=Type(TypeKind.U_INT, 4, 4, True),
            type_signed_long=Type(TypeKind.S_LONG, 8, 8, True),
            type_unsigned_long=Type(TypeKind.U_LONG, 8, 8, True),
            type_signed_long_long=Type(TypeKind.S_LONG_LONG, 8, 8, True),
            type_unsigned_long_long=Type(TypeKind.U_LONG_LONG, 8, 8, True),
            type_float=Type(TypeKind.FLOAT, 4, 4, True),
            type_double=Type(TypeKind.DOUBLE, 8, 8, True),
            type_long_double=Type(TypeKind.LONG_DOUBLE, 16, 16, True),
        )

    def all_types(self) -> list[Type]:
        """Every builtin field in declaration order (aliases included)."""
        return [getattr(self, f.name) for f in fields(self)]
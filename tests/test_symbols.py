from dataclasses import dataclass

import pytest

from minicc.errors import InternalCompilerError
from minicc.hashing import string_hash
from minicc.symbols import SymbolTable


@dataclass(eq=False)
class Identifier:
    name: str
    hash: int


@dataclass(eq=False)
class Declaration:
    identifier: Identifier


def make_identifier(name):
    return Identifier(name, string_hash(name))


def test_empty_table():
    table = SymbolTable()
    ident = make_identifier("x")
    assert len(table) == 0
    assert table.lookup(ident) is None
    assert ident not in table


def test_insert_and_lookup():
    table = SymbolTable()
    ident = make_identifier("main")
    decl = Declaration(ident)
    table.insert(decl)
    assert table.lookup(ident) is decl
    assert ident in table
    assert len(table) == 1


def test_duplicate_insert_raises():
    table = SymbolTable()
    ident = make_identifier("y")
    first = Declaration(ident)
    table.insert(first)
    with pytest.raises(InternalCompilerError):
        table.insert(Declaration(ident))
    assert table.lookup(ident) is first
    assert len(table) == 1


def test_identifiers_compared_by_identity():
    table = SymbolTable()
    original = make_identifier("same")
    twin = make_identifier("same")
    decl = Declaration(original)
    table.insert(decl)
    assert table.lookup(twin) is None
    other = Declaration(twin)
    table.insert(other)
    assert table.lookup(original) is decl
    assert table.lookup(twin) is other


def test_many_symbols_survive_growth():
    table = SymbolTable()
    idents = [make_identifier(f"name{i}") for i in range(200)]
    decls = [Declaration(ident) for ident in idents]
    for decl in decls:
        table.insert(decl)
    assert len(table) == len(decls)
    assert all(table.lookup(d.identifier) is d for d in decls)


def test_identifier_without_hash_attribute():
    class Bare:
        pass

    table = SymbolTable()
    ident = Bare()
    decl = Declaration(ident)
    table.insert(decl)
    assert table.lookup(ident) is decl
    assert Bare() not in table
# minicc

Pieces of a small C compiler front end, usable on their own. There are no
dependencies beyond the standard library.

## Modules

- `minicc.errors`: `InternalCompilerError` (a `RuntimeError` whose message
  starts with `internal compiler error: `) and `panic(msg)`, which raises it.
- `minicc.hashing`: 32-bit FNV-1a hashing. `fnv1a_32(data)` hashes bytes;
  `string_hash(text)` hashes the UTF-8 encoding of a string.
- `minicc.hash_map`: `HashMap(hash_func, key_eq, free_func=None)`, a
  linear-probing map with caller-supplied hashing and key equality. It
  starts with 16 slots and doubles when more than half are in use.
  `insert` keeps existing data and returns it; `insert_force` replaces it and
  returns the old data; `remove` leaves a tombstone and calls
  `free_func(key, data)` if given; `clear` calls it for every entry and
  shrinks back to 16 slots. `get` returns `None` for a missing key, so
  `None` cannot be stored (`ValueError`). `capacity()` reports the slot count.
- `minicc.ptr_set`: `PointerSet`, a set that compares members by identity
  (`add`, `in`, `len`).
- `minicc.buffer`: `Buffer(capacity=40)`, a growable character buffer whose
  capacity doubles when full. `Buffer.from_str`, `Buffer.from_format(fmt,
  *args)` and `printf(fmt, *args)` use `%`-formatting; `add_char`,
  `truncate`, `reset`, `read_from(stream)` (reads up to `capacity()`
  characters, replacing the contents), indexing (out-of-range raises
  `InternalCompilerError`) and comparison with other buffers or strings.
- `minicc.arena`: `Arena(chunk_size=4096, alignment=16)`, a bump allocator
  over byte chunks. `allocate(size)` returns an `Allocation` with the chunk
  index, the aligned offset, the size and a `memoryview` of the bytes;
  `reset()` rewinds to the first chunk; `chunk_count()` reports the chunks.
- `minicc.typesys`: `TypeKind`, `TypeQualifiers`, `StorageSpecifier`,
  `FunctionSpecifier` and the `Specifier*` enums, each with `spelling()`;
  `Type` (compared by identity), `QualifiedType` with `is_equal` and
  `is_equal_canonical`, and `TypeBuiltins.create()` for the builtin
  arithmetic and void types (`signed char` is the same object as `char`).
- `minicc.statements`: the statement nodes (`IfStatement`,
  `WhileStatement`, `ForStatement`, `SwitchStatement`, `DoWhileStatement`,
  `CompoundStatement`, `LabelStatement`, `GotoStatement`, ...), each with a
  `StatementKind` and `is_kind()`. Loop and switch bodies are attached once
  with `set_body`; `DoWhileStatement.finish` fills in everything after `do`.
- `minicc.symbols`: `SymbolTable`, mapping identifier objects (by identity)
  to declarations stored under their `identifier` attribute. Inserting a
  second declaration for the same identifier raises `InternalCompilerError`.
- `minicc.semantic`: `SemanticChecker`, which completes
  `DeclarationSpecifiers` (filling in an implied `int` or `double` and
  repairing invalid combinations), maps them to a builtin `QualifiedType`,
  and tracks labels and `goto`s inside a `FunctionScope`. Problems are
  collected as `Diagnostic` records in `checker.diagnostics`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from minicc.typesys import TypeBuiltins, SpecifierSign
from minicc.semantic import DeclarationSpecifiers, SemanticChecker, FunctionScope

checker = SemanticChecker(TypeBuiltins.create())

specs = DeclarationSpecifiers(type_spec_sign=SpecifierSign.UNSIGNED)
checker.finish_declaration_specifiers(specs)   # 'unsigned' alone becomes 'unsigned int'
qualified = checker.qualified_type_from_specifiers(specs)
assert qualified.type is checker.builtins.type_unsigned_int

checker.push_function_scope(FunctionScope())
checker.act_on_goto("out", 3)                  # label used before it is defined
checker.act_on_end_of_function()               # reports the undefined label
for diagnostic in checker.diagnostics:
    print(diagnostic)                          # error: use of undeclared label 'out'
checker.pop_function_scope()
```

## What it does not do

This package has no lexer, preprocessor or parser and no command-line
compiler: nothing here reads C source text. The statement nodes and the
semantic checker are meant to be driven by code that does. Only the builtin
arithmetic and void types are modelled; asking `qualified_type_from_specifiers`
for an `enum`, `struct`, `union` or typedef name raises
`InternalCompilerError`, and pointer, array and function types are not built.
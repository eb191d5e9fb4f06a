# rak

`rak` holds the building blocks of a bytecode compiler for the Rak
programming language: bytecode instructions and chunks with a readable
listing, array and callable values, tokens with a lookahead cursor, and the
scope and loop bookkeeping a compiler needs for local variables and `break`
jumps.

## What is inside

- `rak.chunk`: `Opcode`, the instruction set; `Instruction`, an opcode with
  an operand checked against its range (0..255 for one-byte operands such
  as `LOAD_CONST` or `CALL`, 0..65535 for `PUSH_INT` and the jumps, none
  for the rest); and `Chunk`, with `append_const` (at most 256 constants),
  `append_instr` (at most 65536 instructions), `patch` and `clear`.
  Exceeding a limit raises `RakError`.
- `rak.dump`: `format_chunk` returns a listing of a chunk, and
  `dump_chunk` writes it to a stream (stdout by default).
- `rak.array`: `Array`, an array value that tracks its capacity. Copying
  operations return a new array (`copy`, `append`, `set`, `remove_at`,
  `concat`, `slice`); in-place ones change it (`inplace_append`,
  `inplace_set`, `inplace_remove_at`, `inplace_concat`, `inplace_clear`).
  `ensure_capacity` grows the capacity by doubling, and `to_display`
  renders it as `[1, 2, nil]`. A bad index raises `IndexError`; a slice out
  of bounds raises `RakError`.
- `rak.closure`: `CallableKind`, `Function` (a name, an arity and a
  `Chunk`), `NativeFunction` (a name, an arity and a Python callable) and
  `Closure`, which checks that its callable matches its kind.
- `rak.tokens`: `TokenKind`, `Token` and `TokenStream`, a one-token
  lookahead cursor with `match`, `advance` and `consume`, which ends in an
  endless end-of-file token. `unexpected_token_error` and
  `expected_token_error` build the `CompileError` for a wrong token.
- `rak.scope`: `Scope`, `Symbol` and `Loop`. `Scope` defines and resolves
  locals by name across nested block depths, emits a `POP` for each local
  when a scope ends, and patches the recorded `break` jumps of a loop to
  point past its end.
- `rak.errors`: `RakError` and its subclass `CompileError`;
  `RakError.report` writes `ERROR: <message>` to a stream (stderr by
  default).

## Usage

Build a chunk and list it:

```python
from rak.chunk import Chunk, Instruction, Opcode
from rak.dump import dump_chunk

chunk = Chunk()
chunk.append_instr(Instruction(Opcode.PUSH_INT, 1))
chunk.append_instr(Instruction(Opcode.PUSH_NIL))
chunk.append_instr(Instruction(Opcode.RETURN))
dump_chunk(chunk)
```

```
0 constant(s)
3 instruction(s)
[0000] PUSH_INT        1
[0001] PUSH_NIL       
[0002] RETURN         
```

Track locals while emitting code:

```python
from rak.chunk import Chunk
from rak.errors import CompileError
from rak.scope import Scope
from rak.tokens import Token, TokenKind

chunk = Chunk()
scope = Scope()
scope.begin_scope()
x = Token(TokenKind.IDENT, "x", 1, 5)
scope.define_local(x)          # 0
scope.resolve_local(x)         # 0
try:
    scope.define_local(x)
except CompileError as error:
    error.report()             # ERROR: duplicate local variable 'x' at 1:5
scope.end_scope(chunk)         # emits one POP
```

Work with arrays:

```python
from rak.array import Array

numbers = Array([1, 2])
numbers.append(3).to_display()   # '[1, 2, 3]'
numbers.to_display()             # '[1, 2]'
```

## What this package does not do

There is no lexer: tokens have to be built as `Token` values. There is no
parser or code generator that turns tokens into a chunk, no table of
builtin globals, no machine that runs a chunk, and no command-line program.
The package supplies the data structures and bookkeeping such parts would
be built on.

## Tests

```
pip install -e ".[test]"
pytest
```
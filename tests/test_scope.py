import pytest

from rak.chunk import Chunk, Instruction, Opcode
from rak.errors import CompileError
from rak.scope import Scope
from rak.tokens import Token, TokenKind


def ident(name, line=1, column=1):
    return Token(TokenKind.IDENT, name, line, column)


def test_define_and_resolve():
    scope = Scope()
    scope.begin_scope()
    a = scope.define_local(ident("a"))
    b = scope.define_local(ident("b"))
    assert scope.resolve_local(ident("a")) == a
    assert scope.resolve_local(ident("b")) == b
    assert a != b
    assert scope.resolve_local(ident("c")) is None


def test_shadowing_in_inner_scope():
    scope = Scope()
    chunk = Chunk()
    scope.begin_scope()
    outer = scope.define_local(ident("x"))
    scope.begin_scope()
    inner = scope.define_local(ident("x"))
    assert scope.resolve_local(ident("x")) == inner
    scope.end_scope(chunk)
    assert scope.resolve_local(ident("x")) == outer


def test_duplicate_in_same_scope_raises():
    scope = Scope()
    scope.begin_scope()
    scope.define_local(ident("x"))
    with pytest.raises(CompileError) as info:
        scope.define_local(ident("x", 2, 7))
    assert str(info.value) == "duplicate local variable 'x' at 2:7"


def test_end_scope_pops_each_local():
    scope = Scope()
    chunk = Chunk()
    scope.begin_scope()
    scope.define_local(ident("keep"))
    scope.begin_scope()
    names = ["p", "q", "r"]
    for name in names:
        scope.define_local(ident(name))
    scope.end_scope(chunk)
    assert chunk.instrs == [Instruction(Opcode.POP)] * len(names)
    assert [s.token.text for s in scope.symbols] == ["keep"]


def test_too_many_locals():
    scope = Scope()
    scope.begin_scope()
    with pytest.raises(CompileError, match="too many local variables"):
        for i in range(1000):
            scope.define_local(ident(f"v{i}"))
    assert scope.resolve_local(ident("v0")) == 0


def test_breaks_patched_to_loop_end():
    scope = Scope()
    chunk = Chunk()
    chunk.append_instr(Instruction(Opcode.PUSH_NIL))
    loop = scope.begin_loop(chunk)
    assert loop.offset == len(chunk.instrs)
    jump = chunk.append_instr(Instruction(Opcode.NOP))
    scope.add_break(ident("break"), jump)
    chunk.append_instr(Instruction(Opcode.JUMP, loop.offset))
    end = len(chunk.instrs)
    scope.end_loop(chunk)
    assert chunk.instrs[jump] == Instruction(Opcode.JUMP, end)
    assert scope.loop is None


def test_nested_loops_restore_parent():
    scope = Scope()
    chunk = Chunk()
    outer = scope.begin_loop(chunk)
    inner = scope.begin_loop(chunk)
    assert inner.parent is outer
    scope.end_loop(chunk)
    assert scope.loop is outer


def test_break_outside_loop_raises():
    scope = Scope()
    with pytest.raises(CompileError) as info:
        scope.add_break(Token(TokenKind.BREAK_KW, "break", 3, 5), 0)
    assert str(info.value) == "break statement not in loop at 3:5"


def test_too_many_breaks():
    scope = Scope()
    chunk = Chunk()
    scope.begin_loop(chunk)
    with pytest.raises(CompileError, match="too many break statements in loop"):
        for _ in range(1000):
            jump = chunk.append_instr(Instruction(Opcode.NOP))
            scope.add_break(Token(TokenKind.BREAK_KW, "break"), jump)
    assert len(scope.loop.jumps) < len(chunk.instrs)
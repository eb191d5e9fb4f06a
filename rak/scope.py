"""Local variable scopes and loop bookkeeping for the compiler."""

from __future__ import annotations

from dataclasses import dataclass, field

from rak.chunk import Chunk, Instruction, Opcode
from rak.errors import CompileError
from rak.tokens import Token

_MAX_LOCAL_INDEX = 0xFF
_MAX_BREAKS = 0xFF


@dataclass(frozen=True)
class Symbol:
    """A named local slot defined at a given scope depth."""

    token: Token
    index: int
    depth: int = 0


@dataclass
class Loop:
    """An enclosing loop: its start offset and the breaks to patch."""

    offset: int
    parent: Loop | None = None
    jumps: list[int] = field(default_factory=list)


class Scope:
    """Tracks the locals in scope and the innermost enclosing loop."""

    def __init__(self) -> None:
        self.symbols: list[Symbol] = []
        self.depth = -1
        self.loop: Loop | None = None

    def begin_scope(self) -> None:
        self.depth += 1

    def end_scope(self, chunk: Chunk) -> None:
        """Leave the current scope, popping its locals off the stack."""
        while self.symbols and self.symbols[-1].depth == self.depth:
            chunk.append_instr(Instruction(Opcode.POP))
            self.symbols.pop()
        self.depth -= 1

    def define_local(self, token: Token) -> int:
        """Define a local in the current scope and return its slot."""
        for sym in reversed(self.symbols):
            if sym.depth != self.depth:
                break
            if sym.token.text == token.text:
                raise CompileError(
                    f"duplicate local variable '{token.text}' "
                    f"at {token.line}:{token.column}"
                )
        index = len(self.symbols)
        if index > _MAX_LOCAL_INDEX:
            raise CompileError(
                f"too many local variables at {token.line}:{token.column}"
            )
        self.symbols.append(Symbol(token, index, self.depth))
        return index

    def resolve_local(self, token: Token) -> int | None:
        """Return the slot of the innermost local named like ``token``."""
        for sym in reversed(self.symbols):
            if sym.token.text == token.text:
                return sym.index
        return None

    def begin_loop(self, chunk: Chunk) -> Loop:
        """Enter a loop starting at the chunk's current end."""
        self.loop = Loop(offset=len(chunk.instrs), parent=self.loop)
        return self.loop

    def end_loop(self, chunk: Chunk) -> None:
        """Leave the innermost loop, pointing its breaks past the chunk's end."""
        if self.loop is None:
            raise CompileError("no loop to end")
        target = Instruction(Opcode.JUMP, len(chunk.instrs))
        for jump in self.loop.jumps:
            chunk.patch(jump, target)
        self.loop = self.loop.parent

    def add_break(self, token: Token, jump: int) -> None:
        """Record a break jump at ``jump`` to be patched when the loop ends."""
        if self.loop is None:
            raise CompileError(
                f"break statement not in loop at {token.line}:{token.column}"
            )
        if len(self.loop.jumps) >= _MAX_BREAKS:
            raise CompileError(
                f"too many break statements in loop at {token.line}:{token.column}"
            )
        self.loop.jumps.append(jump)
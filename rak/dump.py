"""Human-readable listing of a bytecode chunk."""

from __future__ import annotations

import sys
from typing import TextIO

from rak.chunk import Chunk, Opcode

_BYTE_OPERAND = frozenset({
    Opcode.LOAD_CONST, Opcode.LOAD_GLOBAL, Opcode.LOAD_LOCAL,
    Opcode.STORE_LOCAL, Opcode.FETCH_LOCAL, Opcode.NEW_ARRAY,
    Opcode.NEW_RECORD, Opcode.GET_FIELD, Opcode.PUT_FIELD,
    Opcode.LOAD_FIELD, Opcode.FETCH_FIELD, Opcode.UNPACK_ELEMENTS,
    Opcode.UNPACK_FIELDS, Opcode.CALL,
})

_WORD_OPERAND = frozenset({
    Opcode.PUSH_INT, Opcode.JUMP, Opcode.JUMP_IF_FALSE, Opcode.JUMP_IF_TRUE,
})


def format_chunk(chunk: Chunk) -> str:
    """Return the listing of a chunk's constants count and instructions."""
    lines = [
        f"{len(chunk.consts)} constant(s)",
        f"{len(chunk.instrs)} instruction(s)",
    ]
    for offset, instr in enumerate(chunk.instrs):
        name = instr.op.name
        if instr.op in _BYTE_OPERAND:
            body = f"{name:<15} {instr.operand & 0xFF:<5d}"
        elif instr.op in _WORD_OPERAND:
            body = f"{name:<15} {instr.operand & 0xFFFF}"
        else:
            body = f"{name:<15}"
        lines.append(f"[{offset:04d}] {body}")
    return "\n".join(lines) + "\n\n"


def dump_chunk(chunk: Chunk, file: TextIO | None = None) -> None:
    """Write the listing of a chunk, to stdout by default."""
    stream = sys.stdout if file is None else file
    stream.write(format_chunk(chunk))
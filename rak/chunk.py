"""Bytecode opcodes, instructions and chunks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from rak.errors import RakError

_MAX_CONSTS_INDEX = 0xFF
_MAX_INSTRS_INDEX = 0xFFFF


class Opcode(IntEnum):
    NOP = 0
    PUSH_NIL = 1
    PUSH_FALSE = 2
    PUSH_TRUE = 3
    PUSH_INT = 4
    LOAD_CONST = 5
    LOAD_GLOBAL = 6
    LOAD_LOCAL = 7
    STORE_LOCAL = 8
    FETCH_LOCAL = 9
    NEW_ARRAY = 10
    NEW_RANGE = 11
    NEW_RECORD = 12
    DUP = 13
    POP = 14
    GET_ELEMENT = 15
    SET_ELEMENT = 16
    LOAD_ELEMENT = 17
    FETCH_ELEMENT = 18
    UPDATE_ELEMENT = 19
    GET_FIELD = 20
    PUT_FIELD = 21
    LOAD_FIELD = 22
    FETCH_FIELD = 23
    UPDATE_FIELD = 24
    UNPACK_ELEMENTS = 25
    UNPACK_FIELDS = 26
    JUMP = 27
    JUMP_IF_FALSE = 28
    JUMP_IF_TRUE = 29
    EQ = 30
    GT = 31
    LT = 32
    ADD = 33
    SUB = 34
    MUL = 35
    DIV = 36
    MOD = 37
    NOT = 38
    NEG = 39
    CALL = 40
    RETURN = 41


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


def _operand_limit(op: Opcode) -> int:
    if op in _BYTE_OPERAND:
        return 0xFF
    if op in _WORD_OPERAND:
        return 0xFFFF
    return 0


@dataclass(frozen=True)
class Instruction:
    """One bytecode instruction: an opcode and its operand."""

    op: Opcode
    operand: int = 0

    def __post_init__(self) -> None:
        op = Opcode(self.op)
        object.__setattr__(self, "op", op)
        limit = _operand_limit(op)
        if not 0 <= self.operand <= limit:
            raise ValueError(
                f"operand {self.operand} out of range for {op.name} (0..{limit})"
            )


@dataclass
class Chunk:
    """A sequence of instructions and the constants they refer to."""

    consts: list[Any] = field(default_factory=list)
    instrs: list[Instruction] = field(default_factory=list)

    def append_const(self, value: Any) -> int:
        """Add a constant and return its index."""
        index = len(self.consts)
        if index > _MAX_CONSTS_INDEX:
            raise RakError("too many constants")
        self.consts.append(value)
        return index

    def append_instr(self, instr: Instruction) -> int:
        """Add an instruction and return its offset."""
        index = len(self.instrs)
        if index > _MAX_INSTRS_INDEX:
            raise RakError("too many instructions")
        self.instrs.append(instr)
        return index

    def patch(self, index: int, instr: Instruction) -> None:
        """Replace the instruction at ``index``."""
        self.instrs[index] = instr

    def clear(self) -> None:
        self.consts.clear()
        self.instrs.clear()
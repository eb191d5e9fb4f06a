import pytest

from rak.chunk import Chunk, Instruction, Opcode
from rak.errors import RakError


def test_instruction_from_opcode_values():
    assert Instruction(0).op is Opcode.NOP
    assert Instruction(1).op is Opcode.PUSH_NIL
    assert Instruction(len(Opcode) - 1).op is Opcode.RETURN
    assert Instruction(Opcode.JUMP_IF_FALSE, 3).op.name == "JUMP_IF_FALSE"


def test_instruction_operand_limits():
    assert Instruction(Opcode.LOAD_CONST, 255).operand == 255
    assert Instruction(Opcode.JUMP, 65535).operand == 65535
    with pytest.raises(ValueError):
        Instruction(Opcode.LOAD_CONST, 256)
    with pytest.raises(ValueError):
        Instruction(Opcode.PUSH_INT, 65536)
    with pytest.raises(ValueError):
        Instruction(Opcode.POP, 1)
    with pytest.raises(ValueError):
        Instruction(Opcode.CALL, -1)


def test_instruction_coerces_int_opcode():
    instr = Instruction(Opcode.ADD.value)
    assert instr.op is Opcode.ADD
    assert instr == Instruction(Opcode.ADD)


def test_append_const_returns_indices():
    chunk = Chunk()
    assert chunk.append_const("a") == 0
    assert chunk.append_const(1.5) == 1
    assert chunk.consts == ["a", 1.5]


def test_too_many_constants():
    chunk = Chunk()
    for i in range(256):
        assert chunk.append_const(float(i)) == i
    with pytest.raises(RakError, match="too many constants"):
        chunk.append_const(0.0)
    assert len(chunk.consts) == 256


def test_append_instr_returns_indices():
    chunk = Chunk()
    first = chunk.append_instr(Instruction(Opcode.NOP))
    second = chunk.append_instr(Instruction(Opcode.POP))
    assert (first, second) == (0, 1)
    assert chunk.instrs[0] == Instruction(Opcode.NOP)
    assert chunk.instrs[1].op is Opcode.POP


def test_too_many_instructions():
    chunk = Chunk()
    instr = Instruction(Opcode.NOP)
    for _ in range(65536):
        chunk.append_instr(instr)
    with pytest.raises(RakError, match="too many instructions"):
        chunk.append_instr(instr)
    assert len(chunk.instrs) == 65536


def test_clear():
    chunk = Chunk()
    chunk.append_const("x")
    chunk.append_instr(Instruction(Opcode.RETURN))
    chunk.clear()
    assert chunk.consts == []
    assert chunk.instrs == []
import pytest

from intcode.common.errors import UnknownOpcodeError, InvalidParameterModeError
from intcode.runtime.memory import Memory
import intcode.runtime.decoder as d


def decode(program, pointer=0, pending_input=None):
    return d.decode(Memory.load(program), pointer, pending_input)


def test_position_mode_default():
    assert decode([1, 5, 6, 7]) == d.Add(d.Position(5), d.Position(6), d.Position(7))


def test_mixed_modes():
    instr = decode([1002, 4, 3, 4, 33])

    assert instr == d.Multiply(d.Position(4), d.Immediate(3), d.Position(4))


def test_relative_mode():
    instr = decode([21107, 1, -2, 3])

    assert instr == d.StoreIfLessThan(d.Immediate(1), d.Immediate(-2), d.Relative(3))


def test_decode_at_pointer():
    assert decode([99, 104, 7], pointer=1) == d.Output(d.Immediate(7))


def test_save_input_without_input():
    assert decode([3, 9]) == d.SaveInput(None, d.Position(9))


def test_save_input_destination_mode():
    instr = decode([203, -1], pending_input=42)

    assert instr == d.SaveInput(d.Immediate(42), d.Relative(-1))


@pytest.mark.parametrize('program, expected', [
    ([5, 1, 2], d.JumpIfTrue(d.Position(1), d.Position(2))),
    ([1106, 0, 7], d.JumpIfFalse(d.Immediate(0), d.Immediate(7))),
    ([8, 1, 2, 3], d.StoreIfEquals(d.Position(1), d.Position(2), d.Position(3))),
    ([209, 4], d.AdjustRelativeBase(d.Relative(4))),
    ([99], d.Terminate()),
])
def test_variants(program, expected):
    assert decode(program) == expected


def test_missing_cells_read_zero():
    assert decode([1101]) == d.Add(d.Immediate(0), d.Immediate(0), d.Position(0))


def test_unknown_opcode():
    with pytest.raises(UnknownOpcodeError) as e:
        decode([99, 42], pointer=1)

    assert e.value.opcode == 42
    assert e.value.address == 1


def test_negative_word():
    with pytest.raises(UnknownOpcodeError):
        decode([-1])


def test_invalid_mode():
    with pytest.raises(InvalidParameterModeError) as e:
        decode([1301, 0, 0, 0])

    assert e.value.mode == 3
    assert e.value.address == 0


def test_unused_mode_digits_ignored():
    assert decode([30099]) == d.Terminate()


def test_decode_does_not_mutate():
    memory = Memory.load([1, 0, 0, 0, 99])
    d.decode(memory, 0)

    assert memory.dump() == [1, 0, 0, 0, 99]

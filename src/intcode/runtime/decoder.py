from dataclasses import dataclass

import intcode.common.ops as ops
from intcode.common.errors import (
    UnknownOpcodeError, InvalidParameterModeError, ImmediateWriteTargetError
)
from intcode.runtime.memory import Memory


class Parameter:
    raw: int

    def value(self, memory: Memory, relative_base: int) -> int:
        raise NotImplementedError()

    def address(self, relative_base: int, ip: int) -> int:
        raise NotImplementedError()


@dataclass
class Position(Parameter):
    raw: int

    def value(self, memory: Memory, relative_base: int) -> int:
        return memory.read(self.raw)

    def address(self, relative_base: int, ip: int) -> int:
        return self.raw


@dataclass
class Immediate(Parameter):
    raw: int

    def value(self, memory: Memory, relative_base: int) -> int:
        return self.raw

    def address(self, relative_base: int, ip: int) -> int:
        raise ImmediateWriteTargetError(ip)


@dataclass
class Relative(Parameter):
    raw: int

    def value(self, memory: Memory, relative_base: int) -> int:
        return memory.read(relative_base + self.raw)

    def address(self, relative_base: int, ip: int) -> int:
        return relative_base + self.raw


class Instruction:
    opcode: int
    width: int


@dataclass
class Add(Instruction):
    a: Parameter
    b: Parameter
    dest: Parameter
    opcode = ops.ADD
    width = 4


@dataclass
class Multiply(Instruction):
    a: Parameter
    b: Parameter
    dest: Parameter
    opcode = ops.MUL
    width = 4


@dataclass
class SaveInput(Instruction):
    source: Immediate | None    # Pending input, None if the machine has none
    dest: Parameter
    opcode = ops.INP
    width = 2


@dataclass
class Output(Instruction):
    a: Parameter
    opcode = ops.OUT
    width = 2


@dataclass
class JumpIfTrue(Instruction):
    cond: Parameter
    target: Parameter
    opcode = ops.JIT
    width = 3


@dataclass
class JumpIfFalse(Instruction):
    cond: Parameter
    target: Parameter
    opcode = ops.JIF
    width = 3


@dataclass
class StoreIfLessThan(Instruction):
    a: Parameter
    b: Parameter
    dest: Parameter
    opcode = ops.SLT
    width = 4


@dataclass
class StoreIfEquals(Instruction):
    a: Parameter
    b: Parameter
    dest: Parameter
    opcode = ops.SEQ
    width = 4


@dataclass
class AdjustRelativeBase(Instruction):
    a: Parameter
    opcode = ops.ARB
    width = 2


@dataclass
class Terminate(Instruction):
    opcode = ops.HLT
    width = 1


PARAMETERS = {
    ops.POSITION: Position,
    ops.IMMEDIATE: Immediate,
    ops.RELATIVE: Relative
}

INSTRUCTIONS = {
    ops.ADD: Add,
    ops.MUL: Multiply,
    ops.OUT: Output,
    ops.JIT: JumpIfTrue,
    ops.JIF: JumpIfFalse,
    ops.SLT: StoreIfLessThan,
    ops.SEQ: StoreIfEquals,
    ops.ARB: AdjustRelativeBase,
    ops.HLT: Terminate
}


def split_word(word: int, pointer: int) -> tuple[int, int]:
    if word < 0:
        raise UnknownOpcodeError(word, pointer)

    return (word % 100, word // 100)


def mode_of(modes: int, index: int) -> int:
    return (modes // 10 ** index) % 10


def decode_parameters(memory: Memory, pointer: int, modes: int, count: int):
    params: list[Parameter] = []

    for i in range(count):
        mode = mode_of(modes, i)

        if mode not in PARAMETERS:
            raise InvalidParameterModeError(mode, pointer)

        params.append(PARAMETERS[mode](memory.read(pointer + 1 + i)))

    return params


def decode(memory: Memory, pointer: int, pending_input: int | None = None) -> Instruction:
    opcode, modes = split_word(memory.read(pointer), pointer)

    if opcode not in ops.PARAM_COUNT:
        raise UnknownOpcodeError(opcode, pointer)

    params = decode_parameters(memory, pointer, modes, ops.PARAM_COUNT[opcode])

    if opcode == ops.INP:
        source = Immediate(pending_input) if pending_input is not None else None
        return SaveInput(source, *params)

    return INSTRUCTIONS[opcode](*params)

from dataclasses import dataclass
from typing import Callable

from intcode.common.errors import NegativeAddressError
from intcode.runtime.memory import Memory
import intcode.runtime.decoder as d


@dataclass
class Outcome:
    result: int | None
    next_pointer: int
    relative_base: int


class Context:
    ''' Register state an instruction is executed against '''

    def __init__(self, memory: Memory, pointer: int, relative_base: int):
        self.memory = memory
        self.pointer = pointer
        self.relative_base = relative_base

    def get(self, param: d.Parameter) -> int:
        return param.value(self.memory, self.relative_base)

    def put(self, param: d.Parameter, value: int):
        self.memory.write(param.address(self.relative_base, self.pointer), value)

    def advance(self, instr: d.Instruction, result: int | None = None) -> Outcome:
        return Outcome(result, self.pointer + instr.width, self.relative_base)

    def arithm_pair(self, instr, op: Callable[[int, int], int]) -> Outcome:
        a = self.get(instr.a)
        b = self.get(instr.b)
        self.put(instr.dest, op(a, b))
        return self.advance(instr)

    def jump_when(self, instr, op: Callable[[int], bool]) -> Outcome:
        if not op(self.get(instr.cond)):
            return self.advance(instr)

        target = self.get(instr.target)

        if target < 0:
            raise NegativeAddressError(target)

        return Outcome(None, target, self.relative_base)


# - Operations - #

def add(ctx: Context, instr: d.Add):
    return ctx.arithm_pair(instr, lambda a, b: a + b)


def mul(ctx: Context, instr: d.Multiply):
    return ctx.arithm_pair(instr, lambda a, b: a * b)


def inp(ctx: Context, instr: d.SaveInput):
    # Machine never hands over an input instruction without a value
    assert instr.source is not None

    ctx.put(instr.dest, ctx.get(instr.source))
    return ctx.advance(instr)


def out(ctx: Context, instr: d.Output):
    return ctx.advance(instr, ctx.get(instr.a))


def jit(ctx: Context, instr: d.JumpIfTrue):
    return ctx.jump_when(instr, lambda v: v != 0)


def jif(ctx: Context, instr: d.JumpIfFalse):
    return ctx.jump_when(instr, lambda v: v == 0)


def slt(ctx: Context, instr: d.StoreIfLessThan):
    return ctx.arithm_pair(instr, lambda a, b: int(a < b))


def seq(ctx: Context, instr: d.StoreIfEquals):
    return ctx.arithm_pair(instr, lambda a, b: int(a == b))


def arb(ctx: Context, instr: d.AdjustRelativeBase):
    ctx.relative_base += ctx.get(instr.a)
    return ctx.advance(instr)


def hlt(ctx: Context, instr: d.Terminate):
    return Outcome(None, ctx.pointer, ctx.relative_base)


HANDLERS = {
    d.Add: add,
    d.Multiply: mul,
    d.SaveInput: inp,
    d.Output: out,
    d.JumpIfTrue: jit,
    d.JumpIfFalse: jif,
    d.StoreIfLessThan: slt,
    d.StoreIfEquals: seq,
    d.AdjustRelativeBase: arb,
    d.Terminate: hlt
}


def execute(instr: d.Instruction, memory: Memory, pointer: int, relative_base: int) -> Outcome:
    handler = HANDLERS[type(instr)]
    return handler(Context(memory, pointer, relative_base), instr)

import copy
import enum
import logging as lg
from typing import Iterable

import intcode.loader.grammar as grammar
from intcode.runtime.memory import Memory
import intcode.runtime.decoder as d
import intcode.runtime.executor as ex


class Status(enum.Enum):
    NOT_STARTED = 'not started'
    WAITING_FOR_INPUT = 'waiting for input'
    FINISHED = 'finished'


class Machine():
    memory: Memory          # Live image
    original: Memory        # Image restored by reset
    ip: int                 # Instruction pointer
    rb: int                 # Relative base
    pending_input: int | None
    outputs: list[int]      # Every output since construction or reset
    output_cache: list[int]  # Outputs of the most recent run() call
    status: Status

    def __init__(self, program: Iterable[int]):
        self.original = Memory.load(program)
        self.memory = Memory(self.original.snapshot())
        self.clear_registers()

    @classmethod
    def from_text(cls, text: str) -> 'Machine':
        return cls(grammar.parse_program(text))

    def clear_registers(self):
        self.ip = 0
        self.rb = 0
        self.pending_input = None
        self.outputs = []
        self.output_cache = []
        self.status = Status.NOT_STARTED

    # - Helpers - #

    def debug_dump(self):
        lg.debug(
            f'IP:{self.ip} RB:{self.rb} IN:{self.pending_input} '
            f'OUT:{len(self.outputs)} {self.status.name}'
        )

    def latest_output(self) -> int | None:
        return self.outputs[-1] if self.outputs else None

    def last_n_outputs(self, n: int) -> list[int]:
        if n <= 0:
            return []

        return self.outputs[-n:]

    def is_finished(self) -> bool:
        return self.status == Status.FINISHED

    def is_waiting(self) -> bool:
        return self.status == Status.WAITING_FOR_INPUT

    def clone(self) -> 'Machine':
        return copy.deepcopy(self)

    # - Driver interface - #

    def set_input(self, value: int):
        self.pending_input = value

    def poke(self, address: int, value: int):
        self.original.write(address, value)
        self.memory.write(address, value)

    def reset(self):
        self.memory.restore(self.original.snapshot())
        self.clear_registers()

    def fetch(self) -> d.Instruction:
        return d.decode(self.memory, self.ip, self.pending_input)

    def exec_instruction(self, instr: d.Instruction):
        outcome = ex.execute(instr, self.memory, self.ip, self.rb)

        if isinstance(instr, d.SaveInput):
            self.pending_input = None

        if isinstance(instr, d.Output):
            assert outcome.result is not None
            self.outputs.append(outcome.result)
            self.output_cache.append(outcome.result)

        self.rb = outcome.relative_base
        self.ip = outcome.next_pointer

    def run(self) -> int | None:
        self.output_cache = []

        if self.is_finished():
            lg.debug('Machine has already finished')
            return None

        instr = self.fetch()

        while True:
            if isinstance(instr, d.SaveInput) and instr.source is None:
                self.status = Status.WAITING_FOR_INPUT
                break

            self.exec_instruction(instr)

            if isinstance(instr, d.Terminate):
                self.status = Status.FINISHED
                break

            instr = self.fetch()

        self.debug_dump()
        return self.output_cache[-1] if self.output_cache else None

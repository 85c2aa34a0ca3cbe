import itertools
import logging as lg
from typing import Iterable, Sequence

from intcode.common.conf import AMPLIFIER_NAMES
from intcode.common.errors import CircuitError
from intcode.runtime.machine import Machine


class Amplifier:
    name: str
    phase: int
    machine: Machine

    def __init__(self, name: str, phase: int, machine: Machine):
        self.name = name
        self.phase = phase
        self.machine = machine

    def prime(self):
        self.machine.set_input(self.phase)
        self.machine.run()

    def amplify(self, signal: int) -> int:
        self.machine.set_input(signal)
        self.machine.run()

        if not self.machine.output_cache:
            raise CircuitError(f'Amplifier {self.name} produced no signal')

        return self.machine.output_cache[-1]


class AmplifierCircuit:
    names: str
    prototype: Machine

    def __init__(self, program: Iterable[int], names: str = AMPLIFIER_NAMES):
        self.names = names
        self.prototype = Machine(program)

    def build(self, phases: Sequence[int]) -> list[Amplifier]:
        if len(phases) != len(self.names):
            raise CircuitError(
                f'Phase count mismatch: need {len(self.names)}, got {len(phases)}'
            )

        return [
            Amplifier(name, phase, self.prototype.clone())
            for name, phase in zip(self.names, phases)
        ]

    def run_with_phases(self, phases: Sequence[int], signal: int = 0) -> int:
        amplifiers = self.build(phases)

        for amp in amplifiers:
            amp.prime()

        last = amplifiers[-1].machine

        while True:
            for amp in amplifiers:
                signal = amp.amplify(signal)

            if last.is_finished():
                break

        lg.debug(f'Phases {list(phases)} -> {signal}')
        return signal

    def largest_output_signal(self, phase_values: Iterable[int]) -> tuple[int, tuple[int, ...]]:
        best: tuple[int, tuple[int, ...]] | None = None

        for phases in itertools.permutations(phase_values, len(self.names)):
            signal = self.run_with_phases(phases)

            if best is None or signal > best[0]:
                best = (signal, phases)

        if best is None:
            raise CircuitError('No phase settings to try')

        lg.info(f'Largest signal {best[0]} with phases {list(best[1])}')
        return best

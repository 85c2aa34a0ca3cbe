import logging as lg

import click

from intcode.common.conf import RunSettings
from intcode.common.errors import InputStarved
from intcode.runtime.machine import Machine


def next_input(machine: Machine, queue: list[int], settings: RunSettings) -> int:
    if queue:
        return queue.pop(0)

    if settings.interactive:
        return click.prompt('Input', type=int)

    raise InputStarved(machine.ip)


def report(machine: Machine):
    for value in machine.output_cache:
        click.echo(value)


def execute(machine: Machine, settings: RunSettings) -> Machine:
    ''' Runs the machine to completion, answering every input request in turn '''

    queue = list(settings.inputs)

    while True:
        machine.run()
        report(machine)

        if machine.is_finished():
            break

        value = next_input(machine, queue, settings)
        lg.debug(f'Feeding {value}')
        machine.set_input(value)

    if queue:
        lg.info(f'{len(queue)} input(s) left unused')

    return machine

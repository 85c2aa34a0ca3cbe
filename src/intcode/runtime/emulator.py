import sys
from pathlib import Path
import logging as lg
import traceback

import click

import intcode.common.conf as cf
from intcode.common.errors import IntcodeError, InputStarved, MalformedProgramTextError
import intcode.loader.grammar as grammar
import intcode.drivers.diagnostic as diagnostic
from intcode.drivers.amplifiers import AmplifierCircuit
from intcode.runtime.machine import Machine


def parse_poke(ctx, param, values: tuple[str, ...]) -> list[tuple[int, int]]:
    pokes = []

    for value in values:
        try:
            address, cell = value.split('=')
            pokes.append((int(address), int(cell)))
        except ValueError:
            raise click.BadParameter(f'expected ADDR=VALUE, got {value}')

    return pokes


def parse_phases(ctx, param, value: str | None) -> range | None:
    if value is None:
        return None

    try:
        low, high = value.split('-')
        return range(int(low), int(high) + 1)
    except ValueError:
        raise click.BadParameter(f'expected LOW-HIGH, got {value}')


def setup_logging(verbose: bool):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)


def guarded(action):
    try:
        action()
        sys.exit(cf.EXIT_HALT)

    except MalformedProgramTextError as e:
        lg.error(str(e))
        sys.exit(cf.EXIT_MALFORMED)

    except InputStarved as e:
        lg.error(str(e))
        sys.exit(cf.EXIT_STARVED)

    except (KeyboardInterrupt, click.Abort):
        lg.info('Execution halted by the user')
        sys.exit(cf.EXIT_KEYBOARD)

    except IntcodeError as e:
        lg.error(f'Execution halted on error: {e}')
        sys.exit(cf.EXIT_EXEC_ERROR)

    except Exception as e:
        lg.error(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(cf.EXIT_EXEC_ERROR)


@click.group()
def cli():
    pass


@cli.command()
@click.argument('program_filename', type=Path)
@click.option('-i', '--input', 'inputs', type=int, multiple=True, help='Input value, in order')
@click.option('-p', '--poke', 'pokes', multiple=True, callback=parse_poke, help='ADDR=VALUE patch')
@click.option('--interactive', is_flag=True, help='Prompt when inputs run out')
@click.option('--dump', is_flag=True, help='Print final memory')
@click.option('-v', '--verbose', is_flag=True)
def run(program_filename: Path, inputs, pokes, interactive: bool, dump: bool, verbose: bool):
    setup_logging(verbose)
    lg.info('INTCODE')

    settings = cf.RunSettings().update(
        verbose=verbose,
        interactive=interactive,
        dump=dump,
        inputs=list(inputs)
    )

    def action():
        machine = Machine(grammar.load_program(program_filename))

        for address, value in pokes:
            machine.poke(address, value)

        diagnostic.execute(machine, settings)
        lg.info('Execution halted gracefully')

        if settings.dump:
            click.echo(','.join(str(v) for v in machine.memory.dump()))

    guarded(action)


@cli.command()
@click.argument('program_filename', type=Path)
@click.option('--feedback/--serial', default=False, help='Default phase range')
@click.option('--phases', callback=parse_phases, help='Phase range LOW-HIGH')
@click.option('-v', '--verbose', is_flag=True)
def amplify(program_filename: Path, feedback: bool, phases: range | None, verbose: bool):
    setup_logging(verbose)
    lg.info('INTCODE AMPLIFIERS')

    if phases is None:
        phases = cf.FEEDBACK_PHASES if feedback else cf.SERIAL_PHASES

    def action():
        circuit = AmplifierCircuit(grammar.load_program(program_filename))
        signal, best = circuit.largest_output_signal(phases)
        click.echo(f'{signal} {",".join(str(p) for p in best)}')

    guarded(action)


if __name__ == '__main__':
    cli()

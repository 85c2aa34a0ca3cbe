''' Program text grammar '''

from pathlib import Path
import logging as lg

import pyparsing as pp

from intcode.common.errors import MalformedProgramTextError


integer = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
program = integer + pp.ZeroOrMore(pp.Suppress(',') + integer) + pp.StringEnd()


def parse_program(text: str) -> list[int]:
    try:
        values = program.parse_string(text)

    except pp.ParseBaseException as e:
        raise MalformedProgramTextError(e.lineno, e.column, e.msg) from e

    return list(values)


def load_program(filename: Path) -> list[int]:
    lg.info(f'Loading {filename}')
    values = parse_program(filename.read_text())
    lg.debug(f'Program image of {len(values)} cells')
    return values

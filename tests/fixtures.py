# type: ignore
import pytest

from intcode.runtime.machine import Machine

import unit_utils


@pytest.fixture
def with_quine():
    yield unit_utils.load_program('quine')


@pytest.fixture
def with_compare_eight():
    yield Machine(unit_utils.load_program('compare_eight'))


@pytest.fixture
def with_serial_program():
    yield unit_utils.load_program('serial_amplifier')


@pytest.fixture
def with_feedback_program():
    yield unit_utils.load_program('feedback_amplifier')

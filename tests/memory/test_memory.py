import pytest

from intcode.common.errors import NegativeAddressError
from intcode.runtime.memory import Memory


def test_load():
    memory = Memory.load([1, 2, 3])

    assert memory.read(0) == 1
    assert memory.read(2) == 3
    assert len(memory) == 3


def test_unset_reads_zero():
    memory = Memory.load([1, 2, 3])

    assert memory.read(3) == 0
    assert memory.read(10 ** 12) == 0
    assert len(memory) == 3


def test_write_grows():
    memory = Memory.load([1, 2, 3])
    memory.write(1, 7)
    memory.write(6, 9)

    assert memory.dump() == [1, 7, 3, 0, 0, 0, 9]


def test_negative_address():
    memory = Memory.load([1])

    with pytest.raises(NegativeAddressError) as e:
        memory.write(-1, 5)

    assert e.value.address == -1

    with pytest.raises(NegativeAddressError):
        memory.read(-3)


def test_snapshot_restore():
    memory = Memory.load([5, 6])
    snapshot = memory.snapshot()

    memory.write(0, 1)
    memory.write(100, 1)
    memory.restore(snapshot)

    assert memory.dump() == [5, 6]
    assert memory == Memory.load([5, 6])


def test_snapshot_is_a_copy():
    memory = Memory.load([5, 6])
    snapshot = memory.snapshot()
    memory.write(0, 1)

    assert snapshot[0] == 5


def test_dump_empty():
    assert Memory().dump() == []

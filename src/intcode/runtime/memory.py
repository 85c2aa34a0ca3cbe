from typing import Iterable, TypeAlias

from intcode.common.errors import NegativeAddressError


Snapshot: TypeAlias = dict[int, int]


class Memory:
    ''' Sparse memory, unset cells read as zero '''

    cells: dict[int, int]

    def __init__(self, cells: dict[int, int] | None = None):
        self.cells = dict(cells) if cells is not None else {}

    @classmethod
    def load(cls, program: Iterable[int]) -> 'Memory':
        return cls({addr: int(v) for addr, v in enumerate(program)})

    def read(self, address: int) -> int:
        if address < 0:
            raise NegativeAddressError(address)

        return self.cells.get(address, 0)

    def write(self, address: int, value: int):
        if address < 0:
            raise NegativeAddressError(address)

        self.cells[address] = value

    def snapshot(self) -> Snapshot:
        return dict(self.cells)

    def restore(self, snapshot: Snapshot):
        self.cells = dict(snapshot)

    def dump(self) -> list[int]:
        if not self.cells:
            return []

        top = max(self.cells)
        return [self.cells.get(addr, 0) for addr in range(top + 1)]

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Memory):
            return NotImplemented

        return self.cells == other.cells

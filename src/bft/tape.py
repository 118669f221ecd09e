from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .cells import U8, CellType

DEFAULT_CELLS = 30000


@dataclass(frozen=True)
class TapeConfig:
    cells: Optional[int] = None
    extensible: bool = False
    cell_type: CellType = U8

    def __post_init__(self) -> None:
        if self.cells is not None and self.cells < 1:
            raise ValueError(f'Tape needs at least one cell, got {self.cells}')

    @property
    def size(self) -> int:
        return DEFAULT_CELLS if self.cells is None else self.cells


class Tape:
    """Cells under a movable head.

    ``move_left``/``move_right`` return False and leave the tape untouched when
    the head would leave it. An extensible tape never refuses a right move: it
    grows by exactly one zero cell each time the head steps past the end.
    """

    def __init__(self, size: int = DEFAULT_CELLS, extensible: bool = False, cell_type: CellType = U8):
        if size < 1:
            raise ValueError(f'Tape needs at least one cell, got {size}')
        self.cell_type = cell_type
        self.extensible = extensible
        self.head = 0
        self._length = size
        self._cells = np.zeros(size, dtype=cell_type.dtype)

    @classmethod
    def from_config(cls, config: TapeConfig) -> 'Tape':
        return cls(config.size, config.extensible, config.cell_type)

    def __len__(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._cells)

    def _grow(self) -> None:
        # Capacity doubles; only _length is observable.
        if self._length == len(self._cells):
            more = np.zeros(len(self._cells), dtype=self._cells.dtype)
            self._cells = np.concatenate((self._cells, more))
        self._length += 1

    def move_left(self) -> bool:
        if self.head == 0:
            return False
        self.head -= 1
        return True

    def move_right(self) -> bool:
        if self.head + 1 == self._length:
            if not self.extensible:
                return False
            self._grow()
        self.head += 1
        return True

    def get(self) -> int:
        return int(self._cells[self.head])

    def set(self, value: int) -> None:
        self._cells[self.head] = value & self.cell_type.mask

    def increment(self) -> None:
        self._cells[self.head] = self.cell_type.increment(int(self._cells[self.head]))

    def decrement(self) -> None:
        self._cells[self.head] = self.cell_type.decrement(int(self._cells[self.head]))

    def is_zero(self) -> bool:
        return self.cell_type.is_zero(int(self._cells[self.head]))

    def cell(self, index: int) -> int:
        if not 0 <= index < self._length:
            raise IndexError(f'cell {index} outside tape of {self._length} cells')
        return int(self._cells[index])

    def cells(self) -> np.ndarray:
        return self._cells[:self._length].copy()

    def __repr__(self) -> str:
        return (f"Tape(len={self._length}, head={self.head}, extensible={self.extensible}, "
                f"cell_type={self.cell_type.name})")

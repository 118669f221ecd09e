from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np


@dataclass(frozen=True)
class CellType:
    """Wrapping unsigned cell arithmetic for one fixed width.

    The tape stores cells in a numpy array of ``dtype``; the methods here work
    on plain ints so that wrap-around never goes through numpy overflow.
    """

    name: str
    bits: int

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(f'uint{self.bits}')

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    def increment(self, value: int) -> int:
        return (value + 1) & self.mask

    def decrement(self, value: int) -> int:
        return (value - 1) & self.mask

    def is_zero(self, value: int) -> bool:
        return value == 0

    def from_byte(self, byte: int) -> int:
        return byte & 0xFF

    def to_byte(self, value: int) -> int:
        return value & 0xFF


U8 = CellType('u8', 8)
U16 = CellType('u16', 16)
U32 = CellType('u32', 32)

CELL_TYPES: Dict[int, CellType] = {c.bits: c for c in (U8, U16, U32)}


def cell_type(bits: int) -> CellType:
    try:
        return CELL_TYPES[bits]
    except KeyError:
        raise ValueError(f'Unsupported cell width: {bits} (expected one of {sorted(CELL_TYPES)})') from None

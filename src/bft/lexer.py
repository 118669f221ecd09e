from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class InstructionKind(Enum):
    """The eight instructions of the language, valued by their source character."""

    MOVE_LEFT = '<'
    MOVE_RIGHT = '>'
    INCREMENT = '+'
    DECREMENT = '-'
    INPUT = ','
    OUTPUT = '.'
    JUMP_FORWARD_IF_ZERO = '['
    JUMP_BACKWARD_IF_NONZERO = ']'

    @classmethod
    def from_char(cls, ch: str) -> Optional['InstructionKind']:
        return _BY_CHAR.get(ch)

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_jump(self) -> bool:
        return self in (InstructionKind.JUMP_FORWARD_IF_ZERO, InstructionKind.JUMP_BACKWARD_IF_NONZERO)

    def __str__(self) -> str:
        return ''.join(part.capitalize() for part in self.name.split('_')).replace('Nonzero', 'NonZero')


_BY_CHAR = {kind.value: kind for kind in InstructionKind}


@dataclass(frozen=True)
class LocatedInstruction:
    kind: InstructionKind
    line: int    # 1-indexed
    column: int  # 1-indexed, in code points

    def __post_init__(self) -> None:
        if self.line < 1 or self.column < 1:
            raise ValueError(f'line and column are 1-indexed, got {self.line}:{self.column}')

    def __str__(self) -> str:
        return f"{self.line}:{self.column}\t{self.kind}"


def tokenize(source: str) -> List[LocatedInstruction]:
    """Scan source text into located instructions, dropping every other character.

    Lines are split on '\\n' only, so line numbers match what an editor shows
    for both '\\n' and '\\r\\n' files.
    """
    out: List[LocatedInstruction] = []
    for line_no_0, line in enumerate(source.split('\n')):
        for col_no_0, ch in enumerate(line):
            kind = _BY_CHAR.get(ch)
            if kind is None:
                continue
            out.append(LocatedInstruction(kind, line_no_0 + 1, col_no_0 + 1))
    return out

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import UnmatchedClosingBracket, UnmatchedOpeningBracket, make_analysis_error
from .lexer import InstructionKind, LocatedInstruction, tokenize

logger = logging.getLogger(__name__)


def resolve_jumps(instructions: Sequence[LocatedInstruction], *, source: str = '',
                  name: str = '<string>') -> Dict[int, int]:
    """Match brackets and return the jump table.

    ``table[i]`` is the index execution resumes at when the bracket at ``i``
    jumps: one past its partner, in both directions.
    """
    table: Dict[int, int] = {}
    # (index, instruction) of each '[' still waiting for its ']'
    stack: List[Tuple[int, LocatedInstruction]] = []

    for idx, instr in enumerate(instructions):
        if instr.kind is InstructionKind.JUMP_FORWARD_IF_ZERO:
            stack.append((idx, instr))
        elif instr.kind is InstructionKind.JUMP_BACKWARD_IF_NONZERO:
            if not stack:
                raise make_analysis_error(
                    UnmatchedClosingBracket, name=name, source=source,
                    line=instr.line, column=instr.column,
                )
            open_idx, _ = stack.pop()
            table[open_idx] = idx + 1
            table[idx] = open_idx + 1

    if stack:
        # Report the outermost one.
        _, first = stack[0]
        raise make_analysis_error(
            UnmatchedOpeningBracket, name=name, source=source,
            line=first.line, column=first.column,
        )
    return table


class Program:
    """A named, bracket-checked instruction sequence with its jump table.

    Use :meth:`build` or :meth:`from_file`. Calling the constructor directly
    skips validation; the engine still refuses a jump it has no target for.
    """

    __slots__ = ('_name', '_instructions', '_jump_table')

    def __init__(self, name: str, instructions: Sequence[LocatedInstruction],
                 jump_table: Mapping[int, int]):
        self._name = str(name)
        self._instructions = tuple(instructions)
        self._jump_table = MappingProxyType(dict(jump_table))

    @classmethod
    def build(cls, name: Union[str, Path], source: str) -> 'Program':
        name = str(name)
        instructions = tokenize(source)
        jump_table = resolve_jumps(instructions, source=source, name=name)
        logger.debug("Built %s: %d instructions, %d bracket pairs",
                     name, len(instructions), len(jump_table) // 2)
        return cls(name, instructions, jump_table)

    @classmethod
    def from_file(cls, path: Union[str, Path], *, encoding: str = 'utf-8') -> 'Program':
        p = Path(path)
        return cls.build(str(path), p.read_text(encoding=encoding))

    @property
    def name(self) -> str:
        return self._name

    @property
    def instructions(self) -> Tuple[LocatedInstruction, ...]:
        return self._instructions

    @property
    def jump_table(self) -> Mapping[int, int]:
        return self._jump_table

    def jump_target(self, index: int) -> Optional[int]:
        return self._jump_table.get(index)

    def kinds(self) -> List[InstructionKind]:
        return [i.kind for i in self._instructions]

    def to_source(self) -> str:
        return ''.join(i.kind.symbol for i in self._instructions)

    def listing(self) -> str:
        lines = [self._name]
        lines.extend(str(i) for i in self._instructions)
        return '\n'.join(lines)

    def __len__(self) -> int:
        return len(self._instructions)

    def __repr__(self) -> str:
        return f"Program(name={self._name!r}, instructions={len(self._instructions)})"

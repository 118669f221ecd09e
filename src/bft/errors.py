from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Type, TypeVar

if TYPE_CHECKING:
    from .lexer import LocatedInstruction


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1].rstrip(chr(13))}")
        if i == idx:
            out.append(f"  {'':4s} | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'UnmatchedOpeningBracket':
        return "Every '[' needs a ']' after it. Check for a missing ']' or a stray '['."
    if kind == 'UnmatchedClosingBracket':
        return "This ']' has no '[' before it. Check for a missing '[' or a stray ']'."
    if kind == 'HeadUnderrun':
        return 'The head is already on the first cell; there is nothing to the left of it.'
    if kind == 'HeadOverrun':
        return 'Use a larger tape (--cells) or let it grow (--extensible).'
    return None


@dataclass
class BFTError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BFTAnalysisError(BFTError):
    name: str
    line: int
    column: int
    context: str


class UnmatchedOpeningBracket(BFTAnalysisError):
    pass


class UnmatchedClosingBracket(BFTAnalysisError):
    pass


@dataclass
class BFTRuntimeError(BFTError):
    name: str
    instruction: LocatedInstruction


class HeadUnderrun(BFTRuntimeError):
    pass


class HeadOverrun(BFTRuntimeError):
    pass


class UnmappedJump(BFTRuntimeError):
    pass


@dataclass
class BFTStreamError(BFTRuntimeError):
    cause: BaseException


class ReadError(BFTStreamError):
    pass


class WriteError(BFTStreamError):
    pass


A = TypeVar('A', bound=BFTAnalysisError)
R = TypeVar('R', bound=BFTRuntimeError)

_DESCRIPTIONS = {
    'UnmatchedOpeningBracket': 'unmatched opening bracket',
    'UnmatchedClosingBracket': 'unmatched closing bracket',
    'HeadUnderrun': 'head moved left of the first cell',
    'HeadOverrun': 'head moved right of the last cell',
    'UnmappedJump': 'jump instruction has no target',
    'ReadError': 'failed to read input',
    'WriteError': 'failed to write output',
}


def make_analysis_error(cls: Type[A], *, name: str, source: str, line: int, column: int) -> A:
    kind = cls.__name__
    ctx = _build_context(source.split('\n'), line, column) if source else ''
    hint = _hint_for(kind)
    ctx_block = f"\n{ctx}" if ctx else ""
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"{kind}: {_DESCRIPTIONS[kind]} in {name} at line {line}, column {column}{ctx_block}{hint_block}",
        name=name,
        line=line,
        column=column,
        context=ctx,
    )


def make_runtime_error(cls: Type[R], *, name: str, instruction: LocatedInstruction,
                       cause: Optional[BaseException] = None) -> R:
    kind = cls.__name__
    where = f"in {name} at line {instruction.line}, column {instruction.column} ({instruction.kind})"
    if issubclass(cls, BFTStreamError):
        if cause is None:
            raise ValueError(f'{kind} requires a cause')
        detail = f"{type(cause).__name__}: {cause}" if str(cause) else type(cause).__name__
        return cls(
            message=f"{kind}: {_DESCRIPTIONS[kind]} {where}: {detail}",
            name=name,
            instruction=instruction,
            cause=cause,
        )
    hint = _hint_for(kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"{kind}: {_DESCRIPTIONS[kind]} {where}{hint_block}",
        name=name,
        instruction=instruction,
    )

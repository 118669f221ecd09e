
from .api import RunResult, run_file, run_string
from .cells import U8, U16, U32, CellType, cell_type
from .engine import MachineState, VirtualMachine, run
from .errors import (
    BFTAnalysisError,
    BFTError,
    BFTRuntimeError,
    BFTStreamError,
    HeadOverrun,
    HeadUnderrun,
    ReadError,
    UnmappedJump,
    UnmatchedClosingBracket,
    UnmatchedOpeningBracket,
    WriteError,
)
from .lexer import InstructionKind, LocatedInstruction, tokenize
from .program import Program, resolve_jumps
from .streams import ByteReader, ByteWriter, TrailingNewlineWriter
from .tape import Tape, TapeConfig

__all__ = [
    'InstructionKind',
    'LocatedInstruction',
    'tokenize',
    'Program',
    'resolve_jumps',
    'CellType',
    'cell_type',
    'U8',
    'U16',
    'U32',
    'Tape',
    'TapeConfig',
    'MachineState',
    'VirtualMachine',
    'run',
    'ByteReader',
    'ByteWriter',
    'TrailingNewlineWriter',
    'RunResult',
    'run_string',
    'run_file',
    'BFTError',
    'BFTAnalysisError',
    'BFTRuntimeError',
    'BFTStreamError',
    'UnmatchedOpeningBracket',
    'UnmatchedClosingBracket',
    'HeadUnderrun',
    'HeadOverrun',
    'UnmappedJump',
    'ReadError',
    'WriteError',
]

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional, Type

from .errors import (
    BFTError,
    BFTRuntimeError,
    HeadOverrun,
    HeadUnderrun,
    ReadError,
    UnmappedJump,
    WriteError,
    make_runtime_error,
)
from .lexer import InstructionKind
from .program import Program
from .streams import ByteSink, ByteSource
from .tape import Tape, TapeConfig

logger = logging.getLogger(__name__)


class MachineState(Enum):
    RUNNING = auto()
    HALTED_OK = auto()
    HALTED_ERROR = auto()


class VirtualMachine:
    """Runs one Program once, on a tape of its own.

    After :meth:`interpret` returns (or raises), ``state``, ``pc``, ``steps``
    and ``tape`` describe where the run ended.
    """

    def __init__(self, program: Program, config: Optional[TapeConfig] = None):
        self.program = program
        self.config = config if config is not None else TapeConfig()
        self.tape = Tape.from_config(self.config)
        self.pc = 0
        self.steps = 0
        self.state: Optional[MachineState] = None

    def interpret(self, reader: ByteSource, writer: ByteSink) -> None:
        if self.state is not None:
            raise RuntimeError('VirtualMachine instances run only once; create a new one')
        self.state = MachineState.RUNNING
        n = len(self.program)
        logger.debug("Running %s: %d instructions on %r", self.program.name, n, self.tape)
        try:
            while self.pc < n:
                self.pc = self._step(self.pc, reader, writer)
                self.steps += 1
        except BFTError as e:
            self.state = MachineState.HALTED_ERROR
            logger.debug("%s halted after %d steps: %s", self.program.name, self.steps, type(e).__name__)
            raise
        self.state = MachineState.HALTED_OK
        logger.debug("%s finished after %d steps", self.program.name, self.steps)

    def _fail(self, cls: Type[BFTRuntimeError], pc: int, cause: Optional[BaseException] = None) -> BFTError:
        return make_runtime_error(cls, name=self.program.name,
                                  instruction=self.program.instructions[pc], cause=cause)

    def _step(self, pc: int, reader: ByteSource, writer: ByteSink) -> int:
        """Execute the instruction at ``pc`` and return the next pc."""
        kind = self.program.instructions[pc].kind
        tape = self.tape

        if kind is InstructionKind.MOVE_RIGHT:
            if not tape.move_right():
                raise self._fail(HeadOverrun, pc)
        elif kind is InstructionKind.MOVE_LEFT:
            if not tape.move_left():
                raise self._fail(HeadUnderrun, pc)
        elif kind is InstructionKind.INCREMENT:
            tape.increment()
        elif kind is InstructionKind.DECREMENT:
            tape.decrement()
        elif kind is InstructionKind.OUTPUT:
            try:
                writer.write_byte(tape.cell_type.to_byte(tape.get()))
                writer.flush()
            except (OSError, ValueError) as e:
                raise self._fail(WriteError, pc, e) from e
        elif kind is InstructionKind.INPUT:
            try:
                byte = reader.read_byte()
            except (EOFError, OSError, ValueError) as e:
                raise self._fail(ReadError, pc, e) from e
            tape.set(tape.cell_type.from_byte(byte))
        elif kind is InstructionKind.JUMP_FORWARD_IF_ZERO:
            if tape.is_zero():
                return self._target(pc)
        elif kind is InstructionKind.JUMP_BACKWARD_IF_NONZERO:
            if not tape.is_zero():
                return self._target(pc)
        return pc + 1

    def _target(self, pc: int) -> int:
        target = self.program.jump_target(pc)
        if target is None:
            raise self._fail(UnmappedJump, pc)
        return target


def run(program: Program, config: Optional[TapeConfig], reader: ByteSource, writer: ByteSink) -> None:
    """Run ``program`` once on a fresh tape; raises the run's error, if any."""
    VirtualMachine(program, config).interpret(reader, writer)

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .engine import VirtualMachine
from .program import Program
from .streams import ByteReader, ByteWriter
from .tape import Tape, TapeConfig


@dataclass(frozen=True)
class RunResult:
    output: bytes
    tape: Tape
    steps: int


def _run_program(program: Program, input_data: bytes, config: Optional[TapeConfig]) -> RunResult:
    vm = VirtualMachine(program, config)
    out = ByteWriter.to_buffer()
    vm.interpret(ByteReader.from_bytes(input_data), out)
    return RunResult(output=out.getvalue(), tape=vm.tape, steps=vm.steps)


def run_string(source: str, *, name: str = '<string>', input_data: bytes = b'',
               config: Optional[TapeConfig] = None) -> RunResult:
    return _run_program(Program.build(name, source), input_data, config)


def run_file(path: str | Path, *, input_data: bytes = b'', config: Optional[TapeConfig] = None,
             encoding: str = 'utf-8') -> RunResult:
    return _run_program(Program.from_file(path, encoding=encoding), input_data, config)

#!/usr/bin/env python3
"""Command-line runner: load a program file and run it on stdin/stdout.

The tape defaults to 30,000 8-bit cells; --cells and --extensible change its
size and whether it grows past the right end.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .cells import CELL_TYPES, cell_type
from .engine import run
from .errors import BFTError
from .program import Program
from .streams import ByteReader, ByteWriter, TrailingNewlineWriter
from .tape import TapeConfig


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid int value: {text!r}') from None
    if value < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1, got {value}')
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='bft', description=__doc__.splitlines()[0])
    parser.add_argument('program', help='Path to the file containing the program')
    parser.add_argument('-c', '--cells', type=_positive_int, default=None,
                        help='Initial size of the tape (default: 30000)')
    parser.add_argument('-e', '--extensible', action='store_true',
                        help='Grow the tape when the head moves past its right end')
    parser.add_argument('-w', '--cell-width', type=int, choices=sorted(CELL_TYPES), default=8,
                        help='Cell width in bits (default: 8)')
    parser.add_argument('-l', '--list', action='store_true',
                        help='Print the located instructions instead of running the program')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)5s %(name)s: %(message)s')

    try:
        program = Program.from_file(args.program)
        if args.list:
            print(program.listing())
            return 0

        config = TapeConfig(cells=args.cells, extensible=args.extensible,
                            cell_type=cell_type(args.cell_width))
        source = ByteReader(sys.stdin.buffer)
        with TrailingNewlineWriter(ByteWriter(sys.stdout.buffer)) as sink:
            run(program, config, source, sink)
    except (BFTError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

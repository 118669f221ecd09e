#!/usr/bin/env python3
"""
Tests for turning source text into located instructions.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bft.lexer import InstructionKind, LocatedInstruction, tokenize


def test_parse_chars():
    """Each command character maps to its instruction kind."""
    assert InstructionKind.from_char('<') is InstructionKind.MOVE_LEFT
    assert InstructionKind.from_char('>') is InstructionKind.MOVE_RIGHT
    assert InstructionKind.from_char('+') is InstructionKind.INCREMENT
    assert InstructionKind.from_char('-') is InstructionKind.DECREMENT
    assert InstructionKind.from_char(',') is InstructionKind.INPUT
    assert InstructionKind.from_char('.') is InstructionKind.OUTPUT
    assert InstructionKind.from_char('[') is InstructionKind.JUMP_FORWARD_IF_ZERO
    assert InstructionKind.from_char(']') is InstructionKind.JUMP_BACKWARD_IF_NONZERO


@pytest.mark.parametrize('ch', ['a', ' ', '\n', '#', '!', 'é', ''])
def test_comment_chars(ch):
    assert InstructionKind.from_char(ch) is None


def test_kind_display_names():
    assert str(InstructionKind.MOVE_LEFT) == 'MoveLeft'
    assert str(InstructionKind.JUMP_FORWARD_IF_ZERO) == 'JumpForwardIfZero'
    assert str(InstructionKind.JUMP_BACKWARD_IF_NONZERO) == 'JumpBackwardIfNonZero'


def test_locations_are_one_indexed():
    """Line and column numbers count from 1 and skip comment characters."""
    instructions = tokenize("_<\n__<\n")
    assert instructions == [
        LocatedInstruction(InstructionKind.MOVE_LEFT, 1, 2),
        LocatedInstruction(InstructionKind.MOVE_LEFT, 2, 3),
    ]


def test_crlf_lines_locate_like_lf():
    assert tokenize("+\r\n-+\r\n") == tokenize("+\n-+\n")


def test_columns_count_code_points():
    (instr,) = tokenize("éé+")
    assert instr.column == 3


def test_empty_source():
    assert tokenize("") == []
    assert tokenize("no commands here\n") == []


def test_located_instruction_display():
    instr = LocatedInstruction(InstructionKind.OUTPUT, 12, 7)
    assert str(instr) == "12:7\tOutput"


def test_located_instruction_rejects_zero_location():
    with pytest.raises(ValueError):
        LocatedInstruction(InstructionKind.OUTPUT, 0, 1)
    with pytest.raises(ValueError):
        LocatedInstruction(InstructionKind.OUTPUT, 1, 0)

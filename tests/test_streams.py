#!/usr/bin/env python3
"""
Tests for the byte reader/writer adapters and the trailing-newline sink.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

import pytest

from bft.engine import run
from bft.errors import WriteError
from bft.program import Program
from bft.streams import ByteReader, ByteWriter, TrailingNewlineWriter


def test_reader_reads_one_byte_at_a_time():
    reader = ByteReader.from_bytes(b"AB")
    assert reader.read_byte() == 0x41
    assert reader.read_byte() == 0x42
    with pytest.raises(EOFError):
        reader.read_byte()


def test_writer_collects_bytes():
    writer = ByteWriter.to_buffer()
    for b in b"hi\n":
        writer.write_byte(b)
    writer.flush()
    assert writer.getvalue() == b"hi\n"


def test_writer_on_closed_stream():
    stream = io.BytesIO()
    stream.close()
    with pytest.raises(ValueError):
        ByteWriter(stream).write_byte(1)


def test_trailing_newline_added():
    inner = ByteWriter.to_buffer()
    with TrailingNewlineWriter(inner) as sink:
        sink.write_byte(ord('A'))
        sink.write_byte(ord('B'))
    assert inner.getvalue() == b"AB\n"


def test_trailing_newline_not_doubled():
    inner = ByteWriter.to_buffer()
    with TrailingNewlineWriter(inner) as sink:
        sink.write_byte(ord('A'))
        sink.write_byte(ord('\n'))
    assert inner.getvalue() == b"A\n"


def test_trailing_newline_when_nothing_written():
    inner = ByteWriter.to_buffer()
    with TrailingNewlineWriter(inner):
        pass
    assert inner.getvalue() == b"\n"


def test_trailing_newline_on_error_exit():
    inner = ByteWriter.to_buffer()
    with pytest.raises(RuntimeError):
        with TrailingNewlineWriter(inner) as sink:
            sink.write_byte(ord('x'))
            raise RuntimeError("boom")
    assert inner.getvalue() == b"x\n"


class _BrokenSink:
    def __init__(self):
        self.attempts = 0

    def write_byte(self, byte):
        self.attempts += 1
        raise BrokenPipeError("pipe closed")

    def flush(self):
        pass


def test_failed_sink_keeps_write_error():
    """A run stopped by a failing sink reports the WriteError, with no newline attempt."""
    sink = _BrokenSink()
    program = Program.build("p.bf", "+.")
    with pytest.raises(WriteError) as info:
        with TrailingNewlineWriter(sink) as out:
            run(program, None, ByteReader.from_bytes(b""), out)
    assert isinstance(info.value.cause, BrokenPipeError)
    assert info.value.instruction.column == 2
    assert sink.attempts == 1


def test_getvalue_needs_a_buffer(tmp_path):
    with open(tmp_path / "out.bin", "wb") as f:
        writer = ByteWriter(f)
        writer.write_byte(0x41)
        with pytest.raises(TypeError):
            writer.getvalue()

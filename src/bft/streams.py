"""Byte-at-a-time input and output for the virtual machine.

The machine only needs something with ``read_byte()`` and something with
``write_byte()`` + ``flush()``. The adapters here wrap binary file objects
(``sys.stdin.buffer``, ``io.BytesIO``, sockets' ``makefile('rb')`` ...).
"""
from __future__ import annotations

import io
from typing import BinaryIO, Optional, Protocol

from .errors import WriteError


class ByteSource(Protocol):
    def read_byte(self) -> int:
        """Return the next byte, or raise (EOFError, OSError) if there is none."""


class ByteSink(Protocol):
    def write_byte(self, byte: int) -> None:
        ...

    def flush(self) -> None:
        ...


class ByteReader:
    def __init__(self, fileobj: BinaryIO):
        self.fileobj = fileobj

    @classmethod
    def from_bytes(cls, data: bytes) -> 'ByteReader':
        return cls(io.BytesIO(data))

    def read_byte(self) -> int:
        data = self.fileobj.read(1)
        if not data:
            raise EOFError('end of input')
        return data[0]


class ByteWriter:
    def __init__(self, fileobj: BinaryIO):
        self.fileobj = fileobj

    @classmethod
    def to_buffer(cls) -> 'ByteWriter':
        return cls(io.BytesIO())

    def write_byte(self, byte: int) -> None:
        written = self.fileobj.write(bytes((byte,)))
        # Non-blocking raw streams report a short write as 0 or None.
        if written is not None and written != 1:
            raise OSError(f'short write: {written} of 1 bytes')

    def flush(self) -> None:
        self.fileobj.flush()

    def getvalue(self) -> bytes:
        """Bytes written so far. Only for writers made by :meth:`to_buffer`."""
        if not isinstance(self.fileobj, io.BytesIO):
            raise TypeError(f"getvalue() needs a BytesIO, not {type(self.fileobj).__name__}")
        return self.fileobj.getvalue()


class TrailingNewlineWriter:
    """Sink decorator that makes sure the output ends with a newline.

    Use as a context manager; the newline (if needed) is written on exit,
    whether or not the run succeeded, unless the run stopped because the
    sink itself failed.
    """

    def __init__(self, inner: ByteSink):
        self.inner = inner
        self.last_byte: Optional[int] = None

    def write_byte(self, byte: int) -> None:
        self.inner.write_byte(byte)
        self.last_byte = byte

    def flush(self) -> None:
        self.inner.flush()

    def close(self) -> None:
        if self.last_byte != 0x0A:
            self.write_byte(0x0A)
        self.flush()

    def __enter__(self) -> 'TrailingNewlineWriter':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if isinstance(exc, WriteError):
            return
        self.close()

"""
Output Sinks
============

Append-only destinations for encoded machine code.

A sink tracks the compile position: ``here()`` is the address the next
byte will be placed at (origin + bytes emitted so far). Sinks never
rewind; bytes are kept even when a later step of the same instruction
fails.

- **CodeBuffer**: accumulates bytes in memory (``bytearray``)
- **StreamSink**: writes each byte straight through to a binary stream
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Iterable


class OutputSink(ABC):
    """Abstract append-only byte sink with a compile position."""

    def __init__(self, origin: int = 0):
        self.origin = origin & 0xFFFF
        self._count = 0

    @abstractmethod
    def _write(self, value: int) -> None:
        ...

    def emit(self, value: int) -> None:
        """Append one byte and advance the compile position."""
        self._write(value & 0xFF)
        self._count += 1

    def emit_bytes(self, values: Iterable[int]) -> None:
        for value in values:
            self.emit(value)

    def here(self) -> int:
        """Current compile position (address of the next byte)."""
        return (self.origin + self._count) & 0xFFFF

    @property
    def size(self) -> int:
        """Number of bytes emitted so far."""
        return self._count


class CodeBuffer(OutputSink):
    """
    In-memory code buffer.

    Example:
        >>> buf = CodeBuffer(origin=0x1000)
        >>> buf.emit(0xEA)
        >>> buf.here()
        4097
        >>> buf.code
        b'\\xea'
    """

    def __init__(self, origin: int = 0):
        super().__init__(origin)
        self._data = bytearray()

    def _write(self, value: int) -> None:
        self._data.append(value)

    @property
    def code(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"CodeBuffer(origin=${self.origin:04X}, {self._data.hex(' ')})"


class StreamSink(OutputSink):
    """
    Streaming sink that writes through to a binary file object.

    Bytes are written one at a time in call order. The stream is not
    closed by the sink; the caller owns it.
    """

    def __init__(self, stream: BinaryIO, origin: int = 0):
        super().__init__(origin)
        self.stream = stream

    def _write(self, value: int) -> None:
        self.stream.write(bytes((value,)))

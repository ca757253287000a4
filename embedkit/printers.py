"""Byte sinks with a print interface: fixed buffer, size counter and string."""

from __future__ import annotations

import abc

__all__ = ["Printer", "PrintCharArray", "PrintSize", "PrintString"]

_NEWLINE = "\r\n"


def _format(value: object) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, bool):
        return str(int(value)).encode()
    if isinstance(value, float):
        return f"{value:.2f}".encode()
    return str(value).encode("utf-8")


class Printer(abc.ABC):
    """Base for anything that accepts bytes one at a time."""

    @abc.abstractmethod
    def write_byte(self, byte: int) -> int:
        """Accept one byte; return 1 if it was taken, 0 if not."""

    def write(self, data: bytes | bytearray | str) -> int:
        """Write bytes until the sink refuses one; return how many were taken."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        written = 0
        for byte in data:
            if not self.write_byte(byte):
                break
            written += 1
        return written

    def print(self, value: object) -> int:
        """Write the text form of ``value``; floats get two decimals."""
        return self.write(_format(value))

    def println(self, value: object = "") -> int:
        """Like :meth:`print`, followed by a CR LF line ending."""
        return self.print(value) + self.write(_NEWLINE)


def _check_byte(byte: int) -> None:
    if not 0 <= byte <= 0xFF:
        raise ValueError("byte must be in range 0..255")


class PrintCharArray(Printer):
    """Captures output into a buffer of fixed capacity.

    One slot of the capacity is reserved, so at most ``capacity - 1`` bytes
    are held.
    """

    def __init__(self, capacity: int = 256) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._buffer = bytearray()

    def write_byte(self, byte: int) -> int:
        _check_byte(byte)
        if len(self._buffer) < self._capacity - 1:
            self._buffer.append(byte)
            return 1
        return 0

    def clear(self) -> None:
        self._buffer.clear()

    def free(self) -> int:
        return self._capacity - len(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def text(self) -> str:
        return self._buffer.decode("utf-8", errors="replace")


class PrintSize(Printer):
    """Discards output; the return values of print calls give its size."""

    def write_byte(self, byte: int) -> int:
        _check_byte(byte)
        return 1


class PrintString(Printer):
    """Captures output into a growing string."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_byte(self, byte: int) -> int:
        _check_byte(byte)
        self._buffer.append(byte)
        return 1

    def clear(self) -> None:
        self._buffer.clear()

    def text(self) -> str:
        return self._buffer.decode("utf-8", errors="replace")
"""Compact storage for an array of 4-bit values."""

from __future__ import annotations

__all__ = ["NibbleArray"]


class NibbleArray:
    """A fixed-size array of nibbles, two per byte.

    Values are masked to their low four bits on assignment. Even indices
    occupy the high nibble of a byte, odd indices the low nibble.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._data = bytearray((size + 1) // 2)

    def _position(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("nibble indices must be integers")
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("nibble index out of range")
        return index

    def __getitem__(self, index: int) -> int:
        index = self._position(index)
        byte = self._data[index // 2]
        if index & 1:
            return byte & 0x0F
        return byte >> 4

    def __setitem__(self, index: int, value: int) -> None:
        index = self._position(index)
        nibble = value & 0x0F
        pos = index // 2
        if index & 1:
            self._data[pos] = (self._data[pos] & 0xF0) | nibble
        else:
            self._data[pos] = (self._data[pos] & 0x0F) | (nibble << 4)

    def __len__(self) -> int:
        return self._size
"""A set of byte values 0..255 stored as a 256-bit mask."""

from __future__ import annotations

from typing import Iterable, Iterator

__all__ = ["ByteSet"]

_UNIVERSE = 256
_FULL = (1 << _UNIVERSE) - 1


def _check(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("ByteSet elements must be integers")
    if not 0 <= value < _UNIVERSE:
        raise ValueError("ByteSet elements must be in range 0..255")
    return value


class ByteSet:
    """A mutable set of integers in the range 0..255.

    Besides the usual set protocol it keeps a cursor for stepping through
    the elements with :meth:`first`, :meth:`next`, :meth:`prev` and
    :meth:`last`; these return -1 when there is no such element.
    Union, difference and intersection are spelled ``+``, ``-`` and ``*``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._bits = 0
        self._current = -1
        for value in values:
            self.add(value)

    @classmethod
    def _from_bits(cls, bits: int) -> ByteSet:
        result = cls()
        result._bits = bits & _FULL
        return result

    def copy(self) -> ByteSet:
        """Return a new set with the same elements and a fresh cursor."""
        return ByteSet._from_bits(self._bits)

    def add(self, value: int) -> None:
        self._bits |= 1 << _check(value)

    def discard(self, value: int) -> None:
        self._bits &= ~(1 << _check(value))

    def toggle(self, value: int) -> None:
        """Add ``value`` if absent, remove it if present."""
        self._bits ^= 1 << _check(value)

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if not 0 <= value < _UNIVERSE:
            return False
        return bool(self._bits >> value & 1)

    def __len__(self) -> int:
        return self._bits.bit_count()

    def __iter__(self) -> Iterator[int]:
        bits = self._bits
        return (v for v in range(_UNIVERSE) if bits >> v & 1)

    def __repr__(self) -> str:
        return f"ByteSet({list(self)!r})"

    def clear(self) -> None:
        self._bits = 0

    def invert(self) -> None:
        """Replace the set by its complement within 0..255."""
        self._bits ^= _FULL

    def is_empty(self) -> bool:
        return self._bits == 0

    def is_full(self) -> bool:
        return self._bits == _FULL

    def _find_next(self, start: int) -> int:
        for value in range(start, _UNIVERSE):
            if self._bits >> value & 1:
                self._current = value
                return value
        self._current = -1
        return -1

    def _find_prev(self, start: int) -> int:
        for value in range(start, -1, -1):
            if self._bits >> value & 1:
                self._current = value
                return value
        self._current = -1
        return -1

    def first(self) -> int:
        """Smallest element, or -1; moves the cursor there."""
        return self._find_next(0)

    def next(self) -> int:
        """Element after the cursor, or -1 when there is none."""
        if self._current == -1:
            return -1
        return self._find_next(self._current + 1)

    def prev(self) -> int:
        """Element before the cursor, or -1 when there is none."""
        if self._current == -1:
            return -1
        return self._find_prev(self._current - 1)

    def last(self) -> int:
        """Largest element, or -1; moves the cursor there."""
        return self._find_prev(_UNIVERSE - 1)

    def __add__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return ByteSet._from_bits(self._bits | other._bits)

    def __sub__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return ByteSet._from_bits(self._bits & ~other._bits)

    def __mul__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return ByteSet._from_bits(self._bits & other._bits)

    def __iadd__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        self._bits |= other._bits
        return self

    def __isub__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        self._bits &= ~other._bits
        return self

    def __imul__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        self._bits &= other._bits
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return self._bits == other._bits

    def __le__(self, other: object) -> bool:
        """True when every element of this set is also in ``other``."""
        if not isinstance(other, ByteSet):
            return NotImplemented
        return self._bits & ~other._bits == 0
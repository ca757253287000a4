"""Three-valued logic: true, false and unknown (Kleene)."""

from __future__ import annotations

__all__ = ["Troolean", "UNKNOWN"]

UNKNOWN = -1

_FALSE = 0
_TRUE = 1


def _normalise(value: object) -> int:
    if isinstance(value, Troolean):
        return value._value
    if value is None:
        return UNKNOWN
    if isinstance(value, bool):
        return _TRUE if value else _FALSE
    if isinstance(value, int):
        if value == 0:
            return _FALSE
        if value == UNKNOWN:
            return UNKNOWN
        return _TRUE
    raise TypeError(f"cannot make a Troolean from {type(value).__name__}")


class Troolean:
    """A truth value that may be true, false or unknown.

    Built from a bool, a Troolean, ``None`` (unknown) or an int: 0 is
    false, -1 is unknown and any other int is true. The default is unknown.
    ``~``, ``&`` and ``|`` follow Kleene logic; ``bool()`` is true only for
    true.
    """

    __slots__ = ("_value",)

    def __init__(self, value: object = UNKNOWN) -> None:
        self._value = _normalise(value)

    def __str__(self) -> str:
        if self._value == _FALSE:
            return "false"
        if self._value == UNKNOWN:
            return "unknown"
        return "true"

    def __repr__(self) -> str:
        return f"Troolean({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Troolean):
            return self._value == other._value
        if isinstance(other, bool):
            return (self._value == _FALSE and not other) or (
                self._value == _TRUE and other
            )
        if isinstance(other, int):
            return self._value == _normalise(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __bool__(self) -> bool:
        return self._value == _TRUE

    def __invert__(self) -> Troolean:
        if self._value == UNKNOWN:
            return Troolean(UNKNOWN)
        return Troolean(_FALSE if self._value == _TRUE else _TRUE)

    @staticmethod
    def _operand(other: object) -> int | None:
        if isinstance(other, (Troolean, bool)):
            return _normalise(other)
        return None

    def __and__(self, other: object) -> Troolean:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        if self._value == _FALSE or o == _FALSE:
            return Troolean(_FALSE)
        if self._value == _TRUE and o == _TRUE:
            return Troolean(_TRUE)
        return Troolean(UNKNOWN)

    __rand__ = __and__

    def __or__(self, other: object) -> Troolean:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        if self._value == _TRUE or o == _TRUE:
            return Troolean(_TRUE)
        if self._value == _FALSE and o == _FALSE:
            return Troolean(_FALSE)
        return Troolean(UNKNOWN)

    __ror__ = __or__

    def is_true(self) -> bool:
        return self._value == _TRUE

    def is_false(self) -> bool:
        return self._value == _FALSE

    def is_unknown(self) -> bool:
        return self._value == UNKNOWN
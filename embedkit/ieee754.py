"""Bit-level helpers for IEEE 754 single precision floats."""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass

__all__ = [
    "ByteOrder",
    "FloatFields",
    "float_fields",
    "dump_float",
    "float_to_double_packed",
    "double_packed_to_float",
    "is_nan",
    "is_inf",
    "is_pos_inf",
    "is_neg_inf",
    "sign",
    "exponent",
    "mantissa",
    "pow2",
    "pow2_fast",
]

_FLOAT_BIAS = 127
_DOUBLE_BIAS = 1023
_MANTISSA_MASK = 0x7FFFFF
_EXPONENT_SHIFT = 23


class ByteOrder(enum.Enum):
    LSB_FIRST = "lsb"
    MSB_FIRST = "msb"


@dataclass(frozen=True)
class FloatFields:
    """Raw fields of a single precision float; ``exponent`` is still biased."""

    sign: int
    exponent: int
    mantissa: int


def _bits(number: float) -> int:
    try:
        return struct.unpack("<I", struct.pack("<f", number))[0]
    except OverflowError:
        return 0xFF800000 if number < 0 else 0x7F800000


def _from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & 0xFFFFFFFF))[0]


def float_fields(number: float) -> FloatFields:
    """Split ``number``, taken as a 32-bit float, into sign, exponent and mantissa."""
    bits = _bits(number)
    return FloatFields(
        sign=bits >> 31,
        exponent=(bits >> _EXPONENT_SHIFT) & 0xFF,
        mantissa=bits & _MANTISSA_MASK,
    )


def dump_float(number: float) -> str:
    """Return the fields of ``number`` as tab separated upper-case hex."""
    f = float_fields(number)
    return f"{f.sign:X}\t{f.exponent:X}\t{f.mantissa:X}"


def float_to_double_packed(
    number: float, byte_order: ByteOrder = ByteOrder.LSB_FIRST
) -> bytes:
    """Pack a 32-bit float into the 8 bytes of a 64-bit double.

    The exponent is rebiased and the 23 mantissa bits become the top of the
    52-bit mantissa; the low 29 bits are zero.
    """
    f = float_fields(number)
    exp = (f.exponent - _FLOAT_BIAS + _DOUBLE_BIAS) & 0x7FF
    word = (f.sign << 63) | (exp << 52) | (f.mantissa << 29)
    data = word.to_bytes(8, "little")
    return data if byte_order is ByteOrder.LSB_FIRST else data[::-1]


def double_packed_to_float(
    data: bytes, byte_order: ByteOrder = ByteOrder.LSB_FIRST
) -> float:
    """Unpack 8 bytes of a 64-bit double into a 32-bit float.

    The mantissa is truncated to 23 bits and the exponent is wrapped to 8 bits.
    """
    data = bytes(data)
    if len(data) != 8:
        raise ValueError("a packed double needs exactly 8 bytes")
    if byte_order is ByteOrder.MSB_FIRST:
        data = data[::-1]
    word = int.from_bytes(data, "little")
    s = word >> 63
    exp = ((word >> 52) & 0x7FF) - _DOUBLE_BIAS + _FLOAT_BIAS
    man = (word >> 29) & _MANTISSA_MASK
    return _from_bits((s << 31) | ((exp & 0xFF) << _EXPONENT_SHIFT) | man)


def is_nan(number: float) -> bool:
    """True when the upper half of the float is the quiet-NaN pattern 0x7FC0."""
    return (_bits(number) >> 16) == 0x7FC0


def is_inf(number: float) -> int:
    """Return 1 for +inf, -1 for -inf and 0 otherwise."""
    bits = _bits(number)
    if (bits >> 16) & 0xFF != 0x80:
        return 0
    top = bits >> 24
    if top == 0x7F:
        return 1
    if top == 0xFF:
        return -1
    return 0


def is_pos_inf(number: float) -> bool:
    return (_bits(number) >> 16) == 0x7F80


def is_neg_inf(number: float) -> bool:
    return (_bits(number) >> 16) == 0xFF80


def sign(number: float) -> int:
    return float_fields(number).sign


def exponent(number: float) -> int:
    """Unbiased exponent."""
    return float_fields(number).exponent - _FLOAT_BIAS


def mantissa(number: float) -> int:
    return float_fields(number).mantissa


def _with_exponent(number: float, exp: int) -> float:
    bits = _bits(number) & ~(0xFF << _EXPONENT_SHIFT)
    return _from_bits(bits | ((exp & 0xFF) << _EXPONENT_SHIFT))


def pow2(number: float, n: int) -> float:
    """Multiply by 2**n by adjusting the exponent; overflow gives signed infinity."""
    f = float_fields(number)
    exp = f.exponent + n
    if 0 <= exp < 256:
        return _with_exponent(number, exp)
    return -math.inf if f.sign else math.inf


def pow2_fast(number: float, n: int) -> float:
    """Adjust the exponent by ``n`` with no overflow check; it wraps in 8 bits."""
    return _with_exponent(number, float_fields(number).exponent + n)
import math
import struct

import pytest

from embedkit.ieee754 import (
    ByteOrder,
    FloatFields,
    double_packed_to_float,
    dump_float,
    exponent,
    float_fields,
    float_to_double_packed,
    is_inf,
    is_nan,
    is_neg_inf,
    is_pos_inf,
    mantissa,
    pow2,
    pow2_fast,
    sign,
)


def test_float_fields_of_one():
    assert float_fields(1.0) == FloatFields(sign=0, exponent=127, mantissa=0)


def test_dump_float_one():
    assert dump_float(1.0) == "0\t7F\t0"


def test_sign():
    assert sign(-2.5) == 1
    assert sign(2.5) == 0


def test_exponent_of_power_of_two():
    assert exponent(8.0) == 3
    assert exponent(1.0) == 0


def test_mantissa_of_one_and_a_half():
    assert mantissa(1.5) == 0x400000


@pytest.mark.parametrize("value", [1.5, -3.25, 1024.0, 0.125])
def test_packed_matches_native_double(value):
    assert float_to_double_packed(value) == struct.pack("<d", value)


@pytest.mark.parametrize("value", [1.5, -3.25, 123.456, 1e-20, 3e38, 0.0, -7.0])
def test_pack_round_trip(value):
    expected = struct.unpack("<f", struct.pack("<f", value))[0]
    assert double_packed_to_float(float_to_double_packed(value)) == expected


def test_msb_first_is_reversed():
    lsb = float_to_double_packed(2.75, ByteOrder.LSB_FIRST)
    msb = float_to_double_packed(2.75, ByteOrder.MSB_FIRST)
    assert msb == lsb[::-1]
    assert double_packed_to_float(msb, ByteOrder.MSB_FIRST) == 2.75


def test_unpack_truncates_double_precision():
    value = 0.1
    result = double_packed_to_float(struct.pack("<d", value))
    assert result == pytest.approx(value, rel=1e-6)
    assert result <= value


def test_unpack_requires_eight_bytes():
    with pytest.raises(ValueError):
        double_packed_to_float(b"\x00" * 7)


def test_is_nan():
    assert is_nan(float("nan")) is True
    assert is_nan(1.0) is False


def test_is_inf():
    assert is_inf(math.inf) == 1
    assert is_inf(-math.inf) == -1
    assert is_inf(1.0) == 0


def test_overflowing_double_counts_as_infinity():
    assert is_inf(1e300) == 1
    assert is_pos_inf(1e300) is True


def test_pos_neg_inf():
    assert is_pos_inf(math.inf) and not is_pos_inf(-math.inf)
    assert is_neg_inf(-math.inf) and not is_neg_inf(math.inf)


@pytest.mark.parametrize("value,n", [(3.0, 2), (-1.5, 5), (10.0, -3)])
def test_pow2_scales(value, n):
    assert pow2(value, n) == value * 2**n


def test_pow2_overflow_gives_signed_infinity():
    assert pow2(1.0, 300) == math.inf
    assert pow2(-1.0, 300) == -math.inf


def test_pow2_fast_agrees_in_range():
    assert pow2_fast(5.0, 4) == pow2(5.0, 4)
    assert pow2_fast(5.0, -2) == pow2(5.0, -2)
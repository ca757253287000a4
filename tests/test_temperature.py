import pytest

from embedkit.temperature import (
    dew_point,
    dew_point_fast,
    fahrenheit,
    heat_index,
    heat_index_fast,
    heat_index_fast_int,
    humidex,
    kelvin,
)


def test_fahrenheit_fixed_points():
    assert fahrenheit(0) == 32
    assert fahrenheit(100) == pytest.approx(212)


def test_kelvin_offset():
    assert kelvin(0) == pytest.approx(273.15)
    assert kelvin(25) - kelvin(0) == pytest.approx(25)


@pytest.mark.parametrize("celsius", [0.0, 10.0, 20.0, 30.0])
def test_fast_dew_point_at_saturation_equals_temperature(celsius):
    assert dew_point_fast(celsius, 100) == pytest.approx(celsius, abs=1e-9)


@pytest.mark.parametrize("celsius", [5.0, 20.0, 35.0])
def test_dew_point_at_saturation_close_to_temperature(celsius):
    assert dew_point(celsius, 100) == pytest.approx(celsius, abs=0.5)


def test_dew_point_rises_with_humidity():
    values = [dew_point(25.0, h) for h in (20, 40, 60, 80)]
    assert values == sorted(values)
    assert all(v < 25.0 for v in values)


def test_dew_point_variants_agree():
    for h in (30, 50, 70, 90):
        assert dew_point(22.0, h) == pytest.approx(dew_point_fast(22.0, h), abs=0.7)


def test_humidex_rises_with_dew_point():
    assert humidex(30.0, 10.0) < humidex(30.0, 20.0) < humidex(30.0, 25.0)


def test_heat_index_at_zero_equals_constant():
    assert heat_index(0, 0) == pytest.approx(-42.379)
    assert heat_index_fast(0, 0) == pytest.approx(-42.379)
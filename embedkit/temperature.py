"""Temperature conversions, dew point, humidex and heat index."""

from __future__ import annotations

import math

__all__ = [
    "fahrenheit",
    "kelvin",
    "dew_point",
    "dew_point_fast",
    "humidex",
    "heat_index",
    "heat_index_fast",
    "heat_index_fast_int",
]


def fahrenheit(celsius: float) -> float:
    return 1.8 * celsius + 32


def kelvin(celsius: float) -> float:
    return celsius + 273.15


def dew_point(celsius: float, humidity: float) -> float:
    """Dew point in Celsius after the NOAA formula; ``humidity`` in percent."""
    a0 = 373.15 / (273.15 + celsius)
    total = -7.90298 * (a0 - 1)
    total += 5.02808 * math.log10(a0)
    total += -1.3816e-7 * (10 ** (11.344 * (1 - 1 / a0)) - 1)
    total += 8.1328e-3 * (10 ** (-3.49149 * (a0 - 1)) - 1)
    total += math.log10(1013.246)
    vp = 10 ** (total - 3) * humidity
    t = math.log(vp / 0.61078)
    return (241.88 * t) / (17.558 - t)


def dew_point_fast(celsius: float, humidity: float) -> float:
    """Magnus approximation of the dew point; ``humidity`` in percent."""
    a = 17.271
    b = 237.7
    temp = (a * celsius) / (b + celsius) + math.log(humidity / 100)
    return (b * temp) / (a - temp)


def humidex(celsius: float, dew_point: float) -> float:
    e = 19.833625 - 5417.753 / (273.16 + dew_point)
    return celsius + 3.3941 * math.exp(e) - 5.555


def heat_index(tf: float, r: float) -> float:
    """Heat index; ``tf`` in Fahrenheit, ``r`` relative humidity in percent."""
    c1 = -42.379
    c2 = 2.04901523
    c3 = 10.14333127
    c4 = -0.22475541
    c5 = -0.00683783
    c6 = -0.05481717
    c7 = 0.00122874
    c8 = 0.00085282
    c9 = -0.00000199

    a = ((c5 * tf) + c2) * tf + c1
    b = (((c7 * tf) + c4) * tf + c3) * r
    c = (((c9 * tf) + c8) * tf + c6) * r * r
    return a + b + c


def heat_index_fast(tf: float, r: float) -> float:
    """Heat index from the first four terms only."""
    c1 = -42.379
    c2 = 2.04901523
    c3 = 10.14333127
    c4 = -0.22475541

    a = c2 * tf + c1
    b = (c4 * tf + c3) * r
    return a + b


def heat_index_fast_int(tf: int, r: int) -> int:
    """Integer version of :func:`heat_index_fast` using constants scaled by 1024."""
    c1 = -43396
    c2 = 2098
    c3 = 10387
    c4 = -230

    a = c2 * int(tf) + c1
    b = (c4 * int(tf) + c3) * int(r)
    total = a + b + 512
    quotient = abs(total) // 1024
    return -quotient if total < 0 else quotient
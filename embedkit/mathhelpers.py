"""Number formatting and time conversion helpers."""

from __future__ import annotations

import math

__all__ = [
    "sci",
    "seconds_to_clock",
    "millis_to_clock",
    "weeks",
    "days",
    "hours",
    "minutes",
]

_SECONDS_PER_DAY = 86400


def sci(number: float, digits: int) -> str:
    """Format ``number`` in scientific notation with ``digits`` decimals."""
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "-inf" if number < 0 else "inf"

    parts = []
    if number < 0.0:
        parts.append("-")
        number = -number

    exp = 0
    while number >= 10.0:
        number /= 10
        exp += 1
    while number < 1 and number != 0.0:
        number *= 10
        exp -= 1

    rounding = 0.5
    for _ in range(digits):
        rounding *= 0.1
    number += rounding
    if number >= 10:
        exp += 1
        number /= 10

    digit = int(number)
    remainder = number - digit
    parts.append(str(digit))
    if digits > 0:
        parts.append(".")
    for _ in range(digits):
        remainder *= 10.0
        digit = int(remainder)
        parts.append(str(digit))
        remainder -= digit

    parts.append("E")
    parts.append("-" if exp < 0 else "+")
    parts.append(f"{abs(exp):02d}")
    return "".join(parts)


def seconds_to_clock(seconds: int, display_seconds: bool = False) -> str:
    """Return the time of day as ``HH:MM`` or ``HH:MM:SS``; whole days are dropped."""
    seconds = int(seconds)
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    hrs, rest = divmod(seconds % _SECONDS_PER_DAY, 3600)
    mins, secs = divmod(rest, 60)
    text = f"{hrs:02d}:{mins:02d}"
    if display_seconds:
        text += f":{secs:02d}"
    return text


def millis_to_clock(millis: int) -> str:
    """Return the time of day as ``HH:MM:SS.mmm``."""
    millis = int(millis)
    if millis < 0:
        raise ValueError("millis must not be negative")
    secs, ms = divmod(millis, 1000)
    return f"{seconds_to_clock(secs, True)}.{ms:03d}"


def weeks(seconds: float) -> float:
    return seconds * 1.653439153439e-6


def days(seconds: float) -> float:
    return seconds * 1.157407407407e-5


def hours(seconds: float) -> float:
    return seconds * 2.777777777778e-4


def minutes(seconds: float) -> float:
    return seconds * 1.666666666667e-2
"""Decoder for the MAX31855 thermocouple-to-digital converter."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

__all__ = ["Status", "Thermocouple", "Reading", "MAX31855", "decode_frame"]


class Status(enum.IntFlag):
    OK = 0x00
    OPEN_CIRCUIT = 0x01
    SHORT_TO_GND = 0x02
    SHORT_TO_VCC = 0x04
    NOREAD = 0x80


class Thermocouple(float, enum.Enum):
    """Linear factors converting a K-type reading to other thermocouple types."""

    E = 41.276 / 76.373
    J = 41.276 / 57.953
    K = 41.276 / 41.276
    N = 41.276 / 36.256
    R = 41.276 / 10.506
    S = 41.276 / 9.587
    T = 41.276 / 52.18


@dataclass(frozen=True)
class Reading:
    """One decoded 32-bit frame; temperatures in degrees Celsius."""

    status: Status
    internal: float
    temperature: float


def decode_frame(value: int) -> Reading:
    """Decode the 32-bit word shifted out of the chip."""
    value &= 0xFFFFFFFF
    status = Status(value & 0x07)

    internal_bits = value >> 4
    internal = (internal_bits & 0x07FF) * 0.0625
    if internal_bits & 0x0800:
        internal -= 128

    temp_bits = value >> 18
    temperature = (temp_bits & 0x1FFF) * 0.25
    if temp_bits & 0x2000:
        temperature -= 2048

    return Reading(status=status, internal=internal, temperature=temperature)


class MAX31855:
    """Thermocouple reader.

    ``reader`` returns the raw 32-bit frame from the chip. ``offset`` is
    added to every thermocouple reading and ``tc_factor`` converts it for
    thermocouple types other than K.
    """

    def __init__(self, reader: Callable[[], int]) -> None:
        self._reader = reader
        self.offset = 0.0
        self.tc_factor: float = Thermocouple.K
        self._status = Status.NOREAD
        self._temperature = -999.0
        self._internal = -999.0

    def read(self) -> Status:
        """Fetch and decode a frame; return its status bits."""
        frame = decode_frame(self._reader())
        self._status = frame.status
        self._internal = frame.internal
        self._temperature = frame.temperature
        if self.offset != 0:
            self._temperature += self.offset
        return self._status

    def internal(self) -> float:
        """Cold-junction temperature of the last read."""
        return self._internal

    def temperature(self) -> float:
        """Thermocouple temperature of the last read, scaled by ``tc_factor``."""
        return self._temperature * float(self.tc_factor)

    def status(self) -> Status:
        return self._status
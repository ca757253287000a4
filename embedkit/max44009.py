"""Driver for the MAX44009 ambient light sensor."""

from __future__ import annotations

import math

from .i2c import I2CBus, I2CError

__all__ = [
    "Max44009",
    "lux_from_registers",
    "encode_threshold",
    "decode_threshold",
    "INTERRUPT_STATUS",
    "INTERRUPT_ENABLE",
    "CONFIGURATION",
    "LUX_READING_HIGH",
    "LUX_READING_LOW",
    "THRESHOLD_HIGH",
    "THRESHOLD_LOW",
    "THRESHOLD_TIMER",
    "CFG_CONTINUOUS",
    "CFG_MANUAL",
    "CFG_CDR",
    "CFG_TIMER",
]

INTERRUPT_STATUS = 0x00
INTERRUPT_ENABLE = 0x01
CONFIGURATION = 0x02
LUX_READING_HIGH = 0x03
LUX_READING_LOW = 0x04
THRESHOLD_HIGH = 0x05
THRESHOLD_LOW = 0x06
THRESHOLD_TIMER = 0x07

CFG_CONTINUOUS = 0x80
CFG_MANUAL = 0x40
CFG_CDR = 0x08
CFG_TIMER = 0x07

_LUX_PER_COUNT = 0.045
_READ_ERROR = 10


def lux_from_registers(high: int, low: int) -> float:
    """Convert the two lux reading registers into lux."""
    exp = (high & 0xFF) >> 4
    man = ((high & 0x0F) << 4) + (low & 0x0F)
    return (man << exp) * _LUX_PER_COUNT


def encode_threshold(value: float) -> int:
    """Encode a lux threshold into the register byte (exponent, top mantissa nibble)."""
    if value < 0:
        raise ValueError("threshold must not be negative")
    man = int(math.floor(value / _LUX_PER_COUNT + 0.5))
    exp = 0
    while man > 255:
        man >>= 1
        exp += 1
    if exp > 15:
        raise ValueError("threshold too large")
    return (exp << 4) | ((man >> 4) & 0x0F)


def decode_threshold(data: int) -> float:
    """Convert a threshold register byte back into lux."""
    exp = (data & 0xF0) >> 4
    man = ((data & 0x0F) << 4) + 0x0F
    return (man << exp) * _LUX_PER_COUNT


class Max44009:
    """Lux sensor with thresholds, interrupt and measurement configuration."""

    def __init__(self, bus: I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address

    def _read(self, reg: int) -> int:
        data = bytes(self._bus.write_read(self._address, bytes([reg]), 1))
        if len(data) != 1:
            raise I2CError("MAX44009 did not return a byte", code=_READ_ERROR)
        return data[0]

    def _write(self, reg: int, value: int) -> None:
        self._bus.write(self._address, bytes([reg, value & 0xFF]))

    def lux(self) -> float:
        """Current light level in lux."""
        high = self._read(LUX_READING_HIGH)
        low = self._read(LUX_READING_LOW)
        return lux_from_registers(high, low)

    def set_high_threshold(self, value: float) -> None:
        self._write(THRESHOLD_HIGH, encode_threshold(value))

    def get_high_threshold(self) -> float:
        return decode_threshold(self._read(THRESHOLD_HIGH))

    def set_low_threshold(self, value: float) -> None:
        self._write(THRESHOLD_LOW, encode_threshold(value))

    def get_low_threshold(self) -> float:
        return decode_threshold(self._read(THRESHOLD_LOW))

    def set_threshold_timer(self, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError("timer value must be in range 0..255")
        self._write(THRESHOLD_TIMER, value)

    def get_threshold_timer(self) -> int:
        return self._read(THRESHOLD_TIMER)

    def enable_interrupt(self) -> None:
        self._write(INTERRUPT_ENABLE, 1)

    def disable_interrupt(self) -> None:
        self._write(INTERRUPT_ENABLE, 0)

    def interrupt_enabled(self) -> bool:
        return bool(self._read(INTERRUPT_ENABLE) & 0x01)

    def interrupt_status(self) -> int:
        return self._read(INTERRUPT_STATUS) & 0x01

    def set_configuration(self, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError("configuration must be in range 0..255")
        self._write(CONFIGURATION, value)

    def get_configuration(self) -> int:
        return self._read(CONFIGURATION)

    def set_automatic_mode(self) -> None:
        """Clear the continuous and manual bits."""
        config = self._read(CONFIGURATION)
        config &= ~CFG_CONTINUOUS & ~CFG_MANUAL & 0xFF
        self._write(CONFIGURATION, config)

    def set_continuous_mode(self) -> None:
        """Set the continuous bit and clear the manual bit."""
        config = self._read(CONFIGURATION)
        config |= CFG_CONTINUOUS
        config &= ~CFG_MANUAL & 0xFF
        self._write(CONFIGURATION, config)

    def set_manual_mode(self, cdr: int, tim: int) -> None:
        """Select manual mode with current divisor ``cdr`` (0/1) and timer ``tim`` (0..7)."""
        cdr = 1 if cdr else 0
        tim = max(0, min(tim, 7))
        config = self._read(CONFIGURATION)
        config &= ~CFG_CONTINUOUS & 0xFF
        config |= CFG_MANUAL
        config &= 0xF0
        config |= (cdr << 3) | tim
        self._write(CONFIGURATION, config)
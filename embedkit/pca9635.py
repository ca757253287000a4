"""Driver for the PCA9635 16-channel I2C LED controller."""

from __future__ import annotations

import enum
from typing import Iterable

from .i2c import I2CBus, I2CError

__all__ = ["LedDriverMode", "PCA9635"]

MODE1 = 0x00
MODE2 = 0x01
GRPPWM = 0x12
GRPFREQ = 0x13
LEDOUT_BASE = 0x14
_PWM_BASE = 0x82  # auto-increment flag plus PWM0
_CHANNELS = 16
_ERROR = 0xFF


class LedDriverMode(enum.IntEnum):
    OFF = 0x00
    ON = 0x01
    PWM = 0x02
    GRPPWM = 0x03


def _check_channel(channel: int) -> None:
    if not 0 <= channel < _CHANNELS:
        raise ValueError("channel must be in range 0..15")


def _check_mode_register(reg: int) -> None:
    if reg not in (MODE1, MODE2):
        raise ValueError("mode register must be MODE1 (0) or MODE2 (1)")


class PCA9635:
    """Sixteen PWM channels with per-channel driver modes."""

    def __init__(self, bus: I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address
        self._write_reg(MODE1, 0x81)  # auto-increment, no sleep, all-call

    def _write_reg(self, reg: int, value: int) -> None:
        self._bus.write(self._address, bytes([reg, value]))

    def _read_reg(self, reg: int) -> int:
        data = bytes(self._bus.write_read(self._address, bytes([reg]), 1))
        if len(data) != 1:
            raise I2CError("PCA9635 did not return a byte", code=_ERROR)
        return data[0]

    def write1(self, channel: int, value: int) -> None:
        """Set the PWM value of one channel."""
        self.write_n(channel, [value])

    def write3(self, channel: int, r: int, g: int, b: int) -> None:
        """Set three consecutive channels, typically an RGB LED."""
        self.write_n(channel, [r, g, b])

    def write_n(self, channel: int, values: Iterable[int]) -> None:
        """Set consecutive channels starting at ``channel``."""
        _check_channel(channel)
        values = bytes(values)
        if channel + len(values) > _CHANNELS:
            raise ValueError("values run past the last channel")
        self._bus.write(self._address, bytes([_PWM_BASE + channel]) + values)

    def write_mode(self, reg: int, value: int) -> None:
        _check_mode_register(reg)
        self._write_reg(reg, value)

    def read_mode(self, reg: int) -> int:
        _check_mode_register(reg)
        return self._read_reg(reg)

    def set_led_driver_mode(self, channel: int, mode: int) -> None:
        """Set how a channel is driven: off, on, PWM or group PWM."""
        _check_channel(channel)
        mode = LedDriverMode(mode)
        reg = LEDOUT_BASE + (channel >> 2)
        shift = (channel & 0x03) * 2
        value = (self._read_reg(reg) & ~(0x03 << shift) & 0xFF) | (mode << shift)
        self._write_reg(reg, value)

    def get_led_driver_mode(self, channel: int) -> LedDriverMode:
        _check_channel(channel)
        reg = LEDOUT_BASE + (channel >> 2)
        shift = (channel & 0x03) * 2
        return LedDriverMode((self._read_reg(reg) >> shift) & 0x03)

    def set_group_pwm(self, value: int) -> None:
        self._write_reg(GRPPWM, value)

    def get_group_pwm(self) -> int:
        return self._read_reg(GRPPWM)

    def set_group_freq(self, value: int) -> None:
        self._write_reg(GRPFREQ, value)

    def get_group_freq(self) -> int:
        return self._read_reg(GRPFREQ)
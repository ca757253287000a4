"""Driver for the PCA9685 16-channel 12-bit PWM controller."""

from __future__ import annotations

from .i2c import I2CBus, I2CError

__all__ = ["PCA9685"]

MODE1 = 0x00
MODE2 = 0x01

_AUTOINCR = 0x20
_ALLCALL = 0x01
_OUTDRV = 0x04
_PRE_SCALE = 0xFE
_LED0_ON_L = 0x06
_ERROR = 0xFF
_CHANNELS = 16
_FULL = 0x1000


def _check_channel(channel: int) -> None:
    if not 0 <= channel < _CHANNELS:
        raise ValueError("channel must be in range 0..15")


def _check_mode_register(reg: int) -> None:
    if reg not in (MODE1, MODE2):
        raise ValueError("mode register must be MODE1 (0) or MODE2 (1)")


class PCA9685:
    """Sixteen PWM channels with independent on and off times."""

    def __init__(self, bus: I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address

    def begin(self) -> None:
        """Enable auto-increment and all-call, and totem-pole outputs."""
        self._write_reg(MODE1, _AUTOINCR | _ALLCALL)
        self._write_reg(MODE2, _OUTDRV)

    def _write_reg(self, reg: int, value: int) -> None:
        self._bus.write(self._address, bytes([reg, value]))

    def _read(self, reg: int, count: int) -> bytes:
        data = bytes(self._bus.write_read(self._address, bytes([reg]), count))
        if len(data) != count:
            raise I2CError("PCA9685 returned too few bytes", code=_ERROR)
        return data

    def write_mode(self, reg: int, value: int) -> None:
        _check_mode_register(reg)
        self._write_reg(reg, value)

    def read_mode(self, reg: int) -> int:
        _check_mode_register(reg)
        return self._read(reg, 1)[0]

    def set_pwm(self, channel: int, on_time: int, off_time: int | None = None) -> None:
        """Set a channel's on and off times, 0..4095.

        Called with a single time, that time is the off time and the on
        time is 0.
        """
        _check_channel(channel)
        if off_time is None:
            on_time, off_time = 0, on_time
        reg = _LED0_ON_L + (channel << 2)
        self._bus.write(
            self._address,
            bytes(
                [
                    reg,
                    on_time & 0xFF,
                    (on_time >> 8) & 0x0F,
                    off_time & 0xFF,
                    (off_time >> 8) & 0x0F,
                ]
            ),
        )

    def get_pwm(self, channel: int) -> tuple[int, int]:
        """Return ``(on_time, off_time)`` of a channel."""
        _check_channel(channel)
        data = self._read(_LED0_ON_L + (channel << 2), 4)
        return data[1] * 256 + data[0], data[3] * 256 + data[2]

    def set_frequency(self, freq: int) -> None:
        """Set the PWM frequency of all channels, clamped to 24..1526 Hz."""
        freq = max(24, min(int(freq), 1526))
        self._write_reg(_PRE_SCALE, 6104 // freq - 1)

    def set_on(self, channel: int) -> None:
        self.set_pwm(channel, _FULL, 0x0000)

    def set_off(self, channel: int) -> None:
        self.set_pwm(channel, 0x0000, _FULL)
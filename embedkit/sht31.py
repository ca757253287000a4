"""Driver for the SHT31 I2C temperature and humidity sensor."""

from __future__ import annotations

import time
from typing import Callable

from .i2c import I2CBus, I2CError

__all__ = ["SHT31", "ADDRESSES"]

ADDRESSES = (0x44, 0x45)

_READ_STATUS = 0xF32D
_CLEAR_STATUS = 0x3041
_SOFT_RESET = 0x30A2
_MEASUREMENT_FAST = 0x2416
_MEASUREMENT_SLOW = 0x2400
_HEAT_ON = 0x306D
_HEAT_OFF = 0x3066

_FAST_DELAY_MS = 4
_SLOW_DELAY_MS = 15
_RESET_DELAY_MS = 1
_MASK = 0xFFFFFFFF


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000)


class SHT31:
    """Temperature (degC) and relative humidity (%) sensor.

    ``clock`` returns the current time in seconds and ``delay`` waits the
    given number of milliseconds. The results of the last measurement are
    kept in :attr:`temperature` and :attr:`humidity`.
    """

    def __init__(
        self,
        bus: I2CBus,
        clock: Callable[[], float] = time.monotonic,
        delay: Callable[[float], object] = _sleep_ms,
    ) -> None:
        self._bus = bus
        self._clock = clock
        self._delay = delay
        self._address = 0
        self._last_read = 0
        self._last_request = 0
        self.temperature = 0.0
        self.humidity = 0.0

    def _millis(self) -> int:
        return int(self._clock() * 1000) & _MASK

    def _write_cmd(self, cmd: int) -> None:
        self._bus.write(self._address, bytes([cmd >> 8, cmd & 0xFF]))

    def _read_bytes(self, count: int) -> bytes:
        data = bytes(self._bus.read(self._address, count))
        if len(data) < count:
            raise I2CError("SHT31 returned too few bytes")
        return data

    def _decode(self, data: bytes) -> None:
        raw_t = (data[0] << 8) + data[1]
        raw_h = (data[3] << 8) + data[4]
        self.temperature = raw_t * (175.0 / 65535) - 45
        self.humidity = raw_h * (100.0 / 65535)
        self._last_read = self._millis()

    def begin(self, address: int) -> None:
        """Select the sensor at ``address`` (0x44 or 0x45) and soft-reset it."""
        if address not in ADDRESSES:
            raise ValueError("SHT31 address must be 0x44 or 0x45")
        self._address = address
        self.reset()

    def read(self, fast: bool = True) -> None:
        """Measure and store temperature and humidity."""
        if fast:
            self._write_cmd(_MEASUREMENT_FAST)
            self._delay(_FAST_DELAY_MS)
        else:
            self._write_cmd(_MEASUREMENT_SLOW)
            self._delay(_SLOW_DELAY_MS)
        self._decode(self._read_bytes(6))

    def read_status(self) -> int:
        """Return the 16-bit status register.

        Bit 15 alert pending, 13 heater on, 11 humidity alert, 10 temperature
        alert, 4 reset detected, 1 last command failed, 0 write checksum failed.
        """
        self._write_cmd(_READ_STATUS)
        data = self._read_bytes(3)
        return (data[0] << 8) | data[1]

    def reset(self) -> None:
        """Soft-reset the sensor."""
        self._write_cmd(_SOFT_RESET)
        self._delay(_RESET_DELAY_MS)

    def heat_on(self) -> None:
        """Switch the heater on; use it for a few minutes at most."""
        self._write_cmd(_HEAT_ON)

    def heat_off(self) -> None:
        self._write_cmd(_HEAT_OFF)

    def request_data(self) -> None:
        """Start a slow measurement without waiting for it."""
        self._write_cmd(_MEASUREMENT_SLOW)
        self._last_request = self._millis()

    def data_ready(self) -> bool:
        """True once enough time has passed since :meth:`request_data`."""
        return ((self._millis() - self._last_request) & _MASK) > _SLOW_DELAY_MS

    def read_data(self) -> None:
        """Fetch the result of a measurement started with :meth:`request_data`."""
        self._decode(self._read_bytes(6))

    def last_read(self) -> int:
        """Clock time of the last measurement in milliseconds."""
        return self._last_read
"""Driver for the MS5611 barometric pressure and temperature sensor."""

from __future__ import annotations

import time
from typing import Callable

from .i2c import I2CBus, I2CError

__all__ = ["MS5611"]

_CMD_RESET = 0x1E
_CMD_ADC_READ = 0x00
_CMD_PROM_READ = 0xA0
_CMD_CONVERT_D1 = 0x40
_CMD_CONVERT_D2 = 0x50

# Scale factors folded into the calibration words; index 0 is unused so
# indices match the datasheet.
_PROM_FACTORS = (1, 32768, 65536, 3.90625e-3, 7.8125e-3, 256, 1.1920928955e-7)
_CONVERSION_DELAYS_MS = (1, 2, 3, 5, 10)


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000)


class MS5611:
    """Pressure sensor returning temperature in 0.01 degC and pressure in Pa.

    ``delay`` is called with a number of milliseconds to wait for the chip.
    """

    def __init__(
        self,
        bus: I2CBus,
        address: int,
        delay: Callable[[float], object] = _sleep_ms,
    ) -> None:
        self._bus = bus
        self._address = address
        self._delay = delay
        self._temperature = -999
        self._pressure = -999
        self._c = [0.0] * len(_PROM_FACTORS)
        self.init()

    def _command(self, command: int) -> None:
        self._bus.write(self._address, bytes([command]))

    def _read_prom(self, reg: int) -> int:
        self._command(_CMD_PROM_READ + min(reg, 7) * 2)
        data = bytes(self._bus.read(self._address, 2))
        if len(data) < 2:
            raise I2CError("MS5611 PROM read returned too few bytes")
        return int.from_bytes(data[:2], "big")

    def _read_adc(self) -> int:
        self._command(_CMD_ADC_READ)
        data = bytes(self._bus.read(self._address, 3))
        if len(data) < 3:
            raise I2CError("MS5611 ADC read returned too few bytes")
        return int.from_bytes(data[:3], "big")

    def _convert(self, command: int, bits: int) -> int:
        step = max(8, min(bits, 12)) - 8
        self._command(command + step * 2)
        self._delay(_CONVERSION_DELAYS_MS[step])
        return self._read_adc()

    def init(self) -> None:
        """Reset the chip and load its calibration words."""
        self._command(_CMD_RESET)
        self._delay(3)
        self._c = [
            factor * self._read_prom(reg) for reg, factor in enumerate(_PROM_FACTORS)
        ]

    def read(self, bits: int = 8) -> None:
        """Measure temperature and pressure; ``bits`` (8..12) picks the oversampling."""
        d1 = self._convert(_CMD_CONVERT_D1, bits)
        d2 = self._convert(_CMD_CONVERT_D2, bits)
        c = self._c

        dt = d2 - c[5]
        temperature = int(2000 + dt * c[6])
        offset = c[2] + dt * c[4]
        sens = c[1] + dt * c[3]

        if temperature < 2000:
            t2 = dt * dt * 4.6566128731e-10
            t = temperature - 2000
            offset2 = 2.5 * t * t
            sens2 = 1.25 * t * t * t
            if temperature < -1500:
                t = (temperature + 1500) ** 2
                offset2 += 7 * t
                sens2 += 5.5 * t
            temperature = int(temperature - t2)
            offset -= offset2
            sens -= sens2

        self._pressure = int((d1 * sens * 4.76837158205e-7 - offset) * 3.051757813e-5)
        self._temperature = temperature

    def temperature(self) -> int:
        """Temperature of the last read in 0.01 degC; -999 before any read."""
        return self._temperature

    def pressure(self) -> int:
        """Pressure of the last read in Pa; -999 before any read."""
        return self._pressure
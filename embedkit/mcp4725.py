"""Driver for the MCP4725 12-bit I2C digital-to-analog converter."""

from __future__ import annotations

import enum

from .i2c import I2CBus, I2CError

__all__ = ["PowerDownMode", "MCP4725", "MAX_VALUE"]

MAX_VALUE = 4095

_REG_DAC = 0x40
_REG_DAC_EEPROM = 0x60
_GC_RESET = 0x06
_GC_WAKEUP = 0x09
_GENERAL_CALL_ADDRESS = 0


class PowerDownMode(enum.IntEnum):
    NORMAL = 0x00
    R1K = 0x01
    R100K = 0x02
    R500K = 0x03


def _check_value(value: int) -> int:
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"value must be in range 0..{MAX_VALUE}")
    return value


class MCP4725:
    """12-bit DAC with an EEPROM copy of its output and power-down mode.

    The last value written is cached; :meth:`value` returns it without a
    bus transfer.
    """

    def __init__(self, bus: I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address
        self._last_value = 0
        self._power_down_mode = PowerDownMode.NORMAL

    def begin(self) -> None:
        """Load the current output and power-down mode from the chip."""
        self._last_value = self.read_dac()
        self._power_down_mode = self.read_power_down_mode_dac()

    def set_value(self, value: int) -> None:
        """Set the output in fast mode; the same value as before is not resent."""
        if value == self._last_value:
            return
        _check_value(value)
        high = ((value >> 8) & 0x0F) | (self._power_down_mode << 4)
        self._bus.write(self._address, bytes([high, value & 0xFF]))
        self._last_value = value

    def value(self) -> int:
        """Last value written."""
        return self._last_value

    def _wait_ready(self) -> None:
        while not self.ready():
            pass

    def write_dac(self, value: int, eeprom: bool = False) -> None:
        """Write the DAC register, and the EEPROM too when ``eeprom`` is true."""
        _check_value(value)
        self._wait_ready()
        reg = (_REG_DAC_EEPROM if eeprom else _REG_DAC) | (self._power_down_mode << 1)
        self._bus.write(
            self._address, bytes([reg, (value >> 4) & 0xFF, (value & 0x0F) << 4])
        )
        self._last_value = value

    def _read_register(self, length: int) -> bytes:
        self._bus.write(self._address, b"")
        data = bytes(self._bus.read(self._address, length))
        if len(data) < length:
            raise I2CError("MCP4725 returned too few bytes")
        return data

    def ready(self) -> bool:
        """True when no EEPROM write is in progress."""
        return bool(self._read_register(1)[0] & 0x80)

    def read_dac(self) -> int:
        data = self._read_register(3)
        return (data[1] << 4) + (data[2] >> 4)

    def read_eeprom(self) -> int:
        self._wait_ready()
        data = self._read_register(5)
        return ((data[3] & 0x0F) << 8) + data[4]

    def write_power_down_mode(self, mode: int, eeprom: bool = False) -> None:
        """Set the power-down mode, rewriting the current value with it."""
        self._power_down_mode = PowerDownMode(mode & 0x03)
        self.write_dac(self._last_value, eeprom)

    def read_power_down_mode_eeprom(self) -> PowerDownMode:
        self._wait_ready()
        data = self._read_register(4)
        return PowerDownMode((data[3] >> 5) & 0x03)

    def read_power_down_mode_dac(self) -> PowerDownMode:
        self._wait_ready()
        data = self._read_register(1)
        return PowerDownMode((data[0] >> 1) & 0x03)

    def _general_call(self, command: int) -> None:
        self._bus.write(_GENERAL_CALL_ADDRESS, bytes([command]))

    def power_on_reset(self) -> None:
        """General-call reset; the DAC reloads its value from EEPROM."""
        self._general_call(_GC_RESET)
        self._last_value = self.read_dac()

    def power_on_wake_up(self) -> None:
        """General-call wake-up; the DAC power-down mode returns to normal."""
        self._general_call(_GC_WAKEUP)
        self._power_down_mode = self.read_power_down_mode_dac()
"""Driver for the HMC6352 digital compass."""

from __future__ import annotations

import enum
import time
from typing import Callable

from .i2c import I2CBus, I2CError

__all__ = ["Mode", "HMC6352"]

GET_DATA = 0x41
WAKE = 0x57
SLEEP = 0x53
SAVE_OP_MODE = 0x4C
CALIBRATE_ON = 0x43
CALIBRATE_OFF = 0x45
UPDATE_OFFSETS = 0x4F
WRITE_RAM = 0x47
READ_RAM = 0x67
WRITE_EEPROM = 0x77
READ_EEPROM = 0x72

_MIN_ADDRESS = 0x10
_MAX_ADDRESS = 0xF6
_RAM_OP_MODE = 0x74
_RAM_OUTPUT_MODE = 0x4E
_READ_ERROR = -10

_FREQUENCY_BITS = {1: 0x00, 5: 0x20, 10: 0x40, 20: 0x60}


class Mode(enum.IntEnum):
    STANDBY = 0
    QUERY = 1
    CONT = 2


def _sleep_ms(ms: float) -> None:
    time.sleep(ms / 1000)


class HMC6352:
    """Compass returning headings in tenths of a degree.

    ``delay`` waits the given number of milliseconds. Transfer failures
    raise :class:`I2CError`; invalid arguments raise :class:`ValueError`.
    """

    def __init__(
        self,
        bus: I2CBus,
        address: int,
        delay: Callable[[float], object] = _sleep_ms,
    ) -> None:
        self._bus = bus
        self._address = max(_MIN_ADDRESS, min(address, _MAX_ADDRESS))
        self._delay = delay

    def _cmd(self, command: int) -> None:
        self._bus.write(self._address, bytes([command]))
        self._delay(10)

    def _read_cmd(self, command: int, address: int) -> int:
        self._bus.write(self._address, bytes([command, address]))
        self._delay(0.07)
        data = bytes(self._bus.read(self._address, 1))
        if len(data) != 1:
            raise I2CError("HMC6352 did not return a byte", code=_READ_ERROR)
        return data[0]

    def _write_cmd(self, command: int, address: int, data: int) -> None:
        self._bus.write(self._address, bytes([command, address, data & 0xFF]))
        self._delay(0.07)

    def heading(self) -> int:
        """Ask for a new measurement and return it."""
        self.ask_heading()
        return self.read_heading()

    def ask_heading(self) -> None:
        """Ask the device to take a new measurement."""
        self._cmd(GET_DATA)
        self._delay(6)

    def read_heading(self) -> int:
        """Read the last measured heading."""
        data = bytes(self._bus.read(self._address, 2))
        if len(data) != 2:
            raise I2CError("HMC6352 did not return a heading", code=_READ_ERROR)
        return data[0] * 256 + data[1]

    def wake_up(self) -> None:
        """Leave energy saving mode."""
        self._cmd(WAKE)
        self._delay(0.1)

    def sleep(self) -> None:
        """Enter energy saving mode."""
        self._cmd(SLEEP)
        self._delay(0.01)

    def factory_reset(self) -> None:
        """Restore the factory EEPROM contents."""
        self.write_ram(_RAM_OP_MODE, 0x50)
        for address, value in enumerate((66, 0, 0, 0, 0, 1, 4, 6, 0x50)):
            self._write_cmd(WRITE_EEPROM, address, value)
        self.save_op_mode()

    def set_operational_mode(
        self, mode: Mode, freq: int, periodic_reset: bool
    ) -> int:
        """Set and save the operational mode; returns the control byte written.

        ``freq`` is the measurement rate in Hz: 1, 5, 10 or 20. The device
        needs a restart before the new mode takes effect.
        """
        if freq not in _FREQUENCY_BITS:
            raise ValueError("freq must be 1, 5, 10 or 20")
        mode = Mode(mode)
        omcb = _FREQUENCY_BITS[freq]
        if periodic_reset:
            omcb |= 0x10
        omcb |= mode
        self._write_cmd(WRITE_RAM, _RAM_OP_MODE, omcb)
        self.save_op_mode()
        return int(omcb)

    def get_operational_mode(self) -> int:
        return self._read_cmd(READ_RAM, _RAM_OP_MODE)

    def set_output_mode(self, mode: int) -> None:
        """Select heading (0) or one of the raw output modes (1..4)."""
        if not 0 <= mode <= 4:
            raise ValueError("output mode must be in range 0..4")
        self._write_cmd(WRITE_RAM, _RAM_OUTPUT_MODE, mode)

    def get_output_mode(self) -> int:
        return self._read_cmd(READ_RAM, _RAM_OUTPUT_MODE)

    def calibration_on(self) -> None:
        self._cmd(CALIBRATE_ON)
        self._delay(0.01)

    def calibration_off(self) -> None:
        self._cmd(CALIBRATE_OFF)
        self._delay(15)

    def set_i2c_address(self, address: int) -> None:
        if not _MIN_ADDRESS <= address <= _MAX_ADDRESS:
            raise ValueError("address must be in range 0x10..0xF6")
        self._write_cmd(WRITE_EEPROM, 0, address)

    def get_i2c_address(self) -> int:
        return self._read_cmd(READ_EEPROM, 0)

    def write_eeprom(self, address: int, data: int) -> None:
        self._write_cmd(WRITE_EEPROM, address, data)

    def read_eeprom(self, address: int) -> int:
        return self._read_cmd(READ_EEPROM, address)

    def write_ram(self, address: int, data: int) -> None:
        self._write_cmd(WRITE_RAM, address, data)

    def read_ram(self, address: int) -> int:
        return self._read_cmd(READ_RAM, address)

    def set_time_delay(self, msec: int) -> None:
        self._write_cmd(WRITE_EEPROM, 5, msec)

    def get_time_delay(self) -> int:
        return self._read_cmd(READ_EEPROM, 5)

    def set_measurement_summing(self, ms: int) -> None:
        """Set the number of summed measurements, at most 16."""
        self._write_cmd(WRITE_EEPROM, 6, min(ms, 16))

    def get_measurement_summing(self) -> int:
        return self._read_cmd(READ_EEPROM, 6)

    def save_op_mode(self) -> None:
        self._cmd(SAVE_OP_MODE)
        self._delay(0.125)

    def update_offsets(self) -> None:
        self._cmd(UPDATE_OFFSETS)
        self._delay(6)
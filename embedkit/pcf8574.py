"""Driver for the PCF8574 8-bit I2C port expander."""

from __future__ import annotations

from .i2c import I2CBus, I2CError

__all__ = ["PCF8574"]

_I2C_ERROR = 0x82


def _check_pin(pin: int) -> None:
    if not 0 <= pin <= 7:
        raise ValueError("pin must be in range 0..7")


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError("value must be in range 0..255")
    return value


class PCF8574:
    """An 8-bit quasi-bidirectional port.

    The last byte written is cached so single pins can be changed without
    reading the port first. Shift, rotate and toggle assume all lines are
    outputs.
    """

    def __init__(self, bus: I2CBus, address: int) -> None:
        self._bus = bus
        self._address = address
        self._data_in = 0
        self._data_out = 0xFF
        self._button_mask = 0xFF

    def begin(self, value: int = 0xFF) -> None:
        """Put the port into a known state."""
        self.write8(value)

    def read8(self) -> int:
        """Read all eight pins."""
        data = bytes(self._bus.read(self._address, 1))
        if len(data) != 1:
            raise I2CError("PCF8574 did not return a byte", code=_I2C_ERROR)
        self._data_in = data[0]
        return self._data_in

    def read(self, pin: int) -> int:
        """Read one pin; returns 0 or 1."""
        _check_pin(pin)
        self.read8()
        return 1 if self._data_in & (1 << pin) else 0

    def value(self) -> int:
        """Last byte read from the port."""
        return self._data_in

    def write8(self, value: int) -> None:
        """Write all eight pins."""
        self._data_out = _check_byte(value)
        self._bus.write(self._address, bytes([self._data_out]))

    def write(self, pin: int, value: int) -> None:
        """Set one pin low (0) or high (anything else)."""
        _check_pin(pin)
        if value:
            out = self._data_out | (1 << pin)
        else:
            out = self._data_out & ~(1 << pin) & 0xFF
        self.write8(out)

    def value_out(self) -> int:
        """Last byte written to the port."""
        return self._data_out

    def read_button8(self, mask: int | None = None) -> int:
        """Read the port with the pins in ``mask`` briefly set high.

        Without a mask the one set by :meth:`set_button_mask` is used. The
        previous output byte is restored afterwards.
        """
        mask = self._button_mask if mask is None else _check_byte(mask)
        saved = self._data_out
        try:
            self.write8(mask | saved)
            self.read8()
        finally:
            self.write8(saved)
        return self._data_in

    def read_button(self, pin: int) -> int:
        """Read one pin after setting it high; the output is restored."""
        _check_pin(pin)
        saved = self._data_out
        try:
            self.write(pin, 1)
            result = self.read(pin)
        finally:
            self.write8(saved)
        return result

    def set_button_mask(self, mask: int) -> None:
        self._button_mask = _check_byte(mask)

    def toggle(self, pin: int) -> None:
        _check_pin(pin)
        self.toggle_mask(1 << pin)

    def toggle_mask(self, mask: int) -> None:
        """Invert the pins in ``mask``; ``0xFF`` inverts all."""
        self.write8(self._data_out ^ _check_byte(mask))

    def shift_right(self, n: int = 1) -> None:
        """Shift the output right by ``n`` (1..7); other values do nothing."""
        if n == 0 or n > 7:
            return
        self.write8(self._data_out >> n)

    def shift_left(self, n: int = 1) -> None:
        """Shift the output left by ``n`` (1..7); other values do nothing."""
        if n == 0 or n > 7:
            return
        self.write8((self._data_out << n) & 0xFF)

    def rotate_right(self, n: int = 1) -> None:
        r = n & 7
        out = self._data_out
        self.write8(((out >> r) | (out << (8 - r))) & 0xFF)

    def rotate_left(self, n: int = 1) -> None:
        self.rotate_right(8 - (n & 7))
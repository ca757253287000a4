"""An abstract I2C bus that the device drivers talk through."""

from __future__ import annotations

import abc
from typing import Iterable

__all__ = ["I2CError", "I2CBus"]


class I2CError(Exception):
    """A transfer on the I2C bus failed.

    ``code`` carries a device or bus specific error number when one is known.
    """

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class I2CBus(abc.ABC):
    """Minimal interface of an I2C master.

    :meth:`write` sends bytes to a device and raises :class:`I2CError` when
    the device does not acknowledge. :meth:`read` requests ``count`` bytes and
    returns what the device sent, which may be fewer.
    """

    @abc.abstractmethod
    def write(self, address: int, data: bytes | Iterable[int]) -> None:
        """Send ``data`` to the device at ``address``."""

    @abc.abstractmethod
    def read(self, address: int, count: int) -> bytes:
        """Request ``count`` bytes from the device at ``address``."""

    def write_read(
        self, address: int, data: bytes | Iterable[int], count: int
    ) -> bytes:
        """Send ``data``, then read ``count`` bytes back."""
        self.write(address, data)
        return self.read(address, count)
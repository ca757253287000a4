"""Running average over the last N values in a circular buffer."""

from __future__ import annotations

import math

__all__ = ["RunningAverage"]


class RunningAverage:
    """Keeps the last ``size`` values and reports statistics over them."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._values = [0.0] * size
        self.clear()

    def clear(self) -> None:
        """Forget every value added so far."""
        self._count = 0
        self._index = 0
        self._sum = 0.0
        self._min = math.nan
        self._max = math.nan
        self._values = [0.0] * self._size

    def add(self, value: float) -> None:
        """Add ``value``, overwriting the oldest one when the buffer is full."""
        self._sum -= self._values[self._index]
        self._values[self._index] = value
        self._sum += value
        self._index = (self._index + 1) % self._size

        if self._count == 0:
            self._min = self._max = value
        elif value < self._min:
            self._min = value
        elif value > self._max:
            self._max = value

        if self._count < self._size:
            self._count += 1

    def fill(self, value: float, number: int) -> None:
        """Clear, then add ``value`` ``number`` times."""
        self.clear()
        for _ in range(number):
            self.add(value)

    def _buffer(self) -> list[float]:
        return self._values[: self._count]

    def average(self) -> float:
        """Average recomputed from the buffer; NaN when empty."""
        if self._count == 0:
            return math.nan
        return sum(self._buffer()) / self._count

    def fast_average(self) -> float:
        """Average from the running sum; NaN when empty."""
        if self._count == 0:
            return math.nan
        return self._sum / self._count

    def standard_deviation(self) -> float:
        """Sample standard deviation; NaN with fewer than two values."""
        if self._count < 2:
            return math.nan
        avg = self.fast_average()
        total = sum((x - avg) ** 2 for x in self._buffer())
        return math.sqrt(total / (self._count - 1))

    def standard_error(self) -> float:
        """Standard error of the mean; NaN with fewer than two values."""
        sd = self.standard_deviation()
        if math.isnan(sd):
            return math.nan
        n = self._count if self._count >= 30 else self._count - 1
        return sd / math.sqrt(n)

    def minimum(self) -> float:
        """Smallest value added since the last clear."""
        return self._min

    def maximum(self) -> float:
        """Largest value added since the last clear."""
        return self._max

    def min_in_buffer(self) -> float:
        if self._count == 0:
            return math.nan
        return min(self._buffer())

    def max_in_buffer(self) -> float:
        if self._count == 0:
            return math.nan
        return max(self._buffer())

    def is_full(self) -> bool:
        return self._count == self._size

    def element(self, index: int) -> float:
        """Raw buffer slot ``index``; NaN if it holds no value yet."""
        if not 0 <= index < self._count:
            return math.nan
        return self._values[index]

    def size(self) -> int:
        return self._size

    def count(self) -> int:
        return self._count
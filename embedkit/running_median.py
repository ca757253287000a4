"""Running median over the last N values."""

from __future__ import annotations

import math

__all__ = ["RunningMedian", "MEDIAN_MIN_SIZE", "MEDIAN_MAX_SIZE"]

MEDIAN_MIN_SIZE = 1
MEDIAN_MAX_SIZE = 19


class RunningMedian:
    """Keeps the last ``size`` values and reports order statistics.

    The size is clamped to ``MEDIAN_MIN_SIZE..MEDIAN_MAX_SIZE``.
    """

    def __init__(self, size: int) -> None:
        self._size = max(MEDIAN_MIN_SIZE, min(size, MEDIAN_MAX_SIZE))
        self._values = [0.0] * self._size
        self.clear()

    def clear(self) -> None:
        self._count = 0
        self._index = 0
        self._sorted: list[float] | None = None

    def add(self, value: float) -> None:
        """Add ``value``, overwriting the oldest one when the buffer is full."""
        self._values[self._index] = value
        self._index = (self._index + 1) % self._size
        if self._count < self._size:
            self._count += 1
        self._sorted = None

    def _ordered(self) -> list[float]:
        if self._sorted is None:
            self._sorted = sorted(self._values[: self._count])
        return self._sorted

    def median(self) -> float:
        """Middle value, or the mean of the two middle values; NaN when empty."""
        if self._count == 0:
            return math.nan
        s = self._ordered()
        half = self._count // 2
        if self._count & 1:
            return s[half]
        return (s[half] + s[half - 1]) / 2

    def average(self, n_medians: int | None = None) -> float:
        """Mean of all values, or of the ``n_medians`` middle values."""
        if self._count == 0:
            return math.nan
        if n_medians is None:
            return sum(self._values[: self._count]) / self._count
        if n_medians <= 0:
            return math.nan
        n = min(n_medians, self._count)
        start = (self._count - n) // 2
        return sum(self._ordered()[start : start + n]) / n

    def highest(self) -> float:
        return self.sorted_element(self._count - 1)

    def lowest(self) -> float:
        return self.sorted_element(0)

    def element(self, n: int) -> float:
        """The ``n``-th value in insertion order, oldest first; NaN if absent."""
        if self._count == 0 or not 0 <= n < self._count:
            return math.nan
        pos = self._index + n
        if pos >= self._count:
            pos -= self._count
        return self._values[pos]

    def sorted_element(self, n: int) -> float:
        """The ``n``-th value in ascending order; NaN if absent."""
        if self._count == 0 or not 0 <= n < self._count:
            return math.nan
        return self._ordered()[n]

    def predict(self, n: int) -> float:
        """Largest change of the median that ``n`` more values could cause."""
        if self._count == 0 or not 0 <= n < self._count // 2:
            return math.nan
        med = self.median()
        s = self._ordered()
        half = self._count // 2
        if self._count & 1:
            return max(med - s[half - n], s[half + n] - med)
        f1 = (s[half - n] + s[half - n - 1]) / 2
        f2 = (s[half + n] + s[half + n - 1]) / 2
        return max(med - f1, f2 - med) / 2

    def size(self) -> int:
        return self._size

    def count(self) -> int:
        return self._count
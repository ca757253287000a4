"""Periodic waveform generators: sawtooth, triangle, square, sine and stair."""

from __future__ import annotations

import math

__all__ = ["FunctionGenerator", "fgsaw", "fgtri", "fgsqr", "fgsin", "fgstr"]


def _check_period(period: float) -> None:
    if period == 0:
        raise ValueError("period must not be zero")


def _check_steps(steps: int) -> None:
    if steps < 2:
        raise ValueError("steps must be at least 2")


def fgsaw(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
) -> float:
    """Sawtooth rising from -amplitude to +amplitude over one period."""
    _check_period(period)
    t += phase
    if t >= 0:
        t = math.fmod(t, period)
        return y_shift + amplitude * (-1.0 + 2 * t / period)
    t = math.fmod(-t, period)
    return y_shift + amplitude * (1.0 - 2 * t / period)


def fgtri(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
    duty_cycle: float = 0.5,
) -> float:
    """Triangle wave whose peak lies at ``duty_cycle`` of the period."""
    _check_period(period)
    t = math.fmod(abs(t + phase), period)
    if t < duty_cycle * period:
        return y_shift + amplitude * (-1.0 + 2 * t / (duty_cycle * period))
    return y_shift + amplitude * (-1.0 + 2 / (1 - duty_cycle) * (1 - t / period))


def fgsqr(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
    duty_cycle: float = 0.5,
) -> float:
    """Square wave that is high for ``duty_cycle`` of the period."""
    _check_period(period)
    t += phase
    if t >= 0:
        t = math.fmod(t, period)
        if t < duty_cycle * period:
            return y_shift + amplitude
        return y_shift - amplitude
    t = math.fmod(-t, period)
    if t < duty_cycle * period:
        return y_shift - amplitude
    return y_shift + amplitude


def fgsin(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
) -> float:
    """Sine wave."""
    _check_period(period)
    t += phase
    return y_shift + amplitude * math.sin(math.tau * t / period)


def fgstr(
    t: float,
    period: float = 1.0,
    amplitude: float = 1.0,
    phase: float = 0.0,
    y_shift: float = 0.0,
    steps: int = 8,
) -> float:
    """Staircase with ``steps`` levels between -amplitude and +amplitude."""
    _check_period(period)
    _check_steps(steps)
    t += phase
    if t >= 0:
        t = math.fmod(t, period)
        level = int(steps * t / period)
        return y_shift + amplitude * (-1.0 + 2.0 * level / (steps - 1))
    t = math.fmod(-t, period)
    level = int(steps * t / period)
    return y_shift + amplitude * (1.0 - 2.0 * level / (steps - 1))


class FunctionGenerator:
    """A waveform generator holding a fixed period, amplitude, phase and offset."""

    def __init__(
        self,
        period: float = 1.0,
        amplitude: float = 1.0,
        phase: float = 0.0,
        y_shift: float = 0.0,
    ) -> None:
        self.configure(period, amplitude, phase, y_shift)

    def configure(
        self,
        period: float = 1.0,
        amplitude: float = 1.0,
        phase: float = 0.0,
        y_shift: float = 0.0,
    ) -> None:
        """Set all waveform parameters at once."""
        _check_period(period)
        self.period = period
        self.amplitude = amplitude
        self.phase = phase
        self.y_shift = y_shift

    def _params(self) -> tuple[float, float, float, float]:
        return self.period, self.amplitude, self.phase, self.y_shift

    def sawtooth(self, t: float) -> float:
        return fgsaw(t, *self._params())

    def triangle(self, t: float) -> float:
        return fgtri(t, *self._params())

    def square(self, t: float) -> float:
        return fgsqr(t, *self._params())

    def sinus(self, t: float) -> float:
        return fgsin(t, *self._params())

    def stair(self, t: float, steps: int = 8) -> float:
        return fgstr(t, *self._params(), steps=steps)
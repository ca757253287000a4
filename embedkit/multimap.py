"""Piecewise linear interpolation over a table of points."""

from __future__ import annotations

from typing import Sequence, TypeVar

__all__ = ["multi_map"]

Number = TypeVar("Number", int, float)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def multi_map(
    value: Number, inputs: Sequence[Number], outputs: Sequence[Number]
) -> Number:
    """Map ``value`` through the table ``inputs`` -> ``outputs``.

    ``inputs`` must be increasing. Values outside the table clamp to the first
    or last output. When every number involved is an integer the
    interpolation uses integer division truncating toward zero.
    """
    inputs = list(inputs)
    outputs = list(outputs)
    if not inputs:
        raise ValueError("the table must not be empty")
    if len(inputs) != len(outputs):
        raise ValueError("inputs and outputs must have the same length")

    if value <= inputs[0]:
        return outputs[0]
    if value >= inputs[-1]:
        return outputs[-1]

    pos = next(i for i, x in enumerate(inputs) if value <= x)
    if value == inputs[pos]:
        return outputs[pos]

    lo_in, hi_in = inputs[pos - 1], inputs[pos]
    lo_out, hi_out = outputs[pos - 1], outputs[pos]
    numerator = (value - lo_in) * (hi_out - lo_out)
    denominator = hi_in - lo_in
    if all(isinstance(x, int) for x in (value, lo_in, hi_in, lo_out, hi_out)):
        return _trunc_div(numerator, denominator) + lo_out
    return numerator / denominator + lo_out
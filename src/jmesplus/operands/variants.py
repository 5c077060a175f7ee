"""Operand kinds and their pairwise arithmetic rules.

``Number`` is a float.  ``Duration`` is a whole number of nanoseconds
written as duration text (``"1h30m0s"``) in results.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

from jmesplus.core.durations import format_duration
from jmesplus.operands.base import Operand, rule
from jmesplus.validator.errors import (
    NonIntegerModuloError,
    UndefinedQuotientError,
    ZeroDivisorError,
)


@dataclass(frozen=True)
class Number(Operand):
    value: float

    label = "number"

    def to_value(self) -> float:
        return self.value


@dataclass(frozen=True)
class Duration(Operand):
    nanoseconds: int

    label = "duration"

    def to_value(self) -> str:
        return format_duration(self.nanoseconds)


def _exact(value: float) -> Fraction:
    # The shortest repr, so 0.1 scales and divides as the decimal it was written as.
    return Fraction(repr(value))


def _truncated_remainder(dividend: int, divisor: int) -> int:
    # Sign follows the dividend, unlike Python's floor-based ``%``.
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


# ---------------------------------------------------------------------------
# Number, Number
# ---------------------------------------------------------------------------


@rule("add", Number, Number)
def _add_numbers(left: Number, right: Number) -> Number:
    return Number(left.value + right.value)


@rule("subtract", Number, Number)
def _subtract_numbers(left: Number, right: Number) -> Number:
    return Number(left.value - right.value)


@rule("multiply", Number, Number)
def _multiply_numbers(left: Number, right: Number) -> Number:
    return Number(left.value * right.value)


@rule("divide", Number, Number)
def _divide_numbers(left: Number, right: Number) -> Number:
    if right.value == 0:
        raise ZeroDivisorError("divide")
    return Number(left.value / right.value)


@rule("modulo", Number, Number)
def _modulo_numbers(left: Number, right: Number) -> Number:
    if not (left.value.is_integer() and right.value.is_integer()):
        raise NonIntegerModuloError("modulo")
    if right.value == 0:
        raise ZeroDivisorError("modulo")
    return Number(math.fmod(left.value, right.value))


# ---------------------------------------------------------------------------
# Duration, Duration
# ---------------------------------------------------------------------------


@rule("add", Duration, Duration)
def _add_durations(left: Duration, right: Duration) -> Duration:
    return Duration(left.nanoseconds + right.nanoseconds)


@rule("subtract", Duration, Duration)
def _subtract_durations(left: Duration, right: Duration) -> Duration:
    return Duration(left.nanoseconds - right.nanoseconds)


@rule("divide", Duration, Duration)
def _divide_durations(left: Duration, right: Duration) -> Number:
    if right.nanoseconds == 0:
        raise ZeroDivisorError("divide")
    return Number(left.nanoseconds / right.nanoseconds)


@rule("modulo", Duration, Duration)
def _modulo_durations(left: Duration, right: Duration) -> Duration:
    if right.nanoseconds == 0:
        raise ZeroDivisorError("modulo")
    return Duration(_truncated_remainder(left.nanoseconds, right.nanoseconds))


# ---------------------------------------------------------------------------
# Duration scaled by Number
# ---------------------------------------------------------------------------


@rule("multiply", Duration, Number)
def _scale_duration(left: Duration, right: Number) -> Duration:
    return Duration(int(left.nanoseconds * _exact(right.value)))


@rule("multiply", Number, Duration)
def _scale_duration_reversed(left: Number, right: Duration) -> Duration:
    return _scale_duration(right, left)


@rule("divide", Duration, Number)
def _divide_duration(left: Duration, right: Number) -> Duration:
    if right.value == 0:
        raise ZeroDivisorError("divide")
    quotient = Fraction(left.nanoseconds) / _exact(right.value)
    if quotient.denominator != 1:
        raise UndefinedQuotientError("divide")
    return Duration(int(quotient))

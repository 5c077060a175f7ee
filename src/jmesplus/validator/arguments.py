"""Argument checks shared by every extension function.

Handlers receive the evaluator's already-resolved argument list and pull
each value out through one of these helpers, which either return the
value unchanged or raise ``InvalidArgumentTypeError``.  Positions are
0-based on the way in and reported 1-based in errors.
"""
from __future__ import annotations

import math
import sys
from decimal import Decimal
from typing import Any, Final

from jmesplus.validator.errors import InvalidArgumentTypeError, NonFiniteArgumentError
from jmesplus.validator.kinds import ValueKind, is_number

STRING_OR_NUMBER: Final[str] = "string or number"


def validate_arg(
    function_name: str,
    arguments: list[Any],
    index: int,
    expected: ValueKind,
) -> Any:
    """Return ``arguments[index]`` if it is of kind ``expected``.

    Parameters
    ----------
    function_name:
        Name reported in the error message.
    arguments:
        The resolved argument list.
    index:
        0-based position to check.
    expected:
        The single kind accepted at ``index``.

    Raises
    ------
    InvalidArgumentTypeError
        If the value is of another kind.  The error carries ``index + 1``.
    """
    value = arguments[index]
    if not expected.matches(value):
        raise InvalidArgumentTypeError(function_name, index + 1, expected.label)
    return value


def to_integer(function_name: str, arguments: list[Any], index: int) -> int:
    """Return a number argument truncated toward zero.

    The result is clamped to the platform's index range so it can be used
    as a count or length directly.

    Raises
    ------
    InvalidArgumentTypeError
        If the value is not a number.
    NonFiniteArgumentError
        If the value is infinite or NaN.
    """
    value = validate_arg(function_name, arguments, index, ValueKind.NUMBER)
    if isinstance(value, float) and not math.isfinite(value):
        raise NonFiniteArgumentError(function_name, index + 1)
    return max(-sys.maxsize, min(int(value), sys.maxsize))


def to_string(function_name: str, arguments: list[Any], index: int) -> str:
    """Return a string-or-number argument as text.

    Strings pass through; numbers go through ``format_number``.
    """
    value = arguments[index]
    if isinstance(value, str):
        return value
    if is_number(value):
        return format_number(value)
    raise InvalidArgumentTypeError(function_name, index + 1, STRING_OR_NUMBER)


def format_number(value: int | float) -> str:
    """Render a number as plain decimal text.

    The output never uses exponent notation or grouping separators and
    carries the shortest digits that round-trip, so ``3.0`` becomes
    ``"3"`` and ``1e21`` becomes ``"1000000000000000000000"``.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text

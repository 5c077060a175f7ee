"""Classification of raw arguments into operands."""
from __future__ import annotations

import math
from typing import Any, Final

from jmesplus.core.durations import parse_duration
from jmesplus.operands.base import Operand
from jmesplus.operands.variants import Duration, Number
from jmesplus.validator.errors import InvalidArgumentTypeError, NonFiniteArgumentError
from jmesplus.validator.kinds import is_number

OPERAND_KINDS: Final[str] = "number or duration"


def parse_operands(function_name: str, arguments: list[Any]) -> tuple[Operand, Operand]:
    """Return the first two arguments as operands.

    Raises
    ------
    InvalidArgumentTypeError
        If an argument is neither a number nor duration text.
    NonFiniteArgumentError
        If a number is infinite, NaN, or beyond float range.
    """
    return to_operand(function_name, arguments, 0), to_operand(function_name, arguments, 1)


def to_operand(function_name: str, arguments: list[Any], index: int) -> Operand:
    value = arguments[index]
    if is_number(value):
        try:
            number = float(value)
        except OverflowError:
            raise NonFiniteArgumentError(function_name, index + 1) from None
        if not math.isfinite(number):
            raise NonFiniteArgumentError(function_name, index + 1)
        return Number(number)
    if isinstance(value, str):
        try:
            return Duration(parse_duration(value))
        except ValueError:
            raise InvalidArgumentTypeError(function_name, index + 1, OPERAND_KINDS) from None
    raise InvalidArgumentTypeError(function_name, index + 1, OPERAND_KINDS)

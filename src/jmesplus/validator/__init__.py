"""Argument validation for extension functions.

Exports the ``ValueKind`` enum, the ``validate_arg`` / ``to_string``
helpers, and the error taxonomy every handler raises from.
"""
from __future__ import annotations

from jmesplus.validator.arguments import format_number, to_integer, to_string, validate_arg
from jmesplus.validator.errors import (
    FunctionError,
    InvalidArgumentTypeError,
    NonFiniteArgumentError,
    NonIntegerModuloError,
    UndefinedQuotientError,
    ZeroDivisorError,
)
from jmesplus.validator.kinds import ValueKind, is_number

__all__ = [
    "ValueKind",
    "is_number",
    "validate_arg",
    "to_string",
    "to_integer",
    "format_number",
    "FunctionError",
    "InvalidArgumentTypeError",
    "ZeroDivisorError",
    "UndefinedQuotientError",
    "NonIntegerModuloError",
    "NonFiniteArgumentError",
]

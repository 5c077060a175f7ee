"""Error types raised by extension function handlers.

Every error renders as a single line of the form::

    JMESPath function '<name>': <detail>

Callers that inspect error text rely on this shape, so the detail strings
below are fixed.  All classes derive from
``jmespath.exceptions.JMESPathError`` so that code already catching the
evaluator's own errors also catches ours.
"""
from __future__ import annotations

from typing import Final

from jmespath.exceptions import JMESPathError

ERROR_PREFIX: Final[str] = "JMESPath function '{name}': "

INVALID_ARGUMENT_TYPE: Final[str] = "{position} argument is expected of {expected} type"
ZERO_DIVISOR: Final[str] = "Zero divisor passed"
UNDEFINED_QUOTIENT: Final[str] = "Undefined quotient"
NON_INTEGER_MODULO: Final[str] = "Non-integer argument(s) passed for modulo"
NON_FINITE_ARGUMENT: Final[str] = "{position} argument must be a finite number"


class FunctionError(JMESPathError):
    """Generic failure inside an extension function.

    Parameters
    ----------
    function_name:
        The JMESPath-visible name of the failing function.
    detail:
        Free-text description appended after the prefix.
    """

    def __init__(self, function_name: str, detail: str) -> None:
        self.function_name = function_name
        self.detail = detail
        super().__init__(ERROR_PREFIX.format(name=function_name) + detail)


class InvalidArgumentTypeError(FunctionError):
    """An argument's runtime kind is not one the function accepts.

    Parameters
    ----------
    function_name:
        The JMESPath-visible name of the function.
    position:
        1-based position of the offending argument.
    expected:
        Human-readable name of the accepted kind(s), e.g. ``"string"``.
    """

    def __init__(self, function_name: str, position: int, expected: str) -> None:
        self.position = position
        self.expected = expected
        super().__init__(
            function_name,
            INVALID_ARGUMENT_TYPE.format(position=position, expected=expected),
        )


class ZeroDivisorError(FunctionError):
    """The right-hand operand of a division or modulo is zero."""

    def __init__(self, function_name: str) -> None:
        super().__init__(function_name, ZERO_DIVISOR)


class UndefinedQuotientError(FunctionError):
    """A quotient cannot be represented exactly in the result kind."""

    def __init__(self, function_name: str) -> None:
        super().__init__(function_name, UNDEFINED_QUOTIENT)


class NonIntegerModuloError(FunctionError):
    """At least one modulo operand has a fractional part."""

    def __init__(self, function_name: str) -> None:
        super().__init__(function_name, NON_INTEGER_MODULO)


class NonFiniteArgumentError(FunctionError):
    """A numeric argument is infinite, NaN, or too large for a float."""

    def __init__(self, function_name: str, position: int) -> None:
        self.position = position
        super().__init__(function_name, NON_FINITE_ARGUMENT.format(position=position))

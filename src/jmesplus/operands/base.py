"""Operand base class and the pairwise rule table.

Arithmetic is looked up by ``(operation, type(left), type(right))``.  A
new operand kind is added by defining its class and registering the pairs
it supports with ``@rule``; handlers keep calling ``left.add(right)``.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Final, TypeVar

from jmesplus.validator.errors import InvalidArgumentTypeError

logger = logging.getLogger(__name__)

OPERATIONS: Final[tuple[str, ...]] = ("add", "subtract", "multiply", "divide", "modulo")

Rule = Callable[[Any, Any], "Operand"]
R = TypeVar("R", bound=Rule)

_RULES: dict[tuple[str, type[Operand], type[Operand]], Rule] = {}


def rule(operation: str, left: type[Operand], right: type[Operand]) -> Callable[[R], R]:
    """Return a decorator registering an implementation for one operand pair.

    Raises
    ------
    ValueError
        If ``operation`` is unknown or the pair already has a rule.
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown arithmetic operation {operation!r}")

    def decorator(fn: R) -> R:
        key = (operation, left, right)
        if key in _RULES:
            raise ValueError(
                f"A rule for {operation}({left.__name__}, {right.__name__}) is already registered"
            )
        _RULES[key] = fn
        logger.debug("Registered %s rule for %s, %s", operation, left.__name__, right.__name__)
        return fn

    return decorator


def partners(operation: str, left: type[Operand]) -> list[type[Operand]]:
    """Return the right-hand operand types ``left`` supports for ``operation``."""
    return [right for (op, lhs, right) in _RULES if op == operation and lhs is left]


class Operand(ABC):
    """A typed arithmetic argument.

    Every operation returns the result already converted back to the
    evaluator's value model (see ``to_value``).
    """

    label: str = "operand"

    @abstractmethod
    def to_value(self) -> Any:
        """Return this operand as a JSON-compatible value."""

    def add(self, other: Operand) -> Any:
        return self._apply("add", other)

    def subtract(self, other: Operand) -> Any:
        return self._apply("subtract", other)

    def multiply(self, other: Operand) -> Any:
        return self._apply("multiply", other)

    def divide(self, other: Operand) -> Any:
        return self._apply("divide", other)

    def modulo(self, other: Operand) -> Any:
        return self._apply("modulo", other)

    def _apply(self, operation: str, other: Operand) -> Any:
        try:
            implementation = _RULES[(operation, type(self), type(other))]
        except KeyError:
            expected = " or ".join(kind.label for kind in partners(operation, type(self)))
            raise InvalidArgumentTypeError(operation, 2, expected or self.label) from None
        return implementation(self, other).to_value()

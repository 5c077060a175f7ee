"""Runtime value kinds produced by the JMESPath evaluator.

The evaluator hands functions plain Python values decoded from JSON.  A
``ValueKind`` is the coarse classification used to declare and check what
each argument position accepts.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Closed set of argument kinds.

    ``ANY`` disables checking for a position; the arithmetic functions use
    it because their operands are classified later by the operand module.
    """

    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    ARRAY_STRING = "array[string]"
    ANY = "any"

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.value

    def matches(self, value: Any) -> bool:
        """Return True if ``value`` belongs to this kind."""
        if self is ValueKind.ANY:
            return True
        if self is ValueKind.OBJECT:
            return isinstance(value, dict)
        if self is ValueKind.STRING:
            return isinstance(value, str)
        if self is ValueKind.NUMBER:
            return is_number(value)
        return isinstance(value, list) and all(isinstance(item, str) for item in value)


def is_number(value: Any) -> bool:
    """Return True for JSON numbers.

    ``bool`` is an ``int`` subclass in Python but a distinct JSON kind, so
    it is excluded explicitly.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)
"""Declarations of extension functions.

A ``FunctionSpec`` pairs a JMESPath-visible name with the kinds accepted
at each argument position and the handler that computes the result.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from jmesplus.validator.errors import InvalidArgumentTypeError
from jmesplus.validator.kinds import ValueKind

Handler = Callable[[list[Any]], Any]


@dataclass(frozen=True)
class ArgumentSpec:
    """The kinds one argument position accepts.

    Parameters
    ----------
    kinds:
        One or more ``ValueKind`` members.  Must not be empty.
    """

    kinds: tuple[ValueKind, ...]

    def __post_init__(self) -> None:
        if not self.kinds:
            raise ValueError("ArgumentSpec requires at least one accepted kind")

    @classmethod
    def of(cls, *kinds: ValueKind) -> ArgumentSpec:
        """Build a spec from positional kinds, e.g. ``ArgumentSpec.of(STRING, NUMBER)``."""
        return cls(tuple(kinds))

    @property
    def label(self) -> str:
        """Human-readable description, e.g. ``"string or number"``."""
        return " or ".join(kind.label for kind in self.kinds)

    def accepts(self, value: Any) -> bool:
        """Return True if ``value`` matches any accepted kind."""
        return any(kind.matches(value) for kind in self.kinds)


@dataclass(frozen=True)
class FunctionSpec:
    """A single extension function.

    Parameters
    ----------
    name:
        The name expressions call the function by.
    arguments:
        One ``ArgumentSpec`` per position; its length is the arity.
    handler:
        Callable receiving the resolved argument list.
    doc:
        One-line description shown by ``jmesplus functions``.
    """

    name: str
    arguments: tuple[ArgumentSpec, ...]
    handler: Handler = field(compare=False)
    doc: str = field(default="", compare=False)

    @property
    def arity(self) -> int:
        return len(self.arguments)

    def check_arguments(self, arguments: list[Any]) -> None:
        """Raise ``InvalidArgumentTypeError`` for the first mismatched position.

        The arity is assumed to have been checked by the caller.
        """
        for index, (spec, value) in enumerate(zip(self.arguments, arguments)):
            if not spec.accepts(value):
                raise InvalidArgumentTypeError(self.name, index + 1, spec.label)

    def __call__(self, arguments: list[Any]) -> Any:
        return self.handler(arguments)

"""String functions.

compare, equal_fold, replace, replace_all, to_upper, to_lower, trim,
split and truncate.  Each handler takes the resolved argument list and
returns a plain ``str``, ``int``, ``bool`` or ``list[str]``.
"""
from __future__ import annotations

from typing import Any

from jmesplus.registry.spec import ArgumentSpec, FunctionSpec
from jmesplus.validator.arguments import to_integer, validate_arg
from jmesplus.validator.kinds import ValueKind

_STRING = ArgumentSpec.of(ValueKind.STRING)
_NUMBER = ArgumentSpec.of(ValueKind.NUMBER)


def compare(arguments: list[Any]) -> int:
    a = validate_arg("compare", arguments, 0, ValueKind.STRING)
    b = validate_arg("compare", arguments, 1, ValueKind.STRING)
    return (a > b) - (a < b)


def _simple_fold(char: str) -> str:
    # One-to-one folding only; "ß" does not expand to "ss".
    for folded in (char.casefold(), char.lower()):
        if len(folded) == 1:
            return folded
    return char


def equal_fold(arguments: list[Any]) -> bool:
    """Case-insensitive equality under simple (character-for-character) folding."""
    a = validate_arg("equal_fold", arguments, 0, ValueKind.STRING)
    b = validate_arg("equal_fold", arguments, 1, ValueKind.STRING)
    return len(a) == len(b) and all(_simple_fold(x) == _simple_fold(y) for x, y in zip(a, b))


def replace(arguments: list[Any]) -> str:
    """Replace the first ``count`` occurrences; a negative count replaces all."""
    text = validate_arg("replace", arguments, 0, ValueKind.STRING)
    old = validate_arg("replace", arguments, 1, ValueKind.STRING)
    new = validate_arg("replace", arguments, 2, ValueKind.STRING)
    count = to_integer("replace", arguments, 3)
    return text.replace(old, new, count)


def replace_all(arguments: list[Any]) -> str:
    text = validate_arg("replace_all", arguments, 0, ValueKind.STRING)
    old = validate_arg("replace_all", arguments, 1, ValueKind.STRING)
    new = validate_arg("replace_all", arguments, 2, ValueKind.STRING)
    return text.replace(old, new)


def to_upper(arguments: list[Any]) -> str:
    return validate_arg("to_upper", arguments, 0, ValueKind.STRING).upper()


def to_lower(arguments: list[Any]) -> str:
    return validate_arg("to_lower", arguments, 0, ValueKind.STRING).lower()


def trim(arguments: list[Any]) -> str:
    """Strip every character of the cutset from both ends."""
    text = validate_arg("trim", arguments, 0, ValueKind.STRING)
    cutset = validate_arg("trim", arguments, 1, ValueKind.STRING)
    if not cutset:
        return text
    return text.strip(cutset)


def split(arguments: list[Any]) -> list[str]:
    """Split around each separator; an empty separator yields characters."""
    text = validate_arg("split", arguments, 0, ValueKind.STRING)
    separator = validate_arg("split", arguments, 1, ValueKind.STRING)
    if not separator:
        return list(text)
    return text.split(separator)


def truncate(arguments: list[Any]) -> str:
    """Keep at most ``length`` leading characters; negative lengths mean 0."""
    text = validate_arg("truncate", arguments, 0, ValueKind.STRING)
    length = to_integer("truncate", arguments, 1)
    return text[: max(length, 0)]


FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec("compare", (_STRING, _STRING), compare, "Lexical comparison: -1, 0 or 1"),
    FunctionSpec("equal_fold", (_STRING, _STRING), equal_fold, "Case-insensitive equality"),
    FunctionSpec(
        "replace",
        (_STRING, _STRING, _STRING, _NUMBER),
        replace,
        "Replace up to N occurrences (negative N: all)",
    ),
    FunctionSpec("replace_all", (_STRING, _STRING, _STRING), replace_all, "Replace every occurrence"),
    FunctionSpec("to_upper", (_STRING,), to_upper, "Upper-case a string"),
    FunctionSpec("to_lower", (_STRING,), to_lower, "Lower-case a string"),
    FunctionSpec("trim", (_STRING, _STRING), trim, "Strip cutset characters from both ends"),
    FunctionSpec("split", (_STRING, _STRING), split, "Split a string into an array"),
    FunctionSpec("truncate", (_STRING, _NUMBER), truncate, "Keep at most N leading characters"),
)

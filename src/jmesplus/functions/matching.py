"""Glob and label matching.

``pattern_match`` is a wildcard match, not a regular expression: ``*``
matches any run of characters (including none) and ``?`` exactly one;
every other character, brackets included, matches itself.
"""
from __future__ import annotations

import functools
import re
from typing import Any

from jmesplus.registry.spec import ArgumentSpec, FunctionSpec
from jmesplus.validator.arguments import to_string, validate_arg
from jmesplus.validator.kinds import ValueKind

_STRING = ArgumentSpec.of(ValueKind.STRING)
_STRING_OR_NUMBER = ArgumentSpec.of(ValueKind.STRING, ValueKind.NUMBER)
_OBJECT = ArgumentSpec.of(ValueKind.OBJECT)


@functools.lru_cache(maxsize=256)
def _wildcard(pattern: str) -> re.Pattern[str]:
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.DOTALL)


def pattern_match(arguments: list[Any]) -> bool:
    pattern = validate_arg("pattern_match", arguments, 0, ValueKind.STRING)
    text = to_string("pattern_match", arguments, 1)
    if pattern == "*":
        return True
    return _wildcard(pattern).fullmatch(text) is not None


def label_match(arguments: list[Any]) -> bool:
    """Return True if every label in the first object appears with the same
    value in the second.  An empty label set matches anything.
    """
    labels = validate_arg("label_match", arguments, 0, ValueKind.OBJECT)
    target = validate_arg("label_match", arguments, 1, ValueKind.OBJECT)
    for key, value in labels.items():
        if key not in target or target[key] != value:
            return False
    return True


FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec(
        "pattern_match",
        (_STRING, _STRING_OR_NUMBER),
        pattern_match,
        "Wildcard match with * and ?",
    ),
    FunctionSpec(
        "label_match",
        (_OBJECT, _OBJECT),
        label_match,
        "True if all labels of the first object are present in the second",
    ),
)

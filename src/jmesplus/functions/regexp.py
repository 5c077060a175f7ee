"""Regular-expression functions.

The subject and replacement positions accept strings or numbers; numbers
are rendered with ``format_number`` first.  ``regex_replace_all`` expands
``$1``, ``${1}``, ``$name`` and ``${name}`` references in the replacement
(``$$`` is a literal dollar); ``regex_replace_all_literal`` inserts the
replacement unchanged.
"""
from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, Final

from jmesplus.registry.spec import ArgumentSpec, FunctionSpec
from jmesplus.validator.arguments import to_string, validate_arg
from jmesplus.validator.errors import FunctionError
from jmesplus.validator.kinds import ValueKind

_STRING = ArgumentSpec.of(ValueKind.STRING)
_STRING_OR_NUMBER = ArgumentSpec.of(ValueKind.STRING, ValueKind.NUMBER)

_REFERENCE: Final[re.Pattern[str]] = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\w+))", re.ASCII)


def _compile(function_name: str, pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise FunctionError(function_name, str(exc)) from exc


def _expand(template: str, match: re.Match[str]) -> str:
    """Substitute group references in ``template``; unknown groups are empty."""

    def reference(ref: re.Match[str]) -> str:
        if ref.group(1):
            return "$"
        name = ref.group(2) or ref.group(3)
        if name.isdigit():
            index = int(name)
            if index > match.re.groups:
                return ""
            return match.group(index) or ""
        if name not in match.re.groupindex:
            return ""
        return match.group(name) or ""

    return _REFERENCE.sub(reference, template)


def _replace_all(
    compiled: re.Pattern[str], source: str, replacement: Callable[[re.Match[str]], str]
) -> str:
    """Replace every match, skipping empty matches that abut the previous match.

    ``re.sub`` would also replace the empty match directly after ``"aaa"``
    in ``a*`` over ``"baaac"``.
    """
    parts: list[str] = []
    pos = 0
    previous_end = -1
    for match in compiled.finditer(source):
        if match.start() == match.end() == previous_end:
            continue
        parts.append(source[pos:match.start()])
        parts.append(replacement(match))
        pos = previous_end = match.end()
    parts.append(source[pos:])
    return "".join(parts)


def regex_replace_all(arguments: list[Any]) -> str:
    pattern = validate_arg("regex_replace_all", arguments, 0, ValueKind.STRING)
    source = to_string("regex_replace_all", arguments, 1)
    replacement = to_string("regex_replace_all", arguments, 2)
    compiled = _compile("regex_replace_all", pattern)
    return _replace_all(compiled, source, lambda match: _expand(replacement, match))


def regex_replace_all_literal(arguments: list[Any]) -> str:
    pattern = validate_arg("regex_replace_all_literal", arguments, 0, ValueKind.STRING)
    source = to_string("regex_replace_all_literal", arguments, 1)
    replacement = to_string("regex_replace_all_literal", arguments, 2)
    compiled = _compile("regex_replace_all_literal", pattern)
    return _replace_all(compiled, source, lambda match: replacement)


def regex_match(arguments: list[Any]) -> bool:
    """Return True if the pattern matches anywhere in the subject."""
    pattern = validate_arg("regex_match", arguments, 0, ValueKind.STRING)
    source = to_string("regex_match", arguments, 1)
    return _compile("regex_match", pattern).search(source) is not None


FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec(
        "regex_replace_all",
        (_STRING, _STRING_OR_NUMBER, _STRING_OR_NUMBER),
        regex_replace_all,
        "Replace regex matches, expanding $1 / ${name}",
    ),
    FunctionSpec(
        "regex_replace_all_literal",
        (_STRING, _STRING_OR_NUMBER, _STRING_OR_NUMBER),
        regex_replace_all_literal,
        "Replace regex matches with literal text",
    ),
    FunctionSpec(
        "regex_match",
        (_STRING, _STRING_OR_NUMBER),
        regex_match,
        "True if the regex matches anywhere in the subject",
    ),
)

"""Semantic-version range expressions.

A range is one or more alternatives separated by ``||``; each alternative
is a whitespace-separated list of comparators that must all hold::

    >=1.0.0 <2.0.0 || >=3.1.0

Comparators are ``=``/``==`` (also the default when no operator is given),
``!=``/``!``, ``>``, ``>=``, ``<`` and ``<=``.  A comparator version may
end in wildcards (``1.x``, ``1.2.*``), which widen it to the matching
interval before parsing.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from semver import Version

_OPERATORS: Final[dict[str, tuple[int, ...]]] = {
    "": (0,),
    "=": (0,),
    "==": (0,),
    "!=": (-1, 1),
    "!": (-1, 1),
    ">": (1,),
    ">=": (0, 1),
    "<": (-1,),
    "<=": (-1, 0),
}

_COMPARATOR: Final[re.Pattern[str]] = re.compile(r"(>=|<=|!=|==|>|<|=|!)?(.*)")
_WILDCARDS: Final[frozenset[str]] = frozenset({"x", "X", "*"})

Comparator = tuple[str, Version]


@dataclass(frozen=True)
class VersionRange:
    """A parsed range: an OR of AND-ed comparators.

    Use ``version in version_range`` to test a ``semver.Version``.
    """

    alternatives: tuple[tuple[Comparator, ...], ...]

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, Version):
            return False
        return any(
            all(version.compare(bound) in _OPERATORS[op] for op, bound in comparators)
            for comparators in self.alternatives
        )


def parse_range(text: str) -> VersionRange:
    """Parse a range expression.

    Raises
    ------
    ValueError
        If a comparator is malformed or names an invalid version.
    """
    expanded = " ".join(_expand_wildcard(token) for token in _tokens(text))
    alternatives: list[tuple[Comparator, ...]] = []
    for part in expanded.split("||"):
        tokens = part.split()
        if not tokens:
            raise ValueError(f"Could not get version from string: {text!r}")
        alternatives.append(tuple(_comparator(token) for token in tokens))
    return VersionRange(tuple(alternatives))


def _tokens(text: str) -> list[str]:
    """Split on whitespace and ``||``, gluing a bare operator to its version."""
    tokens: list[str] = []
    pending = ""
    for raw in re.split(r"\s+|(\|\|)", text):
        if not raw:
            continue
        if raw in _OPERATORS:
            pending += raw
            continue
        tokens.append(pending + raw)
        pending = ""
    if pending:
        tokens.append(pending)
    return tokens


def _comparator(token: str) -> Comparator:
    match = _COMPARATOR.fullmatch(token)
    op, version = match.group(1) or "", match.group(2)
    if not version:
        raise ValueError(f"Could not get version from string: {token!r}")
    return op, Version.parse(version)


def _expand_wildcard(token: str) -> str:
    """Rewrite a wildcard comparator as plain comparators."""
    if token == "||":
        return token
    match = _COMPARATOR.fullmatch(token)
    op, version = match.group(1) or "", match.group(2)
    parts = version.split(".")
    if not any(part in _WILDCARDS for part in parts):
        return token

    parts += ["x"] * (3 - len(parts))
    first = next(i for i, part in enumerate(parts) if part in _WILDCARDS)
    if len(parts) != 3 or any(part not in _WILDCARDS for part in parts[first:]):
        raise ValueError(f"Could not get version from string: {token!r}")
    if first == 0:
        if op in ("", "=", "==", ">=", "<="):
            return ">=0.0.0"
        raise ValueError(f"Could not get version from string: {token!r}")

    numbers = [int(part) for part in parts[:first]]
    lower = numbers + [0] * (3 - first)
    upper = numbers[:-1] + [numbers[-1] + 1] + [0] * (3 - first)
    low = ".".join(map(str, lower))
    high = ".".join(map(str, upper))

    if op in ("", "=", "=="):
        return f">={low} <{high}"
    if op == ">=":
        return f">={low}"
    if op == ">":
        return f">={high}"
    if op == "<":
        return f"<{low}"
    if op == "<=":
        return f"<{high}"
    return f"<{low} || >={high}"

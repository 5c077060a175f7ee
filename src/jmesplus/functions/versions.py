"""semver_compare: test a version against a range expression."""
from __future__ import annotations

import logging
from typing import Any

from semver import Version

from jmesplus.core.semver_range import parse_range
from jmesplus.registry.spec import ArgumentSpec, FunctionSpec
from jmesplus.validator.arguments import validate_arg
from jmesplus.validator.kinds import ValueKind

logger = logging.getLogger(__name__)

_STRING = ArgumentSpec.of(ValueKind.STRING)


def semver_compare(arguments: list[Any]) -> bool:
    """Return True if the version satisfies the range.

    A version that does not parse is compared as ``0.0.0``.  A malformed
    range raises ``ValueError``.
    """
    text = validate_arg("semver_compare", arguments, 0, ValueKind.STRING)
    expression = validate_arg("semver_compare", arguments, 1, ValueKind.STRING)

    try:
        version = Version.parse(text)
    except ValueError:
        # TODO: decide whether an unparseable version should fail the call
        # instead of matching as 0.0.0; callers currently rely on the latter.
        logger.debug("semver_compare: %r is not a valid version; comparing as 0.0.0", text)
        version = Version(0, 0, 0)
    return version in parse_range(expression)


FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec(
        "semver_compare",
        (_STRING, _STRING),
        semver_compare,
        "True if the version satisfies the range (e.g. '>=1.0.0 <2.0.0')",
    ),
)

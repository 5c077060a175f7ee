"""time_since: elapsed time between two timestamps.

Timestamps are parsed with a reference-time layout (RFC 3339 when the
layout is empty).  An empty end timestamp means "now"; the clock is read
at most once per call.
"""
from __future__ import annotations

import time
from typing import Any

from jmesplus.core.durations import format_duration
from jmesplus.core.layouts import RFC3339, parse_time
from jmesplus.registry.spec import ArgumentSpec, FunctionSpec
from jmesplus.validator.arguments import validate_arg
from jmesplus.validator.kinds import ValueKind

_STRING = ArgumentSpec.of(ValueKind.STRING)


def time_since(arguments: list[Any]) -> str:
    """Return ``end - start`` as duration text, e.g. ``"26h3m0s"``.

    Raises
    ------
    ValueError
        If either timestamp does not match the layout.
    """
    layout = validate_arg("time_since", arguments, 0, ValueKind.STRING) or RFC3339
    start = validate_arg("time_since", arguments, 1, ValueKind.STRING)
    end = validate_arg("time_since", arguments, 2, ValueKind.STRING)

    start_ns = parse_time(layout, start)
    end_ns = parse_time(layout, end) if end else time.time_ns()
    return format_duration(end_ns - start_ns)


FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec(
        "time_since",
        (_STRING, _STRING, _STRING),
        time_since,
        "Duration from the second timestamp to the third (default: now)",
    ),
)

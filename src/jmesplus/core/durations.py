"""Duration text in the ``1h30m0s`` notation.

Durations are held as integer nanoseconds.  The text form is a signed
sequence of decimal numbers, each with an optional fraction and a unit
suffix, e.g. ``"300ms"``, ``"-1.5h"`` or ``"2h45m"``.  Valid units are
``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``.
"""
from __future__ import annotations

import re
from typing import Final

NANOSECOND: Final[int] = 1
MICROSECOND: Final[int] = 1_000 * NANOSECOND
MILLISECOND: Final[int] = 1_000 * MICROSECOND
SECOND: Final[int] = 1_000 * MILLISECOND
MINUTE: Final[int] = 60 * SECOND
HOUR: Final[int] = 60 * MINUTE

_UNITS: Final[dict[str, int]] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT: Final[re.Pattern[str]] = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)")


def parse_duration(text: str) -> int:
    """Parse duration text into nanoseconds.

    Raises
    ------
    ValueError
        If ``text`` is not a valid duration.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return 0
    if not rest:
        raise ValueError(f"time: invalid duration {text!r}")

    total = 0
    pos = 0
    while pos < len(rest):
        match = _COMPONENT.match(rest, pos)
        whole, fraction, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not fraction:
            raise ValueError(f"time: invalid duration {text!r}")
        if not unit:
            raise ValueError(f"time: missing unit in duration {text!r}")
        if unit not in _UNITS:
            raise ValueError(f"time: unknown unit {unit!r} in duration {text!r}")
        scale = _UNITS[unit]
        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        pos = match.end()
    return -total if negative else total


def format_duration(nanoseconds: int) -> str:
    """Render nanoseconds as duration text.

    Durations under one second use the largest of ``ns``/``µs``/``ms`` that
    keeps the integer part non-zero; longer ones are written as
    ``<h>h<m>m<s>s`` with leading zero components dropped, so an hour is
    ``"1h0m0s"`` and zero is ``"0s"``.
    """
    if nanoseconds == 0:
        return "0s"
    sign = "-" if nanoseconds < 0 else ""
    magnitude = abs(nanoseconds)

    if magnitude < SECOND:
        if magnitude < MICROSECOND:
            return f"{sign}{magnitude}ns"
        if magnitude < MILLISECOND:
            return f"{sign}{_decimal(magnitude, MICROSECOND)}µs"
        return f"{sign}{_decimal(magnitude, MILLISECOND)}ms"

    text = f"{_decimal(magnitude % MINUTE, SECOND)}s"
    minutes = magnitude // MINUTE
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def _decimal(value: int, scale: int) -> str:
    """Write ``value / scale`` exactly, without trailing fractional zeros."""
    whole, remainder = divmod(value, scale)
    if not remainder:
        return str(whole)
    digits = len(str(scale)) - 1
    fraction = str(remainder).rjust(digits, "0").rstrip("0")
    return f"{whole}.{fraction}"

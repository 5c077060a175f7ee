"""Timestamp parsing with reference-time layouts.

A layout is an example rendering of the reference time
``Mon Jan 2 15:04:05 MST 2006`` (``01/02 03:04:05PM '06 -0700``).  Each
recognised element of that rendering marks where the corresponding field
appears in the input; everything else must match literally.  ``RFC3339``
is the layout used when a caller supplies none.

Parsed timestamps are returned as integer nanoseconds since the Unix
epoch so that differences keep full precision.
"""
from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Final

RFC3339: Final[str] = "2006-01-02T15:04:05Z07:00"

_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

_MONTHS: Final[tuple[str, ...]] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Longest elements first so that e.g. "January" wins over "Jan".
_ELEMENT: Final[re.Pattern[str]] = re.compile(
    r"January|Jan|Monday|Mon|MST"
    r"|2006|002|__2|_2(?!006)"
    r"|01|02|03|04|05|06|15"
    r"|Z07:00:00|Z070000|Z07:00|Z0700|Z07"
    r"|-07:00:00|-070000|-07:00|-0700|-07"
    r"|[.,](?:0+|9+)(?!\d)"
    r"|PM|pm|1|2|3|4|5"
)

# element -> (field, value pattern)
_FIELDS: Final[dict[str, tuple[str, str]]] = {
    "January": ("month_name", r"[A-Za-z]+"),
    "Jan": ("month_abbr", r"[A-Za-z]{3}"),
    "Monday": ("", r"[A-Za-z]+"),
    "Mon": ("", r"[A-Za-z]{3}"),
    "MST": ("", r"[A-Za-z]{3,5}"),
    "2006": ("year", r"\d{4}"),
    "06": ("year2", r"\d{2}"),
    "01": ("month", r"\d{2}"),
    "1": ("month", r"\d{1,2}"),
    "02": ("day", r"\d{2}"),
    "2": ("day", r"\d{1,2}"),
    "_2": ("day", r" ?\d{1,2}"),
    "002": ("yday", r"\d{3}"),
    "__2": ("yday", r" {0,2}\d{1,3}"),
    "15": ("hour", r"\d{1,2}"),
    "03": ("hour12", r"\d{2}"),
    "3": ("hour12", r"\d{1,2}"),
    "04": ("minute", r"\d{2}"),
    "4": ("minute", r"\d{1,2}"),
    "05": ("second", r"\d{2}"),
    "5": ("second", r"\d{1,2}"),
    "PM": ("ampm", r"AM|PM"),
    "pm": ("ampm", r"am|pm"),
    "Z07:00:00": ("offset", r"Z|[+-]\d{2}:\d{2}:\d{2}"),
    "Z070000": ("offset", r"Z|[+-]\d{6}"),
    "Z07:00": ("offset", r"Z|[+-]\d{2}:\d{2}"),
    "Z0700": ("offset", r"Z|[+-]\d{4}"),
    "Z07": ("offset", r"Z|[+-]\d{2}"),
    "-07:00:00": ("offset", r"[+-]\d{2}:\d{2}:\d{2}"),
    "-070000": ("offset", r"[+-]\d{6}"),
    "-07:00": ("offset", r"[+-]\d{2}:\d{2}"),
    "-0700": ("offset", r"[+-]\d{4}"),
    "-07": ("offset", r"[+-]\d{2}"),
}


def parse_time(layout: str, value: str) -> int:
    """Parse ``value`` according to ``layout``.

    Values without a zone offset are taken as UTC.  A fractional second may
    follow the seconds field even when the layout does not spell one out.

    Returns
    -------
    int
        Nanoseconds since 1970-01-01T00:00:00Z.

    Raises
    ------
    ValueError
        If ``value`` does not match ``layout`` or names an impossible date.
    """
    pattern, fields = _compile(layout)
    match = pattern.fullmatch(value)
    if match is None:
        raise ValueError(f"parsing time {value!r} as {layout!r}: cannot parse")
    parsed = {field: match.group(group) for group, field in fields if match.group(group) is not None}

    try:
        stamp = _assemble(parsed)
    except ValueError as exc:
        raise ValueError(f"parsing time {value!r}: {exc}") from None

    delta = stamp - _EPOCH
    seconds = delta.days * 86_400 + delta.seconds
    return seconds * 1_000_000_000 + _nanoseconds(parsed.get("fraction", ""))


def _compile(layout: str) -> tuple[re.Pattern[str], list[tuple[str, str]]]:
    """Translate ``layout`` into a regex plus a (group name, field) list."""
    parts: list[str] = []
    fields: list[tuple[str, str]] = []
    pos = 0
    elements = list(_ELEMENT.finditer(layout))
    for index, element in enumerate(elements):
        parts.append(re.escape(layout[pos:element.start()]))
        pos = element.end()
        token = element.group()
        group = f"g{index}"

        if token[0] in ".,":
            digits = len(token) - 1
            if token[1] == "0":
                parts.append(rf"[.,](?P<{group}>\d{{{digits}}})")
            else:
                parts.append(rf"(?:[.,](?P<{group}>\d+))?")
            fields.append((group, "fraction"))
            continue

        field, value_pattern = _FIELDS[token]
        if not field:
            parts.append(f"(?:{value_pattern})")
            continue
        parts.append(f"(?P<{group}>{value_pattern})")
        fields.append((group, field))

        following = elements[index + 1].group() if index + 1 < len(elements) else ""
        next_is_fraction = following[:1] in (".", ",") and element.end() == elements[index + 1].start()
        if field == "second" and not next_is_fraction:
            parts.append(rf"(?:[.,](?P<{group}f>\d+))?")
            fields.append((f"{group}f", "fraction"))
    parts.append(re.escape(layout[pos:]))
    return re.compile("".join(parts)), fields


def _assemble(parsed: dict[str, str]) -> datetime:
    year = 1
    if "year" in parsed:
        year = int(parsed["year"])
    elif "year2" in parsed:
        short = int(parsed["year2"])
        year = short + (1900 if short >= 69 else 2000)

    month = 1
    if "month" in parsed:
        month = int(parsed["month"])
    elif "month_name" in parsed or "month_abbr" in parsed:
        month = _month_number(parsed.get("month_name") or parsed["month_abbr"])

    day = int(parsed["day"].strip()) if "day" in parsed else 1

    hour = int(parsed.get("hour", "0"))
    if "hour12" in parsed:
        hour = int(parsed["hour12"])
        if not 1 <= hour <= 12:
            raise ValueError("hour out of range")
        if parsed.get("ampm", "").upper() == "PM" and hour < 12:
            hour += 12
        elif parsed.get("ampm", "").upper() == "AM" and hour == 12:
            hour = 0

    stamp = datetime(
        year,
        month,
        day,
        hour,
        int(parsed.get("minute", "0")),
        int(parsed.get("second", "0")),
        tzinfo=_offset(parsed.get("offset", "Z")),
    )
    if "yday" in parsed:
        yday = int(parsed["yday"].strip())
        start = stamp.replace(month=1, day=1)
        stamp = start + timedelta(days=yday - 1)
        if stamp.year != start.year:
            raise ValueError("day-of-year out of range")
    return stamp


def _month_number(name: str) -> int:
    lowered = name.lower()
    for number, month in enumerate(_MONTHS, start=1):
        if lowered in (month.lower(), month[:3].lower()):
            return number
    raise ValueError(f"month {name!r} out of range")


def _offset(text: str) -> timezone:
    if text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hours = int(digits[0:2])
    minutes = int(digits[2:4] or "0")
    seconds = int(digits[4:6] or "0")
    return timezone(sign * timedelta(hours=hours, minutes=minutes, seconds=seconds))


def _nanoseconds(fraction: str) -> int:
    # Digits past the ninth are below nanosecond resolution.
    return int(fraction[:9].ljust(9, "0")) if fraction else 0

from __future__ import annotations

import math
import re

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^(\d{2}):(\d{2})$")
_COLON_RE = re.compile(r"^(\d+):(\d{1,2})$")
_HOURS_MINUTES_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*(?:h|godz)\s*(?:(\d+)\s*(?:m|min))?$", re.IGNORECASE)
_MINUTES_RE = re.compile(r"^(\d+)\s*(?:m|min)$", re.IGNORECASE)


def parse_hhmm(value: str) -> int | None:
    """Minutes since midnight for a strict ``HH:MM`` string, else None."""
    match = _TIME_RE.match((value or "").strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def minutes_to_hhmm(total_minutes: int) -> str:
    total_minutes %= MINUTES_PER_DAY
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def calculate_duration_minutes(start_time: str, end_time: str) -> int:
    """Raw ``end - start`` in minutes; may be zero or negative. Unparseable input gives 0."""
    start = parse_hhmm(start_time)
    end = parse_hhmm(end_time)
    if start is None or end is None:
        return 0
    return end - start


def interval_minutes(start_time: str, end_time: str) -> int:
    """Duration of a single interval, unwrapping one midnight crossing.

    ``22:00 -> 02:00`` gives 240. Equal times stay 0 so the one-minute
    minimum rejects them instead of turning them into a full day.
    """
    minutes = calculate_duration_minutes(start_time, end_time)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes


def format_duration(total_minutes: int) -> str:
    hours, minutes = divmod(int(total_minutes), 60)
    return f"{hours}:{minutes:02d}"


def duration_to_string(total_minutes: int) -> str:
    hours, minutes = divmod(int(total_minutes), 60)
    if hours == 0:
        return f"{minutes}min"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}min"


def parse_duration_input(text: str) -> int | None:
    """Parse typed durations: ``1:30``, ``1h30m``, ``1h``, ``90m``, ``1.5h``, ``90``."""
    value = (text or "").strip()
    if not value:
        return None

    match = _COLON_RE.match(value)
    if match:
        return int(match.group(1)) * 60 + int(match.group(2))

    match = _HOURS_MINUTES_RE.match(value)
    if match:
        hours = float(match.group(1))
        minutes = int(match.group(2)) if match.group(2) else 0
        return round(hours * 60 + minutes)

    match = _MINUTES_RE.match(value)
    if match:
        return int(match.group(1))

    try:
        number = float(value)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number) or number < 0:
        return None
    return round(number)


__all__ = [
    "MINUTES_PER_DAY",
    "parse_hhmm",
    "minutes_to_hhmm",
    "calculate_duration_minutes",
    "interval_minutes",
    "format_duration",
    "duration_to_string",
    "parse_duration_input",
]

from __future__ import annotations

from datetime import date, timedelta
from typing import List


def week_start(any_day: date, week_starts_on: int = 0) -> date:
    """First day of the week containing ``any_day``; ``week_starts_on`` follows ``date.weekday()``."""
    offset = (any_day.weekday() - week_starts_on) % 7
    return any_day - timedelta(days=offset)


def week_days(any_day: date, week_starts_on: int = 0) -> List[date]:
    start = week_start(any_day, week_starts_on)
    return [start + timedelta(days=i) for i in range(7)]


__all__ = ["week_start", "week_days"]

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from core.domain.identifiers import generate_id, utc_now

DEFAULT_CURRENCY = "PLN"
DEFAULT_TIMEZONE = "Europe/Warsaw"
DEFAULT_WEEK_STARTS_ON = 0  # Monday, as in date.weekday()


@dataclass
class Workspace:
    id: str
    name: str
    currency: str = DEFAULT_CURRENCY
    timezone: str = DEFAULT_TIMEZONE
    week_starts_on: int = DEFAULT_WEEK_STARTS_ON
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(
        name: str,
        currency: str = DEFAULT_CURRENCY,
        timezone: str = DEFAULT_TIMEZONE,
        week_starts_on: int = DEFAULT_WEEK_STARTS_ON,
    ) -> "Workspace":
        now = utc_now()
        return Workspace(
            id=generate_id(),
            name=name,
            currency=currency,
            timezone=timezone,
            week_starts_on=week_starts_on,
            created_at=now,
            updated_at=now,
        )


__all__ = ["Workspace", "DEFAULT_CURRENCY", "DEFAULT_TIMEZONE", "DEFAULT_WEEK_STARTS_ON"]

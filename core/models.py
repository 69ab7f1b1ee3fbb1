from __future__ import annotations

from core.domain import (
    DEFAULT_CURRENCY,
    DEFAULT_DURATION_MINUTES,
    DEFAULT_START_TIME,
    DEFAULT_TIMEZONE,
    DEFAULT_WEEK_STARTS_ON,
    BillableFilter,
    Category,
    Client,
    EstimateType,
    GroupByDimension,
    Project,
    Tag,
    Team,
    Theme,
    TimeEntry,
    User,
    UserRole,
    UserSettings,
    Workspace,
    generate_id,
    utc_now,
)

__all__ = [
    "generate_id",
    "utc_now",
    "UserRole",
    "EstimateType",
    "GroupByDimension",
    "BillableFilter",
    "Theme",
    "Workspace",
    "User",
    "Team",
    "Client",
    "Tag",
    "Category",
    "Project",
    "TimeEntry",
    "UserSettings",
    "DEFAULT_CURRENCY",
    "DEFAULT_TIMEZONE",
    "DEFAULT_WEEK_STARTS_ON",
    "DEFAULT_START_TIME",
    "DEFAULT_DURATION_MINUTES",
]

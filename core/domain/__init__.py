from core.domain.catalog import Category, Client, Tag
from core.domain.enums import BillableFilter, EstimateType, GroupByDimension, Theme, UserRole
from core.domain.identifiers import generate_id, utc_now
from core.domain.member import Team, User
from core.domain.project import Project
from core.domain.settings import DEFAULT_DURATION_MINUTES, DEFAULT_START_TIME, UserSettings
from core.domain.time_entry import TimeEntry
from core.domain.workspace import DEFAULT_CURRENCY, DEFAULT_TIMEZONE, DEFAULT_WEEK_STARTS_ON, Workspace

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

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from core.models import BillableFilter, GroupByDimension, TimeEntry

NO_PROJECT_KEY = "__no_project__"
NO_CLIENT_KEY = "__no_client__"
NO_TEAM_KEY = "__no_team__"

NO_PROJECT_LABEL = "No project"
NO_CLIENT_LABEL = "No client"
NO_TEAM_LABEL = "No team"

UNKNOWN_MEMBER_LABEL = "Unknown member"
UNKNOWN_PROJECT_LABEL = "Unknown project"
UNKNOWN_CLIENT_LABEL = "Unknown client"
UNKNOWN_TEAM_LABEL = "Unknown team"


@dataclass
class ReportFilter:
    start_date: Optional[str] = None  # YYYY-MM-DD, inclusive
    end_date: Optional[str] = None
    project_id: Optional[str] = None
    member_id: Optional[str] = None
    team_id: Optional[str] = None
    tag_id: Optional[str] = None
    billable: BillableFilter = BillableFilter.ALL


@dataclass
class ReportTotals:
    entry_count: int = 0
    total_minutes: int = 0
    billable_minutes: int = 0

    @property
    def non_billable_minutes(self) -> int:
        return self.total_minutes - self.billable_minutes


@dataclass
class EntryGroup:
    key: str
    label: str
    color: Optional[str] = None
    entries: List[TimeEntry] = field(default_factory=list)

    @property
    def total_minutes(self) -> int:
        return sum(entry.duration_minutes for entry in self.entries)

    @property
    def entry_count(self) -> int:
        return len(self.entries)


@dataclass
class GroupedEntries:
    dimension: GroupByDimension
    groups: List[EntryGroup] = field(default_factory=list)


@dataclass
class TimesheetRow:
    project_id: str
    project_name: str
    color: str
    daily_minutes: List[int]

    @property
    def total_minutes(self) -> int:
        return sum(self.daily_minutes)


@dataclass
class WeeklyTimesheet:
    days: List[date]
    rows: List[TimesheetRow]

    @property
    def daily_totals(self) -> List[int]:
        totals = [0] * len(self.days)
        for row in self.rows:
            for index, minutes in enumerate(row.daily_minutes):
                totals[index] += minutes
        return totals

    @property
    def total_minutes(self) -> int:
        return sum(self.daily_totals)

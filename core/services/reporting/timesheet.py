from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List

from core.interfaces import ProjectRepository
from core.models import TimeEntry
from core.services.common.weeks import week_days
from core.services.reporting.models import TimesheetRow, WeeklyTimesheet


class ReportingTimesheetMixin:
    _project_repo: ProjectRepository

    def weekly_timesheet(
        self,
        entries: Iterable[TimeEntry],
        any_day: date,
        week_starts_on: int = 0,
    ) -> WeeklyTimesheet:
        """Per-project minute totals for the seven days of the week containing ``any_day``.

        Entries without a project, or whose project no longer exists, are left out.
        Rows keep the order in which their project first appears.
        """
        days = week_days(any_day, week_starts_on)
        day_index = {day.isoformat(): index for index, day in enumerate(days)}
        rows: Dict[str, TimesheetRow] = {}

        for entry in entries:
            index = day_index.get(entry.date)
            if index is None or not entry.project_id:
                continue
            row = rows.get(entry.project_id)
            if row is None:
                project = self._project_repo.get(entry.project_id)
                if project is None:
                    continue
                row = TimesheetRow(
                    project_id=project.id,
                    project_name=project.name,
                    color=project.color,
                    daily_minutes=[0] * len(days),
                )
                rows[entry.project_id] = row
            row.daily_minutes[index] += entry.duration_minutes

        return WeeklyTimesheet(days=days, rows=list(rows.values()))


__all__ = ["ReportingTimesheetMixin"]

from __future__ import annotations

from typing import Iterable, List

from core.interfaces import UserRepository
from core.models import BillableFilter, TimeEntry
from core.services.reporting.models import ReportFilter, ReportTotals


class ReportingFilterMixin:
    _user_repo: UserRepository

    def filter_entries(self, entries: Iterable[TimeEntry], report_filter: ReportFilter) -> List[TimeEntry]:
        """Keep the entries matching every set criterion; unset criteria match everything."""
        f = report_filter
        team_members: set[str] | None = None
        if f.team_id:
            team_members = {
                user.id for user in self._user_repo.list_all() if f.team_id in user.team_ids
            }

        result: List[TimeEntry] = []
        for entry in entries:
            if f.start_date and entry.date < f.start_date:
                continue
            if f.end_date and entry.date > f.end_date:
                continue
            if f.project_id and entry.project_id != f.project_id:
                continue
            if f.member_id and entry.user_id != f.member_id:
                continue
            if team_members is not None and entry.user_id not in team_members:
                continue
            if f.tag_id and f.tag_id not in entry.tag_ids:
                continue
            if f.billable == BillableFilter.BILLABLE and not entry.billable:
                continue
            if f.billable == BillableFilter.NON_BILLABLE and entry.billable:
                continue
            result.append(entry)
        return result

    @staticmethod
    def summarize(entries: Iterable[TimeEntry]) -> ReportTotals:
        totals = ReportTotals()
        for entry in entries:
            totals.entry_count += 1
            totals.total_minutes += entry.duration_minutes
            if entry.billable:
                totals.billable_minutes += entry.duration_minutes
        return totals


__all__ = ["ReportingFilterMixin"]

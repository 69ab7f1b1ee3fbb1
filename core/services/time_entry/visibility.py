from __future__ import annotations

from typing import Iterable, List

from core.models import Project, TimeEntry
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext


def filter_visible_entries(
    entries: Iterable[TimeEntry],
    projects: Iterable[Project],
    user_session: UserSessionContext | None,
) -> List[TimeEntry]:
    """Apply the entry visibility tiers: all, own + assigned projects, own only."""
    items = list(entries)
    principal = user_session.principal if user_session is not None else None
    if principal is None:
        return items
    capabilities = principal.capabilities
    if Capability.TIME_ENTRIES_ALL_READ in capabilities:
        return items
    if Capability.TIME_ENTRIES_ASSIGNED_PROJECTS_READ in capabilities:
        assigned = {
            project.id for project in projects if principal.user_id in project.assigned_member_ids
        }
        return [
            entry
            for entry in items
            if entry.user_id == principal.user_id
            or (entry.project_id is not None and entry.project_id in assigned)
        ]
    if Capability.TIME_ENTRIES_OWN_READ in capabilities:
        return [entry for entry in items if entry.user_id == principal.user_id]
    return []


def sort_entries_newest_first(entries: Iterable[TimeEntry]) -> List[TimeEntry]:
    return sorted(entries, key=lambda entry: (entry.date, entry.start_time), reverse=True)


__all__ = ["filter_visible_entries", "sort_entries_newest_first"]

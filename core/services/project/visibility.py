from __future__ import annotations

from typing import Iterable, List

from core.models import Project
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext


def filter_visible_projects(
    projects: Iterable[Project],
    user_session: UserSessionContext | None,
) -> List[Project]:
    """Full catalog for whoever may read all entries; others get public or assigned projects."""
    items = list(projects)
    principal = user_session.principal if user_session is not None else None
    if principal is None or Capability.TIME_ENTRIES_ALL_READ in principal.capabilities:
        return items
    return [project for project in items if project.is_visible_to(principal.user_id)]


__all__ = ["filter_visible_projects"]

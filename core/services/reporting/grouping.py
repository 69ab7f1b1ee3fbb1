from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from core.exceptions import ValidationError
from core.interfaces import ClientRepository, ProjectRepository, TeamRepository, UserRepository
from core.models import GroupByDimension, TimeEntry
from core.services.reporting.models import (
    NO_CLIENT_KEY,
    NO_CLIENT_LABEL,
    NO_PROJECT_KEY,
    NO_PROJECT_LABEL,
    NO_TEAM_KEY,
    NO_TEAM_LABEL,
    UNKNOWN_CLIENT_LABEL,
    UNKNOWN_MEMBER_LABEL,
    UNKNOWN_PROJECT_LABEL,
    UNKNOWN_TEAM_LABEL,
    EntryGroup,
    GroupedEntries,
)

GroupKey = Tuple[str, str, Optional[str]]

SORT_BY_NAME = "name"
SORT_BY_DURATION = "duration"


class ReportingGroupingMixin:
    _user_repo: UserRepository
    _project_repo: ProjectRepository
    _client_repo: ClientRepository
    _team_repo: TeamRepository

    def group_entries(
        self,
        entries: Iterable[TimeEntry],
        dimension: GroupByDimension | str,
        sort_by: str = SORT_BY_NAME,
        order: str = "asc",
    ) -> GroupedEntries:
        """Bucket entries by one dimension.

        Entries without a project, client or team land in a sentinel bucket.
        With the team dimension an entry is counted once for every team of
        its member, so group totals may add up to more than the report total.
        """
        dimension = GroupByDimension(dimension)
        if sort_by not in (SORT_BY_NAME, SORT_BY_DURATION):
            raise ValidationError(f"Unsupported sort key: {sort_by!r}", code="REPORT_SORT_INVALID")
        if order not in ("asc", "desc"):
            raise ValidationError(f"Unsupported sort order: {order!r}", code="REPORT_SORT_INVALID")
        if dimension == GroupByDimension.NONE:
            return GroupedEntries(dimension=dimension, groups=[])

        users = {user.id: user for user in self._user_repo.list_all()}
        projects = {project.id: project for project in self._project_repo.list_all()}
        clients = {client.id: client for client in self._client_repo.list_all()}
        teams = {team.id: team for team in self._team_repo.list_all()}

        def keys_for(entry: TimeEntry) -> List[GroupKey]:
            if dimension == GroupByDimension.MEMBER:
                user = users.get(entry.user_id)
                return [(entry.user_id, user.name if user else UNKNOWN_MEMBER_LABEL, None)]
            if dimension == GroupByDimension.PROJECT:
                if not entry.project_id:
                    return [(NO_PROJECT_KEY, NO_PROJECT_LABEL, None)]
                project = projects.get(entry.project_id)
                if project is None:
                    return [(entry.project_id, UNKNOWN_PROJECT_LABEL, None)]
                return [(project.id, project.name, project.color)]
            if dimension == GroupByDimension.CLIENT:
                project = projects.get(entry.project_id) if entry.project_id else None
                if project is None or not project.client_id:
                    return [(NO_CLIENT_KEY, NO_CLIENT_LABEL, None)]
                client = clients.get(project.client_id)
                return [(project.client_id, client.name if client else UNKNOWN_CLIENT_LABEL, None)]
            user = users.get(entry.user_id)
            team_ids = user.team_ids if user else []
            if not team_ids:
                return [(NO_TEAM_KEY, NO_TEAM_LABEL, None)]
            return [
                (team_id, teams[team_id].name if team_id in teams else UNKNOWN_TEAM_LABEL, None)
                for team_id in team_ids
            ]

        buckets: Dict[str, EntryGroup] = {}
        for entry in entries:
            for key, label, color in keys_for(entry):
                group = buckets.get(key)
                if group is None:
                    group = EntryGroup(key=key, label=label, color=color)
                    buckets[key] = group
                group.entries.append(entry)

        if sort_by == SORT_BY_NAME:
            ordered = sorted(buckets.values(), key=lambda group: group.label.casefold())
        else:
            ordered = sorted(buckets.values(), key=lambda group: group.total_minutes)
        if order == "desc":
            ordered.reverse()
        return GroupedEntries(dimension=dimension, groups=ordered)


__all__ = ["ReportingGroupingMixin", "SORT_BY_NAME", "SORT_BY_DURATION"]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from core.models import Client, Project, Tag, Team, TimeEntry, User
from core.services.reporting.models import NO_CLIENT_LABEL, NO_PROJECT_LABEL

EXPORT_HEADERS = [
    "User",
    "Teams",
    "Project",
    "Client",
    "Description",
    "Date",
    "Start",
    "End",
    "Duration",
    "Tags",
    "Billable",
]

NAME_SEPARATOR = "; "


@dataclass
class ExportLookups:
    users: Dict[str, User] = field(default_factory=dict)
    teams: Dict[str, Team] = field(default_factory=dict)
    projects: Dict[str, Project] = field(default_factory=dict)
    clients: Dict[str, Client] = field(default_factory=dict)
    tags: Dict[str, Tag] = field(default_factory=dict)

    @classmethod
    def build(cls, users=(), teams=(), projects=(), clients=(), tags=()) -> "ExportLookups":
        return cls(
            users={u.id: u for u in users},
            teams={t.id: t for t in teams},
            projects={p.id: p for p in projects},
            clients={c.id: c for c in clients},
            tags={t.id: t for t in tags},
        )

    def describe(self, entry: TimeEntry) -> Dict[str, object]:
        """Resolve one entry into the export columns; missing references read as blanks or sentinels."""
        user = self.users.get(entry.user_id)
        team_names = [
            self.teams[team_id].name for team_id in (user.team_ids if user else []) if team_id in self.teams
        ]
        project = self.projects.get(entry.project_id) if entry.project_id else None
        client = self.clients.get(project.client_id) if project and project.client_id else None
        tag_names = [self.tags[tag_id].name for tag_id in entry.tag_ids if tag_id in self.tags]
        return {
            "User": user.name if user else "",
            "Teams": NAME_SEPARATOR.join(team_names),
            "Project": project.name if project else NO_PROJECT_LABEL,
            "Client": client.name if client else NO_CLIENT_LABEL,
            "Description": entry.description,
            "Date": entry.date,
            "Start": entry.start_time,
            "End": entry.end_time,
            "Duration": entry.duration_minutes,
            "Tags": NAME_SEPARATOR.join(tag_names),
            "Billable": entry.billable,
        }


__all__ = ["EXPORT_HEADERS", "NAME_SEPARATOR", "ExportLookups"]

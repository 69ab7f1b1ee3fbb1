from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from core.domain.enums import UserRole
from core.domain.identifiers import generate_id, utc_now


@dataclass
class User:
    id: str
    workspace_id: str
    name: str
    email: str
    role: UserRole = UserRole.EMPLOYEE
    team_ids: List[str] = field(default_factory=list)
    avatar_url: Optional[str] = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(
        workspace_id: str,
        name: str,
        email: str,
        role: UserRole = UserRole.EMPLOYEE,
        team_ids: List[str] | None = None,
    ) -> "User":
        now = utc_now()
        return User(
            id=generate_id(),
            workspace_id=workspace_id,
            name=name,
            email=email,
            role=role,
            team_ids=list(team_ids or []),
            created_at=now,
            updated_at=now,
        )


@dataclass
class Team:
    id: str
    workspace_id: str
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(workspace_id: str, name: str) -> "Team":
        now = utc_now()
        return Team(
            id=generate_id(),
            workspace_id=workspace_id,
            name=name,
            created_at=now,
            updated_at=now,
        )


__all__ = ["User", "Team"]

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from core.domain.enums import EstimateType
from core.domain.identifiers import generate_id, utc_now


@dataclass
class Project:
    id: str
    workspace_id: str
    name: str
    color: str
    client_id: Optional[str] = None
    billable_by_default: bool = False
    billable_rate: Optional[float] = None
    estimate_type: EstimateType = EstimateType.NONE
    estimate_value: Optional[float] = None
    active: bool = True
    is_public: bool = True
    assigned_member_ids: List[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(workspace_id: str, name: str, color: str, **extra) -> "Project":
        now = utc_now()
        return Project(
            id=generate_id(),
            workspace_id=workspace_id,
            name=name,
            color=color,
            created_at=now,
            updated_at=now,
            **extra,
        )

    def is_visible_to(self, user_id: str) -> bool:
        return self.is_public or user_id in self.assigned_member_ids


__all__ = ["Project"]

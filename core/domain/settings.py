from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.domain.enums import Theme
from core.domain.identifiers import generate_id

DEFAULT_START_TIME = "09:00"
DEFAULT_DURATION_MINUTES = 60


@dataclass
class UserSettings:
    """Per-member preferences used to prefill new time entries."""

    id: str
    user_id: str
    default_project_id: Optional[str] = None
    default_tag_ids: List[str] = field(default_factory=list)
    default_duration_minutes: int = DEFAULT_DURATION_MINUTES
    default_start_time: str = DEFAULT_START_TIME
    theme: Theme = Theme.SYSTEM

    @staticmethod
    def create(user_id: str) -> "UserSettings":
        return UserSettings(id=generate_id(), user_id=user_id)


__all__ = ["UserSettings", "DEFAULT_START_TIME", "DEFAULT_DURATION_MINUTES"]

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.identifiers import generate_id, utc_now
from core.domain.workspace import DEFAULT_CURRENCY


@dataclass
class Client:
    id: str
    workspace_id: str
    name: str
    address: Optional[str] = None
    currency: str = DEFAULT_CURRENCY
    active: bool = True
    note: Optional[str] = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(workspace_id: str, name: str, **extra) -> "Client":
        now = utc_now()
        return Client(
            id=generate_id(),
            workspace_id=workspace_id,
            name=name,
            created_at=now,
            updated_at=now,
            **extra,
        )


@dataclass
class Tag:
    id: str
    workspace_id: str
    name: str
    color: str
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(workspace_id: str, name: str, color: str, active: bool = True) -> "Tag":
        now = utc_now()
        return Tag(
            id=generate_id(),
            workspace_id=workspace_id,
            name=name,
            color=color,
            active=active,
            created_at=now,
            updated_at=now,
        )


@dataclass
class Category:
    id: str
    workspace_id: str
    name: str
    color: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(workspace_id: str, name: str, color: str) -> "Category":
        now = utc_now()
        return Category(
            id=generate_id(),
            workspace_id=workspace_id,
            name=name,
            color=color,
            created_at=now,
            updated_at=now,
        )


__all__ = ["Client", "Tag", "Category"]

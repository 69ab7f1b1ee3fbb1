from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import CategoryRepository, ClientRepository, TagRepository
from core.models import Category, Client, Tag
from infra.db.catalog.mapper import (
    category_from_orm,
    category_to_orm,
    client_from_orm,
    client_to_orm,
    tag_from_orm,
    tag_to_orm,
)
from infra.db.models import CategoryORM, ClientORM, TagORM


class SqlAlchemyClientRepository(ClientRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, client: Client) -> None:
        self.session.add(client_to_orm(client))

    def update(self, client: Client) -> None:
        self.session.merge(client_to_orm(client))

    def delete(self, client_id: str) -> None:
        self.session.query(ClientORM).filter_by(id=client_id).delete()

    def get(self, client_id: str) -> Optional[Client]:
        obj = self.session.get(ClientORM, client_id)
        return client_from_orm(obj) if obj else None

    def list_by_workspace(self, workspace_id: str) -> List[Client]:
        stmt = select(ClientORM).where(ClientORM.workspace_id == workspace_id)
        rows = self.session.execute(stmt).scalars().all()
        return [client_from_orm(row) for row in rows]

    def list_all(self) -> List[Client]:
        rows = self.session.execute(select(ClientORM)).scalars().all()
        return [client_from_orm(row) for row in rows]


class SqlAlchemyTagRepository(TagRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, tag: Tag) -> None:
        self.session.add(tag_to_orm(tag))

    def update(self, tag: Tag) -> None:
        self.session.merge(tag_to_orm(tag))

    def delete(self, tag_id: str) -> None:
        self.session.query(TagORM).filter_by(id=tag_id).delete()

    def get(self, tag_id: str) -> Optional[Tag]:
        obj = self.session.get(TagORM, tag_id)
        return tag_from_orm(obj) if obj else None

    def list_by_workspace(self, workspace_id: str) -> List[Tag]:
        stmt = select(TagORM).where(TagORM.workspace_id == workspace_id)
        rows = self.session.execute(stmt).scalars().all()
        return [tag_from_orm(row) for row in rows]

    def list_all(self) -> List[Tag]:
        rows = self.session.execute(select(TagORM)).scalars().all()
        return [tag_from_orm(row) for row in rows]


class SqlAlchemyCategoryRepository(CategoryRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, category: Category) -> None:
        self.session.add(category_to_orm(category))

    def update(self, category: Category) -> None:
        self.session.merge(category_to_orm(category))

    def delete(self, category_id: str) -> None:
        self.session.query(CategoryORM).filter_by(id=category_id).delete()

    def get(self, category_id: str) -> Optional[Category]:
        obj = self.session.get(CategoryORM, category_id)
        return category_from_orm(obj) if obj else None

    def list_by_workspace(self, workspace_id: str) -> List[Category]:
        stmt = select(CategoryORM).where(CategoryORM.workspace_id == workspace_id)
        rows = self.session.execute(stmt).scalars().all()
        return [category_from_orm(row) for row in rows]

    def list_all(self) -> List[Category]:
        rows = self.session.execute(select(CategoryORM)).scalars().all()
        return [category_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyClientRepository", "SqlAlchemyTagRepository", "SqlAlchemyCategoryRepository"]

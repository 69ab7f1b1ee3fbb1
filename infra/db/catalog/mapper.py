from __future__ import annotations

from core.models import Category, Client, Tag
from infra.db.models import CategoryORM, ClientORM, TagORM


def client_to_orm(client: Client) -> ClientORM:
    return ClientORM(
        id=client.id,
        workspace_id=client.workspace_id,
        name=client.name,
        address=client.address,
        currency=client.currency,
        active=client.active,
        note=client.note,
        created_at=client.created_at,
        updated_at=client.updated_at,
    )


def client_from_orm(obj: ClientORM) -> Client:
    return Client(
        id=obj.id,
        workspace_id=obj.workspace_id,
        name=obj.name,
        address=obj.address,
        currency=obj.currency,
        active=obj.active,
        note=obj.note,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )


def tag_to_orm(tag: Tag) -> TagORM:
    return TagORM(
        id=tag.id,
        workspace_id=tag.workspace_id,
        name=tag.name,
        color=tag.color,
        active=tag.active,
        created_at=tag.created_at,
        updated_at=tag.updated_at,
    )


def tag_from_orm(obj: TagORM) -> Tag:
    return Tag(
        id=obj.id,
        workspace_id=obj.workspace_id,
        name=obj.name,
        color=obj.color,
        active=obj.active,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )


def category_to_orm(category: Category) -> CategoryORM:
    return CategoryORM(
        id=category.id,
        workspace_id=category.workspace_id,
        name=category.name,
        color=category.color,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def category_from_orm(obj: CategoryORM) -> Category:
    return Category(
        id=obj.id,
        workspace_id=obj.workspace_id,
        name=obj.name,
        color=obj.color,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )

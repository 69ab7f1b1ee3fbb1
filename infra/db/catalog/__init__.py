from infra.db.catalog.mapper import (
    category_from_orm,
    category_to_orm,
    client_from_orm,
    client_to_orm,
    tag_from_orm,
    tag_to_orm,
)
from infra.db.catalog.repository import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyTagRepository,
)

__all__ = [
    "client_to_orm",
    "client_from_orm",
    "tag_to_orm",
    "tag_from_orm",
    "category_to_orm",
    "category_from_orm",
    "SqlAlchemyClientRepository",
    "SqlAlchemyTagRepository",
    "SqlAlchemyCategoryRepository",
]

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import CategoryRepository, TimeEntryRepository
from core.models import Category, utc_now
from core.services.auth.authorization import require_capability
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext
from core.services.common.validation import CatalogValidationMixin

logger = logging.getLogger(__name__)
DEFAULT_CATEGORY_COLOR = "#3B82F6"


class CategoryService(CatalogValidationMixin):
    """Workspace categories; a time entry may carry at most one."""

    def __init__(
        self,
        session: Session,
        category_repo: CategoryRepository,
        entry_repo: TimeEntryRepository,
        user_session: UserSessionContext | None = None,
    ):
        self._session: Session = session
        self._category_repo: CategoryRepository = category_repo
        self._entry_repo: TimeEntryRepository = entry_repo
        self._user_session: UserSessionContext | None = user_session

    def create_category(
        self, workspace_id: str, name: str, color: str = DEFAULT_CATEGORY_COLOR
    ) -> Category:
        require_capability(self._user_session, Capability.CATEGORIES_WRITE, operation_label="create category")
        clean_name = self._clean_name(name, label="Category", code_prefix="CATEGORY")
        self._ensure_unique_name(
            clean_name,
            self._category_repo.list_by_workspace(workspace_id),
            label="Category",
            code_prefix="CATEGORY",
        )
        category = Category.create(
            workspace_id=workspace_id,
            name=clean_name,
            color=self._validate_color(color, code_prefix="CATEGORY"),
        )
        try:
            self._category_repo.add(category)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating category: %s", e)
            raise
        logger.info("Created category %s - %s", category.id, category.name)
        domain_events.categories_changed.emit(category.id)
        return category

    def update_category(
        self,
        category_id: str,
        name: str | None = None,
        color: str | None = None,
    ) -> Category:
        require_capability(self._user_session, Capability.CATEGORIES_WRITE, operation_label="update category")
        category = self._require_category(category_id)
        if name is not None:
            clean_name = self._clean_name(name, label="Category", code_prefix="CATEGORY")
            self._ensure_unique_name(
                clean_name,
                self._category_repo.list_by_workspace(category.workspace_id),
                label="Category",
                code_prefix="CATEGORY",
                ignore_id=category.id,
            )
            category.name = clean_name
        if color is not None:
            category.color = self._validate_color(color, code_prefix="CATEGORY")
        category.updated_at = utc_now()
        try:
            self._category_repo.update(category)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        domain_events.categories_changed.emit(category.id)
        return category

    def delete_category(self, category_id: str) -> None:
        """Delete a category and clear it from every entry that used it."""
        require_capability(self._user_session, Capability.CATEGORIES_WRITE, operation_label="delete category")
        category = self._require_category(category_id)
        detached = 0
        try:
            for entry in self._entry_repo.list_by_workspace(category.workspace_id):
                if entry.category_id == category_id:
                    entry.category_id = None
                    entry.updated_at = utc_now()
                    self._entry_repo.update(entry)
                    detached += 1
            self._category_repo.delete(category_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        logger.info("Deleted category %s (%d entr(ies) detached)", category_id, detached)
        domain_events.categories_changed.emit(category_id)
        if detached:
            domain_events.time_entries_changed.emit(category.workspace_id)

    def list_categories(self, workspace_id: str, search: str = "") -> List[Category]:
        require_capability(self._user_session, Capability.CATEGORIES_READ, operation_label="list categories")
        needle = (search or "").strip().casefold()
        return sorted(
            (
                category
                for category in self._category_repo.list_by_workspace(workspace_id)
                if needle in category.name.casefold()
            ),
            key=lambda category: category.name.casefold(),
        )

    def entry_counts(self, workspace_id: str) -> Dict[str, int]:
        """Number of entries per category id; unused categories are absent."""
        require_capability(self._user_session, Capability.CATEGORIES_READ, operation_label="count category entries")
        return dict(
            Counter(
                entry.category_id
                for entry in self._entry_repo.list_by_workspace(workspace_id)
                if entry.category_id
            )
        )

    def _require_category(self, category_id: str) -> Category:
        category = self._category_repo.get(category_id)
        if not category:
            raise NotFoundError("Category not found.", code="CATEGORY_NOT_FOUND")
        return category


__all__ = ["CategoryService", "DEFAULT_CATEGORY_COLOR"]

from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import TagRepository
from core.models import Tag, utc_now
from core.services.auth.authorization import require_capability
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext
from core.services.common.validation import CatalogValidationMixin

logger = logging.getLogger(__name__)
DEFAULT_TAG_COLOR = "#3B82F6"


class TagService(CatalogValidationMixin):
    def __init__(
        self,
        session: Session,
        tag_repo: TagRepository,
        user_session: UserSessionContext | None = None,
    ):
        self._session: Session = session
        self._tag_repo: TagRepository = tag_repo
        self._user_session: UserSessionContext | None = user_session

    def create_tag(self, workspace_id: str, name: str, color: str = DEFAULT_TAG_COLOR) -> Tag:
        require_capability(self._user_session, Capability.TAGS_WRITE, operation_label="create tag")
        clean_name = self._clean_name(name, label="Tag", code_prefix="TAG")
        self._ensure_unique_name(
            clean_name, self._tag_repo.list_by_workspace(workspace_id), label="Tag", code_prefix="TAG"
        )
        tag = Tag.create(
            workspace_id=workspace_id,
            name=clean_name,
            color=self._validate_color(color, code_prefix="TAG"),
        )
        try:
            self._tag_repo.add(tag)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating tag: %s", e)
            raise
        logger.info("Created tag %s - %s", tag.id, tag.name)
        domain_events.tags_changed.emit(tag.id)
        return tag

    def update_tag(
        self,
        tag_id: str,
        name: str | None = None,
        color: str | None = None,
        active: bool | None = None,
    ) -> Tag:
        require_capability(self._user_session, Capability.TAGS_WRITE, operation_label="update tag")
        tag = self._require_tag(tag_id)
        if name is not None:
            clean_name = self._clean_name(name, label="Tag", code_prefix="TAG")
            self._ensure_unique_name(
                clean_name,
                self._tag_repo.list_by_workspace(tag.workspace_id),
                label="Tag",
                code_prefix="TAG",
                ignore_id=tag.id,
            )
            tag.name = clean_name
        if color is not None:
            tag.color = self._validate_color(color, code_prefix="TAG")
        if active is not None:
            tag.active = bool(active)
        tag.updated_at = utc_now()
        try:
            self._tag_repo.update(tag)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        domain_events.tags_changed.emit(tag.id)
        return tag

    def delete_tag(self, tag_id: str) -> None:
        require_capability(self._user_session, Capability.TAGS_DELETE, operation_label="delete tag")
        self._require_tag(tag_id)
        try:
            self._tag_repo.delete(tag_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        domain_events.tags_changed.emit(tag_id)

    def list_tags(self, workspace_id: str) -> List[Tag]:
        require_capability(self._user_session, Capability.TAGS_READ, operation_label="list tags")
        return sorted(self._tag_repo.list_by_workspace(workspace_id), key=lambda tag: tag.name.casefold())

    def _require_tag(self, tag_id: str) -> Tag:
        tag = self._tag_repo.get(tag_id)
        if not tag:
            raise NotFoundError("Tag not found.", code="TAG_NOT_FOUND")
        return tag


__all__ = ["TagService", "DEFAULT_TAG_COLOR"]

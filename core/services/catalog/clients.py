from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import ClientRepository, ProjectRepository
from core.models import Client, utc_now
from core.services.auth.authorization import require_capability
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext
from core.services.common.validation import CatalogValidationMixin

logger = logging.getLogger(__name__)


class ClientService(CatalogValidationMixin):
    def __init__(
        self,
        session: Session,
        client_repo: ClientRepository,
        project_repo: ProjectRepository,
        user_session: UserSessionContext | None = None,
    ):
        self._session: Session = session
        self._client_repo: ClientRepository = client_repo
        self._project_repo: ProjectRepository = project_repo
        self._user_session: UserSessionContext | None = user_session

    def create_client(
        self,
        workspace_id: str,
        name: str,
        currency: str = "",
        address: str | None = None,
        note: str | None = None,
    ) -> Client:
        require_capability(self._user_session, Capability.CLIENTS_WRITE, operation_label="create client")
        clean_name = self._clean_name(name, label="Client", code_prefix="CLIENT")
        self._ensure_unique_name(
            clean_name,
            self._client_repo.list_by_workspace(workspace_id),
            label="Client",
            code_prefix="CLIENT",
        )
        extra = {"address": (address or "").strip() or None, "note": (note or "").strip() or None}
        if currency:
            extra["currency"] = self._validate_currency(currency)
        client = Client.create(workspace_id=workspace_id, name=clean_name, **extra)
        try:
            self._client_repo.add(client)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating client: %s", e)
            raise
        logger.info("Created client %s - %s", client.id, client.name)
        domain_events.clients_changed.emit(client.id)
        return client

    def update_client(
        self,
        client_id: str,
        name: str | None = None,
        currency: str | None = None,
        active: bool | None = None,
        note: str | None = None,
    ) -> Client:
        require_capability(self._user_session, Capability.CLIENTS_WRITE, operation_label="update client")
        client = self._require_client(client_id)
        if name is not None:
            clean_name = self._clean_name(name, label="Client", code_prefix="CLIENT")
            self._ensure_unique_name(
                clean_name,
                self._client_repo.list_by_workspace(client.workspace_id),
                label="Client",
                code_prefix="CLIENT",
                ignore_id=client.id,
            )
            client.name = clean_name
        if currency is not None:
            client.currency = self._validate_currency(currency)
        if active is not None:
            client.active = bool(active)
        if note is not None:
            client.note = note.strip() or None
        client.updated_at = utc_now()
        try:
            self._client_repo.update(client)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        domain_events.clients_changed.emit(client.id)
        return client

    def delete_client(self, client_id: str) -> None:
        """Delete a client and detach it from its projects."""
        require_capability(self._user_session, Capability.CLIENTS_DELETE, operation_label="delete client")
        client = self._require_client(client_id)
        try:
            for project in self._project_repo.list_by_workspace(client.workspace_id):
                if project.client_id == client_id:
                    project.client_id = None
                    project.updated_at = utc_now()
                    self._project_repo.update(project)
            self._client_repo.delete(client_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        domain_events.clients_changed.emit(client_id)

    def list_clients(self, workspace_id: str) -> List[Client]:
        require_capability(self._user_session, Capability.CLIENTS_READ, operation_label="list clients")
        return sorted(
            self._client_repo.list_by_workspace(workspace_id),
            key=lambda client: client.name.casefold(),
        )

    @staticmethod
    def _validate_currency(currency: str) -> str:
        value = (currency or "").strip().upper()
        if not value:
            raise ValidationError("Currency is required.", code="CLIENT_CURRENCY_REQUIRED")
        return value

    def _require_client(self, client_id: str) -> Client:
        client = self._client_repo.get(client_id)
        if not client:
            raise NotFoundError("Client not found.", code="CLIENT_NOT_FOUND")
        return client


__all__ = ["ClientService"]

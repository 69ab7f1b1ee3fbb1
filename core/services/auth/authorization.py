from __future__ import annotations

from typing import Sequence

from core.exceptions import PermissionDeniedError
from core.services.auth.session import UserSessionContext


def require_capability(
    user_session: UserSessionContext | None,
    capability: str,
    *,
    operation_label: str,
) -> None:
    if user_session is None:
        return
    if user_session.has_capability(capability):
        return
    raise PermissionDeniedError(
        f"Permission denied for {operation_label}. Missing '{capability}'.",
    )


def require_any_capability(
    user_session: UserSessionContext | None,
    capabilities: Sequence[str],
    *,
    operation_label: str,
) -> None:
    if user_session is None:
        return
    if user_session.has_any_capability(capabilities):
        return
    missing = "', '".join(capabilities)
    raise PermissionDeniedError(
        f"Permission denied for {operation_label}. Missing one of '{missing}'.",
    )


def current_user_id(user_session: UserSessionContext | None) -> str | None:
    principal = user_session.principal if user_session is not None else None
    return principal.user_id if principal is not None else None


__all__ = ["require_capability", "require_any_capability", "current_user_id"]

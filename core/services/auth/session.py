from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable

from core.domain.enums import UserRole


@dataclass(frozen=True)
class UserSessionPrincipal:
    user_id: str
    workspace_id: str
    name: str
    email: str
    role: UserRole
    capabilities: FrozenSet[str]


class UserSessionContext:
    def __init__(self):
        self._principal: UserSessionPrincipal | None = None

    @property
    def principal(self) -> UserSessionPrincipal | None:
        return self._principal

    def set_principal(self, principal: UserSessionPrincipal) -> None:
        self._principal = principal

    def clear(self) -> None:
        self._principal = None

    def is_authenticated(self) -> bool:
        return self._principal is not None

    def has_capability(self, capability: str) -> bool:
        # No principal means a system context (bootstrap, scripts).
        if self._principal is None:
            return True
        return capability in self._principal.capabilities

    def has_any_capability(self, capabilities: Iterable[str]) -> bool:
        return any(self.has_capability(code) for code in capabilities)


__all__ = ["UserSessionPrincipal", "UserSessionContext"]

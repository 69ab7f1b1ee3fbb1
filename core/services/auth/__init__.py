from core.services.auth.policy import (
    Capability,
    get_capabilities_for_role,
    has_all,
    has_any,
    has_capability,
)
from core.services.auth.service import AuthService
from core.services.auth.session import UserSessionContext, UserSessionPrincipal

__all__ = [
    "AuthService",
    "Capability",
    "UserSessionContext",
    "UserSessionPrincipal",
    "get_capabilities_for_role",
    "has_all",
    "has_any",
    "has_capability",
]

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from core.domain.enums import UserRole


class Capability:
    TIME_ENTRIES_OWN_READ = "time_entries:own:read"
    TIME_ENTRIES_OWN_WRITE = "time_entries:own:write"
    TIME_ENTRIES_ASSIGNED_PROJECTS_READ = "time_entries:assigned_projects:read"
    TIME_ENTRIES_ALL_READ = "time_entries:all:read"
    TIME_ENTRIES_ALL_WRITE = "time_entries:all:write"

    PROJECTS_READ = "projects:read"
    PROJECTS_WRITE = "projects:write"
    PROJECTS_DELETE = "projects:delete"
    PROJECTS_MANAGE_MEMBERS = "projects:manage_members"

    CLIENTS_READ = "clients:read"
    CLIENTS_WRITE = "clients:write"
    CLIENTS_DELETE = "clients:delete"

    TAGS_READ = "tags:read"
    TAGS_WRITE = "tags:write"
    TAGS_DELETE = "tags:delete"

    CATEGORIES_READ = "categories:read"
    CATEGORIES_WRITE = "categories:write"

    TEAM_READ = "team:read"
    TEAM_WRITE = "team:write"
    TEAM_INVITE = "team:invite"
    TEAM_CHANGE_ROLE = "team:change_role"

    REPORTS_OWN = "reports:own"
    REPORTS_ASSIGNED_PROJECTS = "reports:assigned_projects"
    REPORTS_ALL = "reports:all"

    SETTINGS_OWN = "settings:own"
    SETTINGS_WORKSPACE = "settings:workspace"


ALL_CAPABILITIES: frozenset[str] = frozenset(
    value for key, value in vars(Capability).items() if key.isupper()
)

_MANAGER_CAPABILITIES = frozenset(
    {
        Capability.TIME_ENTRIES_OWN_READ,
        Capability.TIME_ENTRIES_OWN_WRITE,
        Capability.TIME_ENTRIES_ASSIGNED_PROJECTS_READ,
        Capability.PROJECTS_READ,
        Capability.PROJECTS_MANAGE_MEMBERS,
        Capability.CLIENTS_READ,
        Capability.TAGS_READ,
        Capability.CATEGORIES_READ,
        Capability.TEAM_READ,
        Capability.REPORTS_OWN,
        Capability.REPORTS_ASSIGNED_PROJECTS,
        Capability.SETTINGS_OWN,
    }
)

_EMPLOYEE_CAPABILITIES = frozenset(
    {
        Capability.TIME_ENTRIES_OWN_READ,
        Capability.TIME_ENTRIES_OWN_WRITE,
        Capability.PROJECTS_READ,
        Capability.TAGS_READ,
        Capability.CATEGORIES_READ,
        Capability.REPORTS_OWN,
        Capability.SETTINGS_OWN,
    }
)

# ADMIN is always the full universe, never a hand-maintained list.
_ROLE_CAPABILITIES: Mapping[UserRole, frozenset[str]] = MappingProxyType(
    {
        UserRole.ADMIN: ALL_CAPABILITIES,
        UserRole.MANAGER: _MANAGER_CAPABILITIES,
        UserRole.EMPLOYEE: _EMPLOYEE_CAPABILITIES,
    }
)

LOWEST_PRIVILEGE_ROLE = UserRole.EMPLOYEE


def coerce_role(role: UserRole | str | None) -> UserRole:
    """Normalize a role value; anything unrecognized fails closed to EMPLOYEE."""
    if isinstance(role, UserRole):
        return role
    try:
        return UserRole(str(role or "").strip().upper())
    except ValueError:
        return LOWEST_PRIVILEGE_ROLE


def get_capabilities_for_role(role: UserRole | str | None) -> frozenset[str]:
    return _ROLE_CAPABILITIES[coerce_role(role)]


def has_capability(role: UserRole | str | None, capability: str) -> bool:
    return capability in get_capabilities_for_role(role)


def has_any(role: UserRole | str | None, capabilities: Iterable[str]) -> bool:
    """True when at least one capability is granted; an empty list grants nothing."""
    granted = get_capabilities_for_role(role)
    return any(code in granted for code in capabilities)


def has_all(role: UserRole | str | None, capabilities: Iterable[str]) -> bool:
    """True when every capability is granted; an empty list is vacuously true."""
    granted = get_capabilities_for_role(role)
    return all(code in granted for code in capabilities)


__all__ = [
    "Capability",
    "ALL_CAPABILITIES",
    "LOWEST_PRIVILEGE_ROLE",
    "coerce_role",
    "get_capabilities_for_role",
    "has_capability",
    "has_any",
    "has_all",
]

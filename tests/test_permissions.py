from __future__ import annotations

import pytest

from core.exceptions import BusinessRuleError
from core.models import UserRole
from core.services.auth.authorization import require_any_capability, require_capability
from core.services.auth.policy import (
    ALL_CAPABILITIES,
    Capability,
    coerce_role,
    get_capabilities_for_role,
    has_all,
    has_any,
    has_capability,
)
from core.services.auth.session import UserSessionContext, UserSessionPrincipal


def _session_for(role: UserRole) -> UserSessionContext:
    ctx = UserSessionContext()
    ctx.set_principal(
        UserSessionPrincipal(
            user_id="u-1",
            workspace_id="w-1",
            name="Anna",
            email="anna@example.com",
            role=role,
            capabilities=get_capabilities_for_role(role),
        )
    )
    return ctx


def test_admin_holds_every_capability():
    assert get_capabilities_for_role(UserRole.ADMIN) == ALL_CAPABILITIES
    for capability in ALL_CAPABILITIES:
        assert has_capability(UserRole.ADMIN, capability)


def test_role_hierarchy_is_nested():
    admin = get_capabilities_for_role(UserRole.ADMIN)
    manager = get_capabilities_for_role(UserRole.MANAGER)
    employee = get_capabilities_for_role(UserRole.EMPLOYEE)

    assert manager <= admin
    assert employee <= manager
    assert employee < manager < admin


def test_employee_cannot_read_other_members_entries():
    assert has_capability(UserRole.EMPLOYEE, Capability.TIME_ENTRIES_OWN_READ)
    assert not has_capability(UserRole.EMPLOYEE, Capability.TIME_ENTRIES_ASSIGNED_PROJECTS_READ)
    assert not has_capability(UserRole.EMPLOYEE, Capability.TIME_ENTRIES_ALL_READ)
    assert has_capability(UserRole.MANAGER, Capability.TIME_ENTRIES_ASSIGNED_PROJECTS_READ)
    assert not has_capability(UserRole.MANAGER, Capability.TIME_ENTRIES_ALL_WRITE)


def test_role_strings_are_accepted_case_insensitively():
    assert coerce_role("manager") == UserRole.MANAGER
    assert has_capability("ADMIN", Capability.SETTINGS_WORKSPACE)


@pytest.mark.parametrize("role", ["", None, "owner", "superuser"])
def test_unknown_roles_fall_back_to_employee(role):
    assert coerce_role(role) == UserRole.EMPLOYEE
    assert get_capabilities_for_role(role) == get_capabilities_for_role(UserRole.EMPLOYEE)


def test_unknown_capability_is_never_granted():
    assert not has_capability(UserRole.ADMIN, "time_entries:everything")


def test_has_any_and_has_all():
    pair = [Capability.TAGS_READ, Capability.TAGS_WRITE]
    assert has_any(UserRole.EMPLOYEE, pair)
    assert not has_all(UserRole.EMPLOYEE, pair)
    assert has_all(UserRole.ADMIN, pair)


def test_empty_capability_list_conventions():
    for role in UserRole:
        assert has_any(role, []) is False
        assert has_all(role, []) is True


def test_capability_sets_are_immutable():
    caps = get_capabilities_for_role(UserRole.EMPLOYEE)
    with pytest.raises(AttributeError):
        caps.add(Capability.REPORTS_ALL)  # type: ignore[attr-defined]
    assert Capability.REPORTS_ALL not in get_capabilities_for_role(UserRole.EMPLOYEE)


def test_require_capability_raises_permission_denied():
    ctx = _session_for(UserRole.EMPLOYEE)
    with pytest.raises(BusinessRuleError, match="Permission denied") as exc:
        require_capability(ctx, Capability.PROJECTS_WRITE, operation_label="create project")
    assert exc.value.code == "PERMISSION_DENIED"

    require_capability(ctx, Capability.TIME_ENTRIES_OWN_WRITE, operation_label="create entry")


def test_require_any_capability_accepts_one_match():
    ctx = _session_for(UserRole.MANAGER)
    require_any_capability(
        ctx,
        [Capability.REPORTS_ALL, Capability.REPORTS_ASSIGNED_PROJECTS],
        operation_label="view reports",
    )
    with pytest.raises(BusinessRuleError, match="Permission denied"):
        require_any_capability(
            ctx,
            [Capability.REPORTS_ALL, Capability.SETTINGS_WORKSPACE],
            operation_label="view workspace reports",
        )


def test_missing_principal_is_system_context():
    ctx = UserSessionContext()
    assert not ctx.is_authenticated()
    assert ctx.has_capability(Capability.SETTINGS_WORKSPACE)
    require_capability(ctx, Capability.PROJECTS_DELETE, operation_label="delete project")
    require_capability(None, Capability.PROJECTS_DELETE, operation_label="delete project")


def test_every_capability_is_granted_to_some_role():
    granted = set().union(*(get_capabilities_for_role(role) for role in UserRole))
    assert granted == ALL_CAPABILITIES
    assert len(ALL_CAPABILITIES) == 26


def test_categories_are_readable_by_every_role_but_writable_by_admin_only():
    for role in UserRole:
        assert has_capability(role, Capability.CATEGORIES_READ)
    assert has_capability(UserRole.ADMIN, Capability.CATEGORIES_WRITE)
    assert not has_capability(UserRole.MANAGER, Capability.CATEGORIES_WRITE)
    assert not has_capability(UserRole.EMPLOYEE, Capability.CATEGORIES_WRITE)


def test_workspace_settings_are_admin_only():
    assert has_capability(UserRole.ADMIN, Capability.SETTINGS_WORKSPACE)
    for role in (UserRole.MANAGER, UserRole.EMPLOYEE):
        assert has_capability(role, Capability.SETTINGS_OWN)
        assert not has_capability(role, Capability.SETTINGS_WORKSPACE)

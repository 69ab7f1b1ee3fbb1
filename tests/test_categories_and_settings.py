from __future__ import annotations

import pytest

from core.events.domain_events import domain_events
from core.exceptions import AuthenticationRequiredError, BusinessRuleError, NotFoundError, ValidationError
from core.models import Theme, UserRole


# ---------------------------------------------------------------- categories


def test_category_lifecycle(services, workspace_id):
    cs = services["category_service"]
    seen: list[str] = []
    domain_events.categories_changed.connect(seen.append)

    research = cs.create_category(workspace_id, "  Research ")
    assert (research.name, research.color) == ("Research", "#3B82F6")
    with pytest.raises(ValidationError) as exc:
        cs.create_category(workspace_id, "RESEARCH")
    assert exc.value.code == "CATEGORY_NAME_DUPLICATE"
    with pytest.raises(ValidationError) as exc:
        cs.create_category(workspace_id, "Support", color="green")
    assert exc.value.code == "CATEGORY_INVALID_COLOR"

    cs.create_category(workspace_id, "Admin work", color="#22c55e")
    cs.update_category(research.id, name="Development")

    assert [c.name for c in cs.list_categories(workspace_id)] == ["Admin work", "Development"]
    assert [c.name for c in cs.list_categories(workspace_id, search="DEV")] == ["Development"]
    assert seen[0] == research.id
    with pytest.raises(NotFoundError) as exc:
        cs.update_category("missing", name="X")
    assert exc.value.code == "CATEGORY_NOT_FOUND"


def test_entries_carry_a_category(services, workspace_id):
    cs = services["category_service"]
    tes = services["time_entry_service"]
    dev = cs.create_category(workspace_id, "Development")
    ops = cs.create_category(workspace_id, "Operations")

    first = tes.create_entry("Feature", "2026-02-09", "09:00", "10:00", category_id=dev.id)
    copy = tes.duplicate_entry(first.id)
    other = tes.create_entry("Deploy", "2026-02-09", "10:00", "10:30", category_id=ops.id)

    assert copy.category_id == dev.id
    assert cs.entry_counts(workspace_id) == {dev.id: 2, ops.id: 1}

    tes.update_entry(other.id, category_id="")
    assert tes.get_entry(other.id).category_id is None

    with pytest.raises(NotFoundError) as exc:
        tes.create_entry("Feature", "2026-02-09", "09:00", "10:00", category_id="missing")
    assert exc.value.code == "CATEGORY_NOT_FOUND"


def test_deleting_category_detaches_entries(services, workspace_id):
    cs = services["category_service"]
    tes = services["time_entry_service"]
    dev = cs.create_category(workspace_id, "Development")
    entry = tes.create_entry("Feature", "2026-02-09", "09:00", "10:00", category_id=dev.id)

    cs.delete_category(dev.id)

    assert cs.list_categories(workspace_id) == []
    assert tes.get_entry(entry.id).category_id is None
    assert cs.entry_counts(workspace_id) == {}


@pytest.mark.parametrize("role", [UserRole.MANAGER, UserRole.EMPLOYEE])
def test_only_admins_write_categories(services, workspace_id, member_factory, login, role):
    cs = services["category_service"]
    cs.create_category(workspace_id, "Development")
    member = member_factory("member@example.com", role=role)
    login(member.email)

    assert [c.name for c in cs.list_categories(workspace_id)] == ["Development"]
    with pytest.raises(BusinessRuleError) as exc:
        cs.create_category(workspace_id, "Support")
    assert exc.value.code == "PERMISSION_DENIED"


# ---------------------------------------------------------------- user settings


def test_settings_default_until_saved(services, workspace_id):
    settings = services["settings_service"].get_user_settings()

    assert settings.user_id == services["user_session"].principal.user_id
    assert settings.default_project_id is None
    assert settings.default_tag_ids == []
    assert (settings.default_start_time, settings.default_duration_minutes) == ("09:00", 60)
    assert settings.theme == Theme.SYSTEM


def test_update_user_settings_persists(services, workspace_id):
    ss = services["settings_service"]
    project = services["project_service"].create_project(workspace_id, "Website")
    tag = services["tag_service"].create_tag(workspace_id, "planning")

    ss.update_user_settings(default_project_id=project.id, default_tag_ids=[tag.id], theme="DARK")
    ss.update_user_settings(default_start_time="08:30", default_duration_minutes=45)

    stored = ss.get_user_settings()
    assert stored.default_project_id == project.id
    assert stored.default_tag_ids == [tag.id]
    assert (stored.default_start_time, stored.default_duration_minutes) == ("08:30", 45)
    assert stored.theme == Theme.DARK

    ss.update_user_settings(default_project_id="")
    assert ss.get_user_settings().default_project_id is None


@pytest.mark.parametrize(
    "kwargs, error, code",
    [
        ({"default_duration_minutes": 0}, ValidationError, "SETTINGS_INVALID_DURATION"),
        ({"default_start_time": "9:00"}, ValidationError, "SETTINGS_INVALID_START_TIME"),
        ({"theme": "blue"}, ValidationError, "SETTINGS_INVALID_THEME"),
        ({"default_project_id": "missing"}, NotFoundError, "PROJECT_NOT_FOUND"),
        ({"default_tag_ids": ["missing"]}, NotFoundError, "TAG_NOT_FOUND"),
    ],
)
def test_invalid_user_settings_are_rejected(services, workspace_id, kwargs, error, code):
    ss = services["settings_service"]
    with pytest.raises(error) as exc:
        ss.update_user_settings(**kwargs)
    assert exc.value.code == code
    assert ss.get_user_settings().default_duration_minutes == 60


def test_member_settings_are_private(services, workspace_id, member_factory, login):
    ss = services["settings_service"]
    eve = member_factory("eve@example.com")
    bob = member_factory("bob@example.com")

    login(eve.email)
    ss.update_user_settings(default_duration_minutes=30)
    with pytest.raises(BusinessRuleError) as exc:
        ss.update_user_settings(user_id=bob.id, default_duration_minutes=15)
    assert exc.value.code == "PERMISSION_DENIED"

    login("admin@example.com")
    assert ss.get_user_settings(eve.id).default_duration_minutes == 30


def test_settings_need_a_signed_in_member(services):
    with pytest.raises(AuthenticationRequiredError):
        services["settings_service"].get_user_settings()


# ---------------------------------------------------------------- entry defaults


def test_new_entry_falls_back_to_settings(services, workspace_id):
    services["settings_service"].update_user_settings(default_start_time="08:30", default_duration_minutes=45)
    tes = services["time_entry_service"]

    standup = tes.create_entry("Standup", "2026-02-09")
    assert (standup.start_time, standup.end_time, standup.duration_minutes) == ("08:30", "09:15", 45)

    afternoon = tes.create_entry("Review", "2026-02-09", "13:00")
    assert (afternoon.end_time, afternoon.duration_minutes) == ("13:45", 45)

    short = tes.create_entry("Call", "2026-02-09", "15:00", duration_minutes=20)
    assert (short.end_time, short.duration_minutes) == ("15:20", 20)


def test_new_entry_without_settings_uses_builtin_defaults(services, workspace_id):
    entry = services["time_entry_service"].create_entry("Planning", "2026-02-09")
    assert (entry.start_time, entry.end_time, entry.duration_minutes) == ("09:00", "10:00", 60)


def test_timesheet_cell_starts_at_default_start_time(services, workspace_id):
    project = services["project_service"].create_project(workspace_id, "Website")
    services["settings_service"].update_user_settings(default_start_time="07:00")

    entry = services["time_entry_service"].add_timesheet_time(project.id, "2026-02-10", 90)

    assert (entry.start_time, entry.end_time, entry.duration_minutes) == ("07:00", "08:30", 90)


# ---------------------------------------------------------------- workspace settings


def test_admin_updates_workspace(services, workspace_id):
    seen: list[str] = []
    domain_events.settings_changed.connect(seen.append)

    services["settings_service"].update_workspace(
        workspace_id, name=" Pirxey ", currency="eur", timezone="Europe/Berlin", week_starts_on=6
    )

    workspace = services["member_service"].get_workspace(workspace_id)
    assert (workspace.name, workspace.currency, workspace.timezone) == ("Pirxey", "EUR", "Europe/Berlin")
    assert workspace.week_starts_on == 6
    assert seen == [workspace_id]


@pytest.mark.parametrize(
    "kwargs, code",
    [
        ({"name": "  "}, "WORKSPACE_NAME_EMPTY"),
        ({"currency": ""}, "WORKSPACE_CURRENCY_REQUIRED"),
        ({"timezone": " "}, "WORKSPACE_TIMEZONE_REQUIRED"),
        ({"week_starts_on": 7}, "WORKSPACE_INVALID_WEEK_START"),
    ],
)
def test_invalid_workspace_settings_are_rejected(services, workspace_id, kwargs, code):
    with pytest.raises(ValidationError) as exc:
        services["settings_service"].update_workspace(workspace_id, **kwargs)
    assert exc.value.code == code


def test_workspace_settings_are_admin_only(services, workspace_id, member_factory, login):
    manager = member_factory("max@example.com", role=UserRole.MANAGER)
    login(manager.email)

    with pytest.raises(BusinessRuleError) as exc:
        services["settings_service"].update_workspace(workspace_id, name="Mine")
    assert exc.value.code == "PERMISSION_DENIED"

    login("admin@example.com")
    with pytest.raises(NotFoundError):
        services["settings_service"].update_workspace("missing", name="Mine")

from __future__ import annotations

from datetime import date

import pytest

from core.exceptions import BusinessRuleError, ValidationError
from core.models import BillableFilter, GroupByDimension, TimeEntry
from core.services.reporting import ReportFilter
from core.services.reporting.models import NO_CLIENT_LABEL, NO_PROJECT_LABEL, NO_TEAM_LABEL


@pytest.fixture
def data(services, workspace_id, member_factory):
    ps = services["project_service"]
    cs = services["client_service"]
    ts = services["tag_service"]
    ms = services["member_service"]
    tes = services["time_entry_service"]

    acme = cs.create_client(workspace_id, "Acme")
    web = ps.create_project(workspace_id, "Website", client_id=acme.id, billable_by_default=True)
    internal = ps.create_project(workspace_id, "Internal", color="#10B981")
    meeting = ts.create_tag(workspace_id, "meeting")

    eve = member_factory("eve@example.com", name="Eve")
    bob = member_factory("bob@example.com", name="Bob")
    backend = ms.create_team(workspace_id, "Backend")
    frontend = ms.create_team(workspace_id, "Frontend")
    ms.add_to_team(eve.id, backend.id)
    ms.add_to_team(eve.id, frontend.id)
    ms.add_to_team(bob.id, backend.id)

    entries = [
        tes.create_entry("Eve web", "2026-02-09", "09:00", "11:00", project_id=web.id, user_id=eve.id,
                         tag_ids=[meeting.id]),
        tes.create_entry("Bob internal", "2026-02-10", "09:00", "09:30", project_id=internal.id, user_id=bob.id),
        tes.create_entry("Bob loose", "2026-02-12", "13:00", "14:00", user_id=bob.id),
        tes.create_entry("Admin web", "2026-02-20", "08:00", "08:45", project_id=web.id),
    ]
    return {
        "acme": acme,
        "web": web,
        "internal": internal,
        "meeting": meeting,
        "eve": eve,
        "bob": bob,
        "backend": backend,
        "frontend": frontend,
        "entries": entries,
    }


def _descriptions(entries):
    return [entry.description for entry in entries]


def test_report_entries_are_newest_first(services, data):
    assert _descriptions(services["reporting_service"].report_entries()) == [
        "Admin web",
        "Bob loose",
        "Bob internal",
        "Eve web",
    ]


def test_report_filters(services, data):
    reporting = services["reporting_service"]

    in_week = reporting.report_entries(ReportFilter(start_date="2026-02-09", end_date="2026-02-15"))
    assert len(in_week) == 3
    assert _descriptions(reporting.report_entries(ReportFilter(project_id=data["web"].id))) == [
        "Admin web",
        "Eve web",
    ]
    assert _descriptions(reporting.report_entries(ReportFilter(member_id=data["bob"].id))) == [
        "Bob loose",
        "Bob internal",
    ]
    assert len(reporting.report_entries(ReportFilter(team_id=data["backend"].id))) == 3
    assert _descriptions(reporting.report_entries(ReportFilter(tag_id=data["meeting"].id))) == ["Eve web"]
    assert _descriptions(reporting.report_entries(ReportFilter(billable=BillableFilter.NON_BILLABLE))) == [
        "Bob loose",
        "Bob internal",
    ]


def test_summarize_totals(services, data):
    totals = services["reporting_service"].summarize(data["entries"])
    assert totals.entry_count == 4
    assert totals.total_minutes == 120 + 30 + 60 + 45
    assert totals.billable_minutes == 165
    assert totals.non_billable_minutes == 90


def test_group_by_project_with_no_project_bucket(services, data):
    grouped = services["reporting_service"].group_entries(data["entries"], GroupByDimension.PROJECT)

    assert [(g.label, g.total_minutes) for g in grouped.groups] == [
        ("Internal", 30),
        (NO_PROJECT_LABEL, 60),
        ("Website", 165),
    ]
    assert grouped.groups[0].color == "#10B981"


def test_group_by_client_sorted_by_duration_desc(services, data):
    grouped = services["reporting_service"].group_entries(
        data["entries"], "client", sort_by="duration", order="desc"
    )
    assert [(g.label, g.entry_count) for g in grouped.groups] == [("Acme", 2), (NO_CLIENT_LABEL, 2)]


def test_group_by_member(services, data):
    grouped = services["reporting_service"].group_entries(data["entries"], GroupByDimension.MEMBER)
    assert [(g.label, g.total_minutes) for g in grouped.groups] == [
        ("Administrator", 45),
        ("Bob", 90),
        ("Eve", 120),
    ]


def test_group_by_team_counts_multi_team_members_in_each(services, data):
    grouped = services["reporting_service"].group_entries(data["entries"], GroupByDimension.TEAM)
    assert [(g.label, g.total_minutes) for g in grouped.groups] == [
        ("Backend", 210),
        ("Frontend", 120),
        (NO_TEAM_LABEL, 45),
    ]


def test_group_none_and_invalid_sort(services, data):
    reporting = services["reporting_service"]
    assert reporting.group_entries(data["entries"], GroupByDimension.NONE).groups == []
    with pytest.raises(ValidationError) as exc:
        reporting.group_entries(data["entries"], GroupByDimension.PROJECT, sort_by="colour")
    assert exc.value.code == "REPORT_SORT_INVALID"
    with pytest.raises(ValidationError):
        reporting.group_entries(data["entries"], GroupByDimension.PROJECT, order="up")


def test_weekly_timesheet(services, data):
    sheet = services["reporting_service"].weekly_timesheet(data["entries"], date(2026, 2, 11))

    assert sheet.days[0] == date(2026, 2, 9)
    assert sheet.days[-1] == date(2026, 2, 15)
    assert [(row.project_name, row.daily_minutes) for row in sheet.rows] == [
        ("Website", [120, 0, 0, 0, 0, 0, 0]),
        ("Internal", [0, 30, 0, 0, 0, 0, 0]),
    ]
    assert sheet.daily_totals == [120, 30, 0, 0, 0, 0, 0]
    assert sheet.total_minutes == 150


def test_weekly_timesheet_week_starting_sunday(services, data):
    sheet = services["reporting_service"].weekly_timesheet(data["entries"], date(2026, 2, 11), week_starts_on=6)
    assert sheet.days[0] == date(2026, 2, 8)
    assert sheet.rows[0].daily_minutes[1] == 120


def test_timesheet_skips_deleted_projects(services, data):
    orphan = TimeEntry.create(
        workspace_id="w", user_id="u", description="Orphan", date="2026-02-09",
        start_time="09:00", end_time="10:00", duration_minutes=60, project_id="deleted",
    )
    sheet = services["reporting_service"].weekly_timesheet([orphan], date(2026, 2, 9))
    assert sheet.rows == []


def test_employee_report_is_limited_to_own_entries(services, data, login):
    login("eve@example.com")
    assert _descriptions(services["reporting_service"].report_entries()) == ["Eve web"]


def test_report_requires_sign_in(services, data):
    services["auth_service"].sign_out()
    with pytest.raises(BusinessRuleError) as exc:
        services["reporting_service"].report_entries()
    assert exc.value.code == "AUTH_REQUIRED"


def test_export_lookups_describe(services, data, workspace_id):
    lookups = services["reporting_service"].export_lookups(workspace_id)
    row = lookups.describe(data["entries"][0])

    assert row["User"] == "Eve"
    assert row["Teams"] == "Backend; Frontend"
    assert row["Project"] == "Website"
    assert row["Client"] == "Acme"
    assert row["Tags"] == "meeting"
    assert row["Duration"] == 120
    assert row["Billable"] is True

    loose = lookups.describe(data["entries"][2])
    assert (loose["Project"], loose["Client"], loose["Teams"]) == (NO_PROJECT_LABEL, NO_CLIENT_LABEL, "Backend")

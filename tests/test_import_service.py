from __future__ import annotations

import pytest

from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError
from core.services.importing import generate_csv_template
from core.services.importing.columns import CSV_IMPORT_HEADERS
from core.services.importing.models import CsvStatus

HEADER = ",".join(CSV_IMPORT_HEADERS)


@pytest.fixture
def catalog(services, workspace_id):
    ps = services["project_service"]
    ts = services["tag_service"]
    dashboard = ps.create_project(workspace_id, "Pirxey Dashboard")
    secret = ps.create_project(workspace_id, "Secret R&D", is_public=False)
    meeting = ts.create_tag(workspace_id, "spotkanie")
    planning = ts.create_tag(workspace_id, "planning")
    return {"dashboard": dashboard, "secret": secret, "meeting": meeting, "planning": planning}


def test_template_imports_as_one_entry(services, catalog):
    imports = services["import_service"]
    preview, created = imports.import_text(generate_csv_template())

    assert preview.valid
    assert len(created) == 1
    stored = services["time_entry_service"].list_entries()
    assert [entry.id for entry in stored] == [created[0].id]
    assert stored[0].project_id == catalog["dashboard"].id
    assert stored[0].tag_ids == [catalog["meeting"].id, catalog["planning"].id]
    assert stored[0].duration_minutes == 90
    assert stored[0].billable is True


def test_empty_and_header_only_files_are_rejected(services, catalog):
    imports = services["import_service"]

    empty = imports.preview("")
    assert empty.status == CsvStatus.EMPTY
    assert not empty.valid
    assert empty.result.errors[0].row == 1

    header_only = imports.preview(HEADER + "\n")
    assert header_only.status == CsvStatus.HEADER_ONLY
    assert not header_only.valid
    assert len(header_only.result.errors) == 1


def test_missing_column_halts_before_row_validation(services, catalog):
    header = ",".join(name for name in CSV_IMPORT_HEADERS if name != "Tags")
    text = header + "\n,Nonexistent Project,bad-date,xx,yy,No\n"

    preview = services["import_service"].preview(text)

    assert not preview.valid
    assert len(preview.result.errors) == 1
    assert preview.result.errors[0].field == "Header"
    assert "Tags" in preview.result.errors[0].message


def test_invalid_batch_writes_nothing(services, catalog):
    text = "\n".join(
        [
            HEADER,
            "Standup,Pirxey Dashboard,2026-02-09,09:00,09:15,,No",
            "Research,Nonexistent Project,2026-02-09,10:00,11:00,,No",
        ]
    )
    imports = services["import_service"]
    preview, created = imports.import_text(text)

    assert not preview.valid
    assert created == []
    assert [(e.row, e.field) for e in preview.result.errors] == [(3, "Project")]
    assert services["time_entry_service"].list_entries() == []

    with pytest.raises(BusinessRuleError) as exc:
        imports.commit(preview.result)
    assert exc.value.code == "IMPORT_INVALID"


def test_private_project_is_unknown_to_unassigned_employee(services, catalog, member_factory, login):
    member_factory("eve@example.com")
    login("eve@example.com")
    text = "\n".join([HEADER, "Prototype,Secret R&D,2026-02-09,09:00,10:00,,No"])

    preview = services["import_service"].preview(text)

    assert not preview.valid
    assert preview.result.errors[0].field == "Project"


def test_employee_import_is_owned_by_the_importer(services, catalog, member_factory, login):
    eve = member_factory("eve@example.com")
    login("eve@example.com")
    text = "\n".join(
        [
            HEADER,
            '"Review, part 1",Pirxey Dashboard,2026-02-10,22:00,02:00,PLANNING,yes',
            "Standup,,2026-02-11,09:00,09:15,,",
        ]
    )
    seen: list[str] = []
    domain_events.time_entries_changed.connect(seen.append)

    preview, created = services["import_service"].import_text(text)

    assert preview.valid
    assert [entry.user_id for entry in created] == [eve.id, eve.id]
    assert created[0].description == "Review, part 1"
    assert created[0].duration_minutes == 240
    assert created[0].tag_ids == [catalog["planning"].id]
    assert created[1].project_id is None
    assert created[1].billable is False
    assert seen == [created[0].workspace_id]


def test_import_requires_sign_in(services, catalog):
    services["auth_service"].sign_out()
    with pytest.raises(BusinessRuleError) as exc:
        services["import_service"].preview(generate_csv_template())
    assert exc.value.code == "AUTH_REQUIRED"

from __future__ import annotations

import pytest
from openpyxl import load_workbook
from sqlalchemy import create_engine, inspect

import main
from core.services.importing import generate_csv_template
from infra.migrate import run_migrations
from infra.services import build_service_graph


@pytest.fixture
def graph(session):
    graph = build_service_graph(session)
    graph.auth_service.sign_in("admin@example.com")
    graph.project_service.create_project(graph.user_session.principal.workspace_id, "Pirxey Dashboard")
    graph.tag_service.create_tag(graph.user_session.principal.workspace_id, "spotkanie")
    graph.tag_service.create_tag(graph.user_session.principal.workspace_id, "planning")
    return graph


def _run(graph, *argv):
    args = main._build_parser().parse_args(list(argv))
    return main._COMMANDS[args.command](graph, args)


def test_user_flag_defaults_to_admin():
    args = main._build_parser().parse_args(["timesheet"])
    assert args.user == "admin@example.com"
    assert args.week is None


def test_template_then_dry_run_import(graph, tmp_path, capsys):
    target = tmp_path / "template.csv"
    assert _run(graph, "template", str(target)) == main.EXIT_OK

    assert _run(graph, "import", str(target), "--dry-run") == main.EXIT_OK
    out = capsys.readouterr().out
    assert "Pirxey Dashboard" in out
    assert "Dry run" in out
    assert graph.time_entry_service.list_entries() == []


def test_import_then_export_and_timesheet(graph, tmp_path, capsys):
    source = tmp_path / "week.csv"
    source.write_text(generate_csv_template(), encoding="utf-8")

    assert _run(graph, "import", str(source)) == main.EXIT_OK
    assert len(graph.time_entry_service.list_entries()) == 1

    report = tmp_path / "report.xlsx"
    assert _run(graph, "export", str(report), "--group-by", "project") == main.EXIT_OK
    ws = load_workbook(report).active
    assert ws.cell(2, 1).value == "[GROUP] Project: Pirxey Dashboard"

    assert _run(graph, "timesheet", "--week", "2026-02-07") == main.EXIT_OK
    out = capsys.readouterr().out
    assert "Pirxey Dashboard" in out
    assert "1:30" in out


def test_rejected_import_exit_code(graph, tmp_path, capsys):
    source = tmp_path / "bad.csv"
    source.write_text(generate_csv_template().replace("Pirxey Dashboard", "Nonexistent Project"), encoding="utf-8")

    assert _run(graph, "import", str(source)) == main.EXIT_REJECTED
    assert "Row 2 [Project]" in capsys.readouterr().err
    assert graph.time_entry_service.list_entries() == []


def test_migrations_create_schema(tmp_path):
    db_url = f"sqlite:///{(tmp_path / 'tt.db').as_posix()}"
    run_migrations(db_url)

    engine = create_engine(db_url, future=True)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        entry_columns = {column["name"] for column in inspector.get_columns("time_entries")}
    finally:
        engine.dispose()
    assert {
        "workspaces",
        "users",
        "teams",
        "clients",
        "projects",
        "tags",
        "categories",
        "time_entries",
        "user_settings",
    } <= tables
    assert "category_id" in entry_columns

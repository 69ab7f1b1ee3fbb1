from __future__ import annotations

from core.services.importing.columns import CSV_IMPORT_HEADERS

TEMPLATE_FILENAME = "time-import-template.csv"

EXAMPLE_ROW: tuple[str, ...] = (
    "Sprint planning",
    "Pirxey Dashboard",
    "2026-02-07",
    "09:00",
    "10:30",
    "spotkanie; planning",
    "Yes",
)

# Free-text columns are always quoted in the template.
_QUOTED_COLUMNS = frozenset({0, 1, 5})


def generate_csv_template() -> str:
    header = ",".join(CSV_IMPORT_HEADERS)
    example = ",".join(
        _quote(value) if index in _QUOTED_COLUMNS else value
        for index, value in enumerate(EXAMPLE_ROW)
    )
    return "\n".join([header, example])


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


__all__ = ["TEMPLATE_FILENAME", "EXAMPLE_ROW", "generate_csv_template"]

from __future__ import annotations

from core.services.importing.csv_parser import BOM, parse_csv, split_csv_line, strip_bom
from core.services.importing.models import CsvStatus


def test_split_plain_line():
    assert split_csv_line("a,b,c") == ["a", "b", "c"]


def test_split_keeps_empty_fields():
    assert split_csv_line(",,") == ["", "", ""]
    assert split_csv_line("") == [""]


def test_split_quoted_comma_and_doubled_quote():
    assert split_csv_line('"Review, part 1","say ""hi""",x') == ["Review, part 1", 'say "hi"', "x"]


def test_split_does_not_trim():
    assert split_csv_line(" a , b ") == [" a ", " b "]


def test_split_unterminated_quote_is_lenient():
    assert split_csv_line('"open,field') == ["open,field"]


def test_strip_bom():
    assert strip_bom(BOM + "Description") == "Description"
    assert strip_bom("Description") == "Description"


def test_parse_empty_and_header_only():
    assert parse_csv("").status == CsvStatus.EMPTY
    assert parse_csv("\n\n  \n").status == CsvStatus.EMPTY

    parsed = parse_csv("Description,Project\n")
    assert parsed.status == CsvStatus.HEADER_ONLY
    assert parsed.headers == ["Description", "Project"]


def test_parse_rows_are_keyed_trimmed_and_numbered():
    text = BOM + "Description, Project ,Date\n  Standup , Acme ,2026-02-09\n\nReview,,2026-02-10\n"
    parsed = parse_csv(text)

    assert parsed.status == CsvStatus.OK
    assert parsed.headers == ["Description", "Project", "Date"]
    assert [row.row_number for row in parsed.rows] == [2, 3]
    assert parsed.rows[0].fields == {"Description": "Standup", "Project": "Acme", "Date": "2026-02-09"}
    assert parsed.rows[1].get("Project") == ""


def test_parse_short_rows_fill_missing_columns():
    parsed = parse_csv("Description,Project,Date\nOnly description\n")
    assert parsed.rows[0].fields == {"Description": "Only description", "Project": "", "Date": ""}


def test_parse_quoted_line_break_stays_in_one_row():
    parsed = parse_csv('Description,Project\n"Line one\nline two",Acme\n')
    assert len(parsed.rows) == 1
    assert parsed.rows[0].get("Description") == "Line one\nline two"
    assert parsed.rows[0].get("Project") == "Acme"


def test_parse_windows_line_endings():
    parsed = parse_csv("Description,Project\r\nStandup,Acme\r\n")
    assert parsed.rows[0].fields == {"Description": "Standup", "Project": "Acme"}

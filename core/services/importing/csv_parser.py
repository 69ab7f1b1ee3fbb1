from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from typing import List

from core.services.importing.columns import FIRST_DATA_ROW
from core.services.importing.models import CsvStatus, ImportRow

logger = logging.getLogger(__name__)

BOM = "\ufeff"


@dataclass(frozen=True)
class ParsedCsv:
    header_line: str
    headers: List[str]
    rows: List[ImportRow]

    @property
    def status(self) -> CsvStatus:
        if not self.headers:
            return CsvStatus.EMPTY
        if not self.rows:
            return CsvStatus.HEADER_ONLY
        return CsvStatus.OK


def strip_bom(text: str) -> str:
    return text[1:] if text.startswith(BOM) else text


def split_csv_line(line: str) -> List[str]:
    """Tokenize one line with RFC4180 quoting. Lenient: never raises."""
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if in_quotes:
            if char == '"':
                if i + 1 < len(line) and line[i + 1] == '"':
                    current.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(char)
        elif char == '"':
            in_quotes = True
        elif char == ",":
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    fields.append("".join(current))
    return fields


def parse_csv(text: str) -> ParsedCsv:
    """Parse import file text into header + keyed, trimmed data rows.

    Quoted fields may hold commas, doubled quotes and line breaks. Blank
    lines are dropped. The first data row is numbered 2 (row 1 is the header).
    """
    clean = strip_bom(text or "")
    header_line = next((line for line in clean.splitlines() if line.strip()), "")
    records = _read_records(clean)
    if not records:
        return ParsedCsv(header_line="", headers=[], rows=[])

    headers = [name.strip() for name in records[0]]
    rows: List[ImportRow] = []
    for index, values in enumerate(records[1:]):
        fields = {
            name: (values[col] if col < len(values) else "").strip()
            for col, name in enumerate(headers)
        }
        rows.append(ImportRow(row_number=index + FIRST_DATA_ROW, fields=fields))
    return ParsedCsv(header_line=header_line, headers=headers, rows=rows)


def _read_records(clean: str) -> List[List[str]]:
    try:
        records = list(csv.reader(io.StringIO(clean, newline="")))
    except csv.Error as exc:
        logger.warning("CSV reader failed (%s); falling back to line tokenizer", exc)
        records = [split_csv_line(line) for line in clean.splitlines()]
    return [record for record in records if any(cell.strip() for cell in record)]


__all__ = ["BOM", "ParsedCsv", "strip_bom", "split_csv_line", "parse_csv"]

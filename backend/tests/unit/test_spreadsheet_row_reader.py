"""Unit tests for the CSV / XLSX row reader."""

import io

import pytest
from openpyxl import Workbook

from intered.client.dialogs.import_students import ACCEPTED_EXTENSIONS
from intered.infrastructure.extractors.spreadsheet_row_reader import SpreadsheetRowReader


@pytest.fixture
def reader() -> SpreadsheetRowReader:
    return SpreadsheetRowReader()


def _xlsx(rows: list[list]) -> bytes:
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def test_supports_known_extensions(reader):
    assert reader.supports("students.CSV")
    assert reader.supports("students.xlsx")
    assert not reader.supports("students.docx")
    assert not reader.supports("students.xls")


def test_dialog_extensions_match_reader(reader):
    assert all(reader.supports(f"students{ext}") for ext in ACCEPTED_EXTENSIONS)


def test_csv_strips_bom_whitespace_and_blank_rows(reader):
    content = "\ufeffFirst Name , Email\n  Ana ,ana@example.com\n,\n".encode("utf-8")
    rows = reader.read_rows("s.csv", content, max_rows=10)
    assert rows == [{"First Name": "Ana", "Email": "ana@example.com"}]


def test_csv_falls_back_to_latin1(reader):
    content = "First Name,Email\nJos\xe9,jose@example.com\n".encode("latin-1")
    rows = reader.read_rows("s.csv", content, max_rows=10)
    assert rows[0]["First Name"] == "José"


def test_xlsx_reads_first_sheet(reader):
    content = _xlsx([["First Name", "Email", None], ["Ana", "ana@example.com", None], [None, None, None]])
    rows = reader.read_rows("s.xlsx", content, max_rows=10)
    assert rows == [{"First Name": "Ana", "Email": "ana@example.com"}]


def test_xlsx_row_limit(reader):
    content = _xlsx([["Email"]] + [[f"s{i}@example.com"] for i in range(5)])
    assert len(reader.read_rows("s.xlsx", content, max_rows=3)) == 3


def test_unknown_extension_raises(reader):
    with pytest.raises(ValueError):
        reader.read_rows("s.txt", b"hello", max_rows=10)

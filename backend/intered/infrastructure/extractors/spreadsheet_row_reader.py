"""Spreadsheet row reader: parses CSV and XLSX uploads into header-keyed rows."""

import csv
import io
import logging
import zipfile
from pathlib import Path

from intered.application.interfaces import RowReader

logger = logging.getLogger(__name__)


class SpreadsheetRowReader(RowReader):
    """Infrastructure adapter that reads tabular rows from uploaded files.

    Implements the RowReader interface using format-specific libraries:
    - CSV: built-in csv module (UTF-8 with optional BOM, latin-1 fallback)
    - XLSX: openpyxl (first worksheet only)
    """

    # Extension → handler method mapping
    _HANDLERS: dict[str, str] = {
        ".csv": "_read_csv",
        ".xlsx": "_read_xlsx",
    }

    def supports(self, filename: str) -> bool:
        return Path(filename).suffix.lower() in self._HANDLERS

    def read_rows(self, filename: str, content: bytes, max_rows: int) -> list[dict[str, str]]:
        suffix = Path(filename).suffix.lower()
        handler_name = self._HANDLERS.get(suffix)
        if handler_name is None:
            raise ValueError(f"Unsupported file type: {suffix or filename}")

        handler = getattr(self, handler_name)
        rows = handler(content, max_rows)
        logger.debug("Read %d rows from %s", len(rows), filename)
        return rows

    def _read_csv(self, content: bytes, max_rows: int) -> list[dict[str, str]]:
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError:
            text = content.decode("latin-1")

        rows: list[dict[str, str]] = []
        for row in csv.DictReader(io.StringIO(text)):
            if len(rows) >= max_rows:
                break
            cleaned = {
                (key or "").strip(): (value or "").strip()
                for key, value in row.items()
                if key is not None
            }
            if any(cleaned.values()):
                rows.append(cleaned)
        return rows

    def _read_xlsx(self, content: bytes, max_rows: int) -> list[dict[str, str]]:
        from openpyxl import load_workbook
        from openpyxl.utils.exceptions import InvalidFileException

        try:
            wb = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
            raise ValueError(f"Could not open workbook: {e}") from e
        try:
            ws = wb.worksheets[0]
            values = ws.iter_rows(values_only=True)
            header_row = next(values, None)
            if header_row is None:
                return []
            headers = [str(cell).strip() if cell is not None else "" for cell in header_row]

            rows: list[dict[str, str]] = []
            for raw in values:
                if len(rows) >= max_rows:
                    break
                cells = ["" if cell is None else str(cell).strip() for cell in raw]
                row = {
                    header: cells[i] if i < len(cells) else ""
                    for i, header in enumerate(headers)
                    if header
                }
                if any(row.values()):
                    rows.append(row)
            return rows
        finally:
            wb.close()

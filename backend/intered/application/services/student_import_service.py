"""Application service: bulk student import from CSV/Excel uploads.

Each data row of the upload lands in exactly one bucket:

    skipped   the email already exists (stored, or earlier in the same file)
    failed    the row does not validate as a StudentCreate
    imported  everything else

Pipeline stages:
    1. PARSE        → RowReader turns the file into header-keyed rows
    2. VALIDATE     → headers are normalised, each row validated
    3. DEDUPLICATE  → emails checked case-insensitively
    4. PERSIST      → new students written through the repository
"""

import re

from pydantic import ValidationError

from intered.application.interfaces import RowReader, StudentRepository
from intered.application.schemas import StudentCreate
from intered.domain.entities import ImportSummary, Student
from intered.domain.exceptions import UnsupportedImportFileError
from intered.infrastructure.logging.colored_logger import ImportLogger, ImportStage

plog = ImportLogger("StudentImportService")

_HEADER_NOISE = re.compile(r"[\s_\-]+")

# normalised header → StudentCreate field
_COLUMN_MAP: dict[str, str] = {
    "firstname": "first_name",
    "givenname": "first_name",
    "lastname": "last_name",
    "surname": "last_name",
    "familyname": "last_name",
    "email": "email",
    "emailaddress": "email",
    "phone": "phone",
    "phonenumber": "phone",
    "mobile": "phone",
    "status": "status",
    "stage": "stage",
    "program": "program",
    "programme": "program",
    "university": "university",
    "agent": "agent",
    "nationality": "nationality",
    "country": "nationality",
    "notes": "notes",
    "ishighpriority": "is_high_priority",
    "highpriority": "is_high_priority",
    "priority": "is_high_priority",
}


def normalize_header(header: str) -> str:
    """Lower-case a header and strip spaces, underscores and dashes."""
    return _HEADER_NOISE.sub("", header).lower()


def map_row(row: dict[str, str]) -> dict[str, str]:
    """Translate a raw spreadsheet row into StudentCreate field names.

    Unknown columns and empty cells are dropped so schema defaults apply.
    """
    mapped: dict[str, str] = {}
    for header, value in row.items():
        field = _COLUMN_MAP.get(normalize_header(header))
        if field is None or value == "":
            continue
        if field in ("status", "stage"):
            # "On Hold" / "pre-departure" → on_hold / pre_departure
            value = re.sub(r"[\s\-]+", "_", value.strip().lower())
        mapped.setdefault(field, value)
    return mapped


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item.get("loc", ())) or "row"
        parts.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)


class StudentImportService:
    """Imports students from an uploaded spreadsheet."""

    def __init__(self, repository: StudentRepository, reader: RowReader, max_rows: int = 5000):
        self._repository = repository
        self._reader = reader
        self._max_rows = max_rows

    async def import_file(self, filename: str, content: bytes) -> ImportSummary:
        if not filename or not self._reader.supports(filename):
            plog.step_error(ImportStage.PARSE, f"Rejected upload '{filename}'")
            raise UnsupportedImportFileError(filename)

        with plog.timed_step(ImportStage.PARSE, f"Reading {filename}", bytes=len(content)):
            try:
                rows = self._reader.read_rows(filename, content, self._max_rows)
            except ValueError as e:
                raise UnsupportedImportFileError(filename, str(e)) from e
        plog.detail("Rows read", count=len(rows), limit=self._max_rows)

        known_emails = await self._repository.get_existing_emails()
        plog.step_start(ImportStage.DEDUPLICATE, "Loaded stored emails", count=len(known_emails))

        summary = ImportSummary()
        to_create: list[Student] = []

        with plog.timed_step(ImportStage.VALIDATE, "Validating rows"):
            for index, row in enumerate(rows):
                line = index + 2  # header is line 1
                try:
                    data = StudentCreate.model_validate(map_row(row))
                except ValidationError as e:
                    message = _describe(e)
                    plog.row_warning(line, message)
                    summary.record_failed(line, message)
                    continue

                email = data.email.strip().lower()
                if email in known_emails:
                    summary.record_skipped()
                    continue
                known_emails.add(email)

                to_create.append(Student(**data.model_dump()))
                summary.record_imported()

        plog.stats(total=summary.total, skipped=summary.skipped, failed=summary.failed)

        with plog.timed_step(ImportStage.PERSIST, "Saving students", count=len(to_create)):
            for student in to_create:
                await self._repository.create(student)

        plog.step_complete(
            ImportStage.COMPLETE,
            f"Imported {summary.imported} of {summary.total} rows from {filename}",
        )
        return summary

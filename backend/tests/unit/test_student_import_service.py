"""Unit tests for the bulk student import."""

import pytest

from fakes import FakeStudentRepository
from intered.application.services import StudentImportService
from intered.application.services.student_import_service import map_row, normalize_header
from intered.domain.entities import Student, StudentStage, StudentStatus
from intered.domain.exceptions import UnsupportedImportFileError
from intered.infrastructure.extractors.spreadsheet_row_reader import SpreadsheetRowReader


def _csv(*lines: str) -> bytes:
    return ("\n".join(lines) + "\n").encode("utf-8")


@pytest.fixture
def repository() -> FakeStudentRepository:
    return FakeStudentRepository()


@pytest.fixture
def service(repository) -> StudentImportService:
    return StudentImportService(repository, SpreadsheetRowReader())


@pytest.mark.parametrize("header", ["First Name", "first_name", "firstName", "FIRST-NAME"])
def test_normalize_header_variants(header):
    assert normalize_header(header) == "firstname"


def test_map_row_drops_unknown_and_empty_cells():
    mapped = map_row({"First Name": "Ana", "Last Name": "", "Favourite Colour": "blue", "Stage": "Pre-Departure"})
    assert mapped == {"first_name": "Ana", "stage": "pre_departure"}


@pytest.mark.asyncio
async def test_import_partitions_rows(service: StudentImportService, repository):
    await repository.create(Student(first_name="Old", last_name="Entry", email="taken@example.com"))
    content = _csv(
        "First Name,Last Name,Email,Stage,Status",
        "Ana,Silva,ana@example.com,Visa,Active",
        "Ben,Osei,TAKEN@example.com,,",
        "Chen,Li,not-an-email,,",
        "Dana,Kim,dana@example.com,,On Hold",
        "Dana,Kim,Dana@Example.com,,",
    )

    summary = await service.import_file("students.csv", content)

    assert (summary.total, summary.imported, summary.skipped, summary.failed) == (5, 2, 2, 1)
    assert summary.total == summary.imported + summary.skipped + summary.failed
    assert summary.errors[0].line == 4

    stored = {s.email: s for s in await repository.get_all()}
    assert stored["ana@example.com"].stage == StudentStage.VISA
    assert stored["dana@example.com"].status == StudentStatus.ON_HOLD


@pytest.mark.asyncio
async def test_import_respects_row_limit(repository):
    service = StudentImportService(repository, SpreadsheetRowReader(), max_rows=2)
    content = _csv(
        "firstName,lastName,email",
        "A,One,a@example.com",
        "B,Two,b@example.com",
        "C,Three,c@example.com",
    )
    summary = await service.import_file("students.csv", content)
    assert summary.total == 2
    assert len(await repository.get_all()) == 2


@pytest.mark.asyncio
async def test_import_rejects_unsupported_file(service: StudentImportService):
    with pytest.raises(UnsupportedImportFileError):
        await service.import_file("students.pdf", b"%PDF-1.4")


@pytest.mark.asyncio
async def test_import_rejects_corrupt_workbook(service: StudentImportService):
    with pytest.raises(UnsupportedImportFileError):
        await service.import_file("students.xlsx", b"definitely not a zip file")


@pytest.mark.asyncio
async def test_header_only_file_imports_nothing(service: StudentImportService):
    summary = await service.import_file("students.csv", _csv("First Name,Last Name,Email"))
    assert summary.total == 0
    assert summary.imported == 0

"""Bulk student import from a CSV or Excel file."""

from pathlib import PurePath

from intered.application.schemas import StudentImportResult
from intered.client.hooks.students import ImportFile, StudentMutations

from .base import FormDialog

ACCEPTED_EXTENSIONS = (".csv", ".xlsx")
ACCEPTED_CONTENT_TYPES = (
    "text/csv",
    "text/plain",
    "application/csv",
    "application/vnd.ms-excel",
    "application/octet-stream",
)


def is_spreadsheet(filename: str, content_type: str | None = None) -> bool:
    """True for a .csv or .xlsx file whose content type, if any, does not contradict it.

    The server picks the reader by extension, so the extension decides.
    Browsers label CSV files inconsistently; a generic or Excel content
    type is accepted for either extension.
    """
    if PurePath(filename).suffix.lower() not in ACCEPTED_EXTENSIONS:
        return False
    if not content_type:
        return True
    content_type = content_type.split(";", 1)[0].strip().lower()
    return content_type in ACCEPTED_CONTENT_TYPES or "spreadsheet" in content_type


class ImportStudentsDialog(FormDialog):
    """Keeps the server's import counts in ``last_result`` after a successful upload."""

    name = "import_students"

    def __init__(self, ctx, on_success=None):
        self.file: ImportFile | None = None
        self.last_result: StudentImportResult | None = None
        super().__init__(ctx, on_success)

    def _build_mutation(self):
        return StudentMutations(self.ctx).import_students

    def reset(self) -> None:
        self.file = None
        self.last_result = None

    def choose_file(self, filename: str, content: bytes, content_type: str | None = None) -> bool:
        """Select the upload. A non-spreadsheet file is refused with a toast."""
        self._require_editable("choose a file")
        if not is_spreadsheet(filename, content_type):
            self.ctx.toasts.error("Invalid File Type", "Please upload a .csv or .xlsx file")
            return False
        self.file = ImportFile(filename, content, content_type)
        self.last_result = None
        self.error = None
        return True

    def validate(self):
        if self.file is None:
            return "No file selected", "Please select a CSV or Excel file to import"
        return None

    def variables(self) -> ImportFile:
        return self.file

    def after_success(self, data: StudentImportResult) -> None:
        self.last_result = data


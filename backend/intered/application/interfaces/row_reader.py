"""Abstract interface (port) for reading tabular rows from uploaded files."""

from abc import ABC, abstractmethod


class RowReader(ABC):
    """Port for spreadsheet parsing: implemented in the infrastructure layer."""

    @abstractmethod
    def supports(self, filename: str) -> bool:
        """Check if the reader can parse a file with this name."""
        ...

    @abstractmethod
    def read_rows(self, filename: str, content: bytes, max_rows: int) -> list[dict[str, str]]:
        """Parse the file into header-keyed rows.

        Args:
            filename: Original upload name, used to pick the format.
            content: Raw file bytes.
            max_rows: Data rows beyond this limit are not read.

        Returns:
            One dict per data row, keyed by the raw header text. Cell values
            are stripped strings; empty cells are "".
        """
        ...

"""Value object: outcome of a bulk student import."""

from dataclasses import dataclass, field


@dataclass
class RowError:
    line: int
    message: str


@dataclass
class ImportSummary:
    """Partition of the rows read from an import file.

    ``total`` always equals ``imported + skipped + failed``.
    """

    total: int = 0
    imported: int = 0
    skipped: int = 0
    failed: int = 0
    errors: list[RowError] = field(default_factory=list)

    def record_imported(self) -> None:
        self.total += 1
        self.imported += 1

    def record_skipped(self) -> None:
        self.total += 1
        self.skipped += 1

    def record_failed(self, line: int, message: str) -> None:
        self.total += 1
        self.failed += 1
        self.errors.append(RowError(line=line, message=message))

"""Colored import logger: ANSI-colored console logging for bulk student imports.

Provides an ImportLogger with color-coded output per import stage so a
long CSV/Excel import can be traced in the terminal row batch by row batch.

Color scheme:
    Yellow: Parsing the uploaded file
    Blue: Row validation
    Cyan: Duplicate detection
    Magenta: Persisting rows
    Green: Completion
    Red: Errors
    Gray: Timing / Stats
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


class ImportStage:
    """Predefined import stages as (label, color, icon) tuples."""

    PARSE = ("PARSE", _Colors.YELLOW, "📄")
    VALIDATE = ("VALIDATE", _Colors.BLUE, "🔎")
    DEDUPLICATE = ("DEDUPE", _Colors.CYAN, "🧮")
    PERSIST = ("PERSIST", _Colors.MAGENTA, "💾")
    IMPORT = ("IMPORT", _Colors.WHITE, "⚙️")
    ERROR = ("ERROR", _Colors.RED, "❌")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


def _format_details(kwargs: dict[str, Any], color: str) -> str:
    if not kwargs:
        return ""
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {color}({details}){_Colors.RESET}"


class ImportLogger:
    """Color-coded logger for the student import workflow.

    Usage:
        log = ImportLogger("StudentImportService")
        log.step_start(ImportStage.PARSE, "Reading students.csv")
        log.detail("Header row", columns=7)
        log.step_complete(ImportStage.PARSE, "Read 120 rows")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        self._logger.info(formatted + _format_details(kwargs, _Colors.GRAY))

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        self._logger.info(formatted + _format_details(kwargs, _Colors.GRAY))

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        label, _, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def row_warning(self, line: int, message: str) -> None:
        """Log a single rejected row at WARNING level."""
        self._logger.warning(f"   {_Colors.YELLOW}├─ row {line}: {message}{_Colors.RESET}")

    def detail(self, message: str, **kwargs: Any) -> None:
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        self._logger.info(formatted + _format_details(kwargs, _Colors.DIM))

    def stats(self, **kwargs: Any) -> None:
        parts = [f"{k}: {v}" for k, v in kwargs.items()]
        self._logger.info(f"   {_Colors.GRAY}📈 {' | '.join(parts)}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        Usage:
            with log.timed_step(ImportStage.PERSIST, "Saving rows"):
                await repository.create(student)
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} ({elapsed:.2f}s)", **kwargs)

"""Error types for standards extraction.

Two kinds of failure:
- PDFExtractionError is raised by the reader and is fatal to a run
- ExtractionError is a recorded, per-code problem; the batch keeps going

PipelineErrors collects ExtractionErrors for one Orchestrator. Warnings
(defaulted or malformed records) are kept apart from errors (codes that
could not be structured at all).
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PDFExtractionError(RuntimeError):
    """The reader could not produce page text. Never retried."""

    def __init__(self, message: str, path: str | None = None, pages: str | None = None):
        super().__init__(message)
        self.path = path
        self.pages = pages


class ErrorSeverity(Enum):
    WARNING = "warning"    # record kept, possibly with defaults
    ERROR = "error"        # code skipped, run continues
    CRITICAL = "critical"  # run aborted


class ErrorCategory(Enum):
    PDF_READ = "pdf_read"
    STRUCTURE = "structure"
    VALIDATION = "validation"
    COMPLETENESS = "completeness"
    UNKNOWN = "unknown"


@dataclass
class ExtractionError:
    """One recorded problem, tied to a phase and usually to a standard code."""

    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    phase: str
    code: str | None = None
    page_range: tuple[int, int] | None = None
    original_error: Exception | None = None
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def is_warning(self) -> bool:
        return self.severity is ErrorSeverity.WARNING

    def __str__(self) -> str:
        where = f"{self.code} in {self.phase}" if self.code else self.phase
        return f"{self.severity.value.upper()} {self.category.value} ({where}): {self.message}"

    def to_dict(self) -> dict:
        """JSON-safe view; the original exception is left out."""
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "phase": self.phase,
            "code": self.code,
            "page_range": list(self.page_range) if self.page_range else None,
            "context": self.context,
        }


@dataclass
class PipelineErrors:
    """Errors and warnings for one run, plus the codes that failed outright."""

    errors: list[ExtractionError] = field(default_factory=list)
    warnings: list[ExtractionError] = field(default_factory=list)
    failed_codes: list[str] = field(default_factory=list)

    def add(self, error: ExtractionError):
        if error.is_warning:
            self.warnings.append(error)
            return
        self.errors.append(error)
        if error.code and error.code not in self.failed_codes:
            self.failed_codes.append(error.code)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def summary(self) -> dict:
        return {
            "total_errors": self.error_count,
            "total_warnings": self.warning_count,
            "failed_codes": len(self.failed_codes),
            "errors_by_category": dict(Counter(e.category.value for e in self.errors)),
        }

    def to_dict(self) -> dict:
        return {
            "summary": self.summary(),
            "failed_codes": list(self.failed_codes),
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }


# =============================================================================
# Factories
# =============================================================================

def pdf_read_error(
    message: str,
    phase: str,
    original: Exception | None = None,
    path: str | None = None,
) -> ExtractionError:
    """Reader failure; the run stops."""
    return ExtractionError(
        ErrorCategory.PDF_READ,
        ErrorSeverity.CRITICAL,
        message,
        phase,
        original_error=original,
        context={"path": path} if path else {},
    )


def structure_error(
    message: str,
    phase: str,
    code: str,
    original: Exception | None = None,
) -> ExtractionError:
    """structure_standard raised for this code; the code is skipped."""
    return ExtractionError(
        ErrorCategory.STRUCTURE,
        ErrorSeverity.ERROR,
        message,
        phase,
        code=code,
        original_error=original,
    )


def validation_error(
    message: str,
    phase: str,
    code: str | None = None,
    field_name: str | None = None,
) -> ExtractionError:
    """Record does not match the canonical shape; kept anyway."""
    return ExtractionError(
        ErrorCategory.VALIDATION,
        ErrorSeverity.WARNING,
        message,
        phase,
        code=code,
        context={"field": field_name} if field_name else {},
    )


def incomplete_error(phase: str, code: str, missing: list[str]) -> ExtractionError:
    """Record lacks one or more dimension codes; excluded from extract_all."""
    return ExtractionError(
        ErrorCategory.COMPLETENESS,
        ErrorSeverity.WARNING,
        f"Missing dimension codes: {', '.join(missing)}",
        phase,
        code=code,
        context={"missing": list(missing)},
    )

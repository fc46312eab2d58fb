"""Base classes for validation results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue."""

    code: str
    message: str
    severity: Severity
    rule: str | None = None
    element: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        location = f" [{self.rule}]" if self.rule else ""
        return f"{self.severity.value.upper()}: {self.code}{location} - {self.message}"


@dataclass
class ValidationResult:
    """Result of running validation on a rule module."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def infos(self) -> list[ValidationIssue]:
        """Get all info-level issues."""
        return [i for i in self.issues if i.severity == Severity.INFO]

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @property
    def is_valid(self) -> bool:
        """Check if the module is valid (no errors)."""
        return not self.has_errors

    def add(
        self,
        severity: Severity,
        code: str,
        message: str,
        rule: str | None = None,
        element: str | None = None,
        **details: Any,
    ) -> None:
        """Add an issue of the given severity."""
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                rule=rule,
                element=element,
                details=details,
            )
        )

    def add_error(self, code: str, message: str, **kwargs: Any) -> None:
        """Add an error issue."""
        self.add(Severity.ERROR, code, message, **kwargs)

    def add_warning(self, code: str, message: str, **kwargs: Any) -> None:
        """Add a warning issue."""
        self.add(Severity.WARNING, code, message, **kwargs)

    def add_info(self, code: str, message: str, **kwargs: Any) -> None:
        """Add an info issue."""
        self.add(Severity.INFO, code, message, **kwargs)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)

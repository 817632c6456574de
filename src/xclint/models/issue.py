"""Linting issue model shared by every linter."""

from dataclasses import dataclass
from enum import Enum


class IssueSeverity(str, Enum):
    """Issue severity levels."""
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class LintingIssue:
    """A single problem found while linting a target."""
    reason: str
    severity: IssueSeverity

    @property
    def is_error(self) -> bool:
        return self.severity == IssueSeverity.ERROR

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.reason}"

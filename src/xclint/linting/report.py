"""Summaries of linting issues for reporting and CI exit codes."""

from dataclasses import dataclass, field
from enum import Enum

from ..models import IssueSeverity, LintingIssue


class LintingStatus(str, Enum):
    """Overall status of a lint run."""
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


class LintingError(Exception):
    """Raised when a target has error-level issues."""

    def __init__(self, issues: list[LintingIssue]):
        self.issues = issues
        reasons = "\n".join(f"  - {issue.reason}" for issue in issues)
        super().__init__(f"The following critical issues have been found:\n{reasons}")


@dataclass
class LintingSummary:
    """Issues of a lint run split by severity."""
    status: LintingStatus
    warnings: list[LintingIssue] = field(default_factory=list)
    errors: list[LintingIssue] = field(default_factory=list)
    fail_on_warnings: bool = False

    @classmethod
    def from_issues(cls, issues: list[LintingIssue], fail_on_warnings: bool = False) -> "LintingSummary":
        warnings = [issue for issue in issues if issue.severity == IssueSeverity.WARNING]
        errors = [issue for issue in issues if issue.severity == IssueSeverity.ERROR]

        # fail > warn > pass
        if errors:
            status = LintingStatus.FAIL
        elif warnings:
            status = LintingStatus.WARN
        else:
            status = LintingStatus.PASS

        return cls(status, warnings, errors, fail_on_warnings)

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass/warn, 1 = fail (or warn when strict)."""
        if self.status == LintingStatus.FAIL:
            return 1
        if self.status == LintingStatus.WARN and self.fail_on_warnings:
            return 1
        return 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": {
                "warnings": len(self.warnings),
                "errors": len(self.errors),
            },
            "issues": [
                {"severity": issue.severity.value, "reason": issue.reason}
                for issue in self.warnings + self.errors
            ],
        }


def raise_if_errors(issues: list[LintingIssue]) -> list[LintingIssue]:
    """Raise ``LintingError`` if any issue is an error.

    Returns:
        The warning-level issues when there are no errors
    """
    errors = [issue for issue in issues if issue.is_error]
    if errors:
        raise LintingError(errors)
    return [issue for issue in issues if not issue.is_error]

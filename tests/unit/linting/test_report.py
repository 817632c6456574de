"""Tests for linting summaries and error reporting."""

import pytest

from xclint.linting import LintingError, LintingStatus, LintingSummary, raise_if_errors
from xclint.models import IssueSeverity, LintingIssue

WARNING = LintingIssue("The target App doesn't contain source files.", IssueSeverity.WARNING)
ERROR = LintingIssue("Entitlements file not found at path /App.entitlements", IssueSeverity.ERROR)


class TestLintingSummary:
    """Test LintingSummary."""

    def test_pass(self):
        summary = LintingSummary.from_issues([])

        assert summary.status == LintingStatus.PASS
        assert summary.exit_code == 0

    def test_warn(self):
        summary = LintingSummary.from_issues([WARNING])

        assert summary.status == LintingStatus.WARN
        assert summary.warnings == [WARNING]
        assert summary.exit_code == 0

    def test_warn_strict(self):
        summary = LintingSummary.from_issues([WARNING], fail_on_warnings=True)

        assert summary.exit_code == 1

    def test_fail(self):
        summary = LintingSummary.from_issues([WARNING, ERROR])

        assert summary.status == LintingStatus.FAIL
        assert summary.errors == [ERROR]
        assert summary.exit_code == 1

    def test_to_dict(self):
        data = LintingSummary.from_issues([ERROR, WARNING]).to_dict()

        assert data["status"] == "fail"
        assert data["exit_code"] == 1
        assert data["counters"] == {"warnings": 1, "errors": 1}
        assert data["issues"][0] == {"severity": "warning", "reason": WARNING.reason}


class TestRaiseIfErrors:
    """Test raise_if_errors."""

    def test_returns_warnings(self):
        assert raise_if_errors([WARNING]) == [WARNING]

    def test_raises_on_errors(self):
        with pytest.raises(LintingError) as exc_info:
            raise_if_errors([WARNING, ERROR])

        assert exc_info.value.issues == [ERROR]
        assert ERROR.reason in str(exc_info.value)


class TestLintingIssue:
    """Test LintingIssue value semantics."""

    def test_equality_and_hash(self):
        other = LintingIssue(ERROR.reason, IssueSeverity.ERROR)

        assert other == ERROR
        assert len({other, ERROR}) == 1

    def test_str(self):
        assert str(WARNING) == "[WARNING] The target App doesn't contain source files."

"""Shared fixtures for xclint tests."""

from pathlib import Path

import pytest

from xclint.linting import LintContext
from xclint.models import IssueSeverity, LintingIssue, Platform, Product, Target


class InMemoryOracle:
    """File existence oracle backed by a set of paths, recording every query."""

    def __init__(self, existing=()):
        self.existing = {Path(p) for p in existing}
        self.queries: list[Path] = []

    def exists(self, path: Path) -> bool:
        self.queries.append(Path(path))
        return Path(path) in self.existing


class StubSettingsLinter:
    """Settings linter returning canned issues."""

    def __init__(self, issues=None):
        self.issues = list(issues or [])
        self.calls: list[Target] = []

    def lint(self, target):
        self.calls.append(target)
        return list(self.issues)


class StubActionLinter:
    """Action linter reporting one warning per action, named after it."""

    def __init__(self):
        self.calls = []

    def lint(self, action):
        self.calls.append(action)
        return [LintingIssue(f"action {action.name}", IssueSeverity.WARNING)]


@pytest.fixture
def make_target():
    """Factory for valid iOS app targets with per-test overrides."""
    def _make_target(**overrides) -> Target:
        values = {
            "name": "App",
            "platform": Platform.IOS,
            "product": Product.APP,
            "bundle_id": "io.xclint.App",
            "sources": [Path("Sources/AppDelegate.swift")],
        }
        values.update(overrides)
        return Target(**values)
    return _make_target


@pytest.fixture
def oracle():
    """Oracle where no path exists."""
    return InMemoryOracle()


@pytest.fixture
def make_oracle():
    return InMemoryOracle


@pytest.fixture
def settings_linter():
    return StubSettingsLinter()


@pytest.fixture
def action_linter():
    return StubActionLinter()


@pytest.fixture
def context(oracle, settings_linter, action_linter):
    """Lint context wired to test doubles."""
    return LintContext(
        file_oracle=oracle,
        settings_linter=settings_linter,
        action_linter=action_linter,
    )

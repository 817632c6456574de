"""Default linter for target build settings."""

import logging
from typing import Protocol

from ..models import IssueSeverity, LintingIssue, Target
from .oracle import FileExistenceOracle, FileSystemOracle

logger = logging.getLogger(__name__)


class SettingsLinting(Protocol):
    def lint(self, target: Target) -> list[LintingIssue]:
        ...


class SettingsLinter:
    """Checks that xcconfig files referenced by a target's configurations exist."""

    def __init__(self, file_oracle: FileExistenceOracle | None = None):
        self.file_oracle = file_oracle if file_oracle is not None else FileSystemOracle()

    def lint(self, target: Target) -> list[LintingIssue]:
        if target.settings is None:
            return []

        issues = []
        for name, configuration in target.settings.configurations.items():
            if configuration is None or configuration.xcconfig is None:
                continue
            if not self.file_oracle.exists(configuration.xcconfig):
                logger.debug(f"xcconfig for configuration {name} is missing")
                issues.append(LintingIssue(
                    f"Configuration file not found at path {configuration.xcconfig}",
                    IssueSeverity.ERROR,
                ))
        return issues

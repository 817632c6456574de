"""Default linter for target build-phase actions."""

import shutil
from collections.abc import Callable
from typing import Protocol

from ..models import IssueSeverity, LintingIssue, TargetAction
from .oracle import FileExistenceOracle, FileSystemOracle


class TargetActionLinting(Protocol):
    def lint(self, action: TargetAction) -> list[LintingIssue]:
        ...


class TargetActionLinter:
    """Checks that an action's tool is installed and its script path exists.

    Args:
        file_oracle: Oracle used for script paths
        which: Tool lookup, ``shutil.which`` by default
    """

    def __init__(self, file_oracle: FileExistenceOracle | None = None,
                 which: Callable[[str], str | None] = shutil.which):
        self.file_oracle = file_oracle if file_oracle is not None else FileSystemOracle()
        self.which = which

    def lint(self, action: TargetAction) -> list[LintingIssue]:
        if action.tool is None and action.path is None:
            return [LintingIssue(
                f"The action '{action.name}' must define either a tool or a path",
                IssueSeverity.ERROR,
            )]

        issues = []
        issues.extend(self._lint_tool_existence(action))
        issues.extend(self._lint_path_existence(action))
        return issues

    def _lint_tool_existence(self, action: TargetAction) -> list[LintingIssue]:
        if action.tool is None or self.which(action.tool) is not None:
            return []
        return [LintingIssue(
            f"The action tool '{action.tool}' was not found in the environment",
            IssueSeverity.ERROR,
        )]

    def _lint_path_existence(self, action: TargetAction) -> list[LintingIssue]:
        if action.path is None or self.file_oracle.exists(action.path):
            return []
        return [LintingIssue(
            f"The action path {action.path} doesn't exist",
            IssueSeverity.ERROR,
        )]

"""Target linting for xclint.

The ``TargetLinter`` inspects a single target description and reports
structural and semantic problems as ``LintingIssue`` values before project
generation proceeds.
"""

from .actions import TargetActionLinter, TargetActionLinting
from .framework import LintContext, LintingRule, TargetLinter, create_default_rules
from .oracle import FileExistenceOracle, FileSystemOracle
from .report import LintingError, LintingStatus, LintingSummary, raise_if_errors
from .settings import SettingsLinter, SettingsLinting

__all__ = [
    "TargetLinter",
    "LintingRule",
    "LintContext",
    "create_default_rules",
    "FileExistenceOracle",
    "FileSystemOracle",
    "SettingsLinter",
    "SettingsLinting",
    "TargetActionLinter",
    "TargetActionLinting",
    "LintingError",
    "LintingStatus",
    "LintingSummary",
    "raise_if_errors",
]

"""Core target linting framework.

A ``TargetLinter`` runs a fixed sequence of independent rules over a single
target and concatenates the issues they report. Detected problems are never
raised; exceptions from collaborators (the file oracle, delegate linters)
propagate unchanged.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..models import LintingIssue, Target
from .actions import TargetActionLinter, TargetActionLinting
from .oracle import FileExistenceOracle, FileSystemOracle
from .settings import SettingsLinter, SettingsLinting

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintContext:
    """Collaborators available to rules during a single lint call."""
    file_oracle: FileExistenceOracle
    settings_linter: SettingsLinting
    action_linter: TargetActionLinting


class LintingRule(ABC):
    """Base class for target linting rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @abstractmethod
    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        """Execute the rule.

        Args:
            target: Target to inspect, never modified
            context: Oracle and delegate linters for this call

        Returns:
            Issues found by this rule, possibly empty
        """
        pass


def create_default_rules() -> list[LintingRule]:
    """Create the target rules in evaluation order."""
    from .rules import (
        ActionsRule,
        BundleIdentifierRule,
        CopiedFilesRule,
        CoreDataModelsExistRule,
        CoreDataModelVersionsExistRule,
        DeploymentTargetRule,
        DuplicateDependenciesRule,
        EntitlementsExistRule,
        InfoPlistExistsRule,
        LibraryResourcesRule,
        PlatformProductRule,
        ProductNameRule,
        SettingsRule,
        SourceFilesRule,
    )

    return [
        ProductNameRule(),
        PlatformProductRule(),
        BundleIdentifierRule(),
        SourceFilesRule(),
        CopiedFilesRule(),
        LibraryResourcesRule(),
        DeploymentTargetRule(),
        SettingsRule(),
        DuplicateDependenciesRule(),
        CoreDataModelsExistRule(),
        CoreDataModelVersionsExistRule(),
        InfoPlistExistsRule(),
        EntitlementsExistRule(),
        ActionsRule(),
    ]


class TargetLinter:
    """Lints a single target.

    The instance holds only its injected delegate linters and rule list, so it
    can be shared between threads as long as targets are not mutated
    concurrently and the oracle supports concurrent reads. Delegates that are
    not injected are created per call around the oracle given to ``lint``.
    """

    def __init__(self, settings_linter: SettingsLinting | None = None,
                 action_linter: TargetActionLinting | None = None):
        self.settings_linter = settings_linter
        self.action_linter = action_linter
        self.rules: tuple[LintingRule, ...] = tuple(create_default_rules())

    def lint(self, target: Target, file_oracle: FileExistenceOracle | None = None) -> list[LintingIssue]:
        """Run every rule on a target.

        Args:
            target: Target to lint
            file_oracle: Existence oracle (default: local filesystem)

        Returns:
            Issues in rule evaluation order
        """
        if file_oracle is None:
            file_oracle = FileSystemOracle()

        context = LintContext(
            file_oracle=file_oracle,
            settings_linter=(self.settings_linter if self.settings_linter is not None
                             else SettingsLinter(file_oracle)),
            action_linter=(self.action_linter if self.action_linter is not None
                           else TargetActionLinter(file_oracle)),
        )

        logger.debug(f"Linting target {target.name} with {len(self.rules)} rules")

        issues: list[LintingIssue] = []
        for rule in self.rules:
            found = rule.lint(target, context)
            if found:
                logger.debug(f"Rule {rule.name} reported {len(found)} issues")
            issues.extend(found)

        logger.info(f"Found {len(issues)} issues in target {target.name}")
        return issues

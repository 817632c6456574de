"""Target linting rules.

Each rule checks one aspect of a target and returns the issues it found.
Rules are independent; none short-circuits another.
"""

import re
from collections import Counter

from ..models import IssueSeverity, LintingIssue, Platform, Product, Target
from .framework import LintContext, LintingRule

ALPHANUMERIC = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
PRODUCT_NAME_CHARACTERS = ALPHANUMERIC | {"_"}
BUNDLE_ID_CHARACTERS = ALPHANUMERIC | {"-", "."}

INTERPOLATION_PATTERNS = (
    re.compile(r"\$\{.+\}"),
    re.compile(r"\$\(.+\)"),
)
OS_VERSION_PATTERN = re.compile(r"\b[0-9]+\.[0-9]+(?:\.[0-9]+)?\b")

INVALID_PRODUCTS_FOR_PLATFORMS: dict[Platform, frozenset[Product]] = {
    Platform.IOS: frozenset({Product.WATCH2_APP, Product.WATCH2_EXTENSION}),
}

PRODUCTS_WITHOUT_RESOURCES = frozenset({
    Product.DYNAMIC_LIBRARY,
    Product.STATIC_LIBRARY,
    Product.STATIC_FRAMEWORK,
})


class ProductNameRule(LintingRule):
    """Validate that the product name only uses alphanumerics and underscores."""

    @property
    def name(self) -> str:
        return "product_name"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        if set(target.product_name) <= PRODUCT_NAME_CHARACTERS:
            return []
        return [LintingIssue(
            f"Invalid product name '{target.product_name}'. This string must contain only "
            "alphanumeric (A-Z,a-z,0-9) and underscore (_) characters.",
            IssueSeverity.ERROR,
        )]


class PlatformProductRule(LintingRule):
    """Validate that the product type is available on the target platform."""

    @property
    def name(self) -> str:
        return "platform_product"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        invalid_products = INVALID_PRODUCTS_FOR_PLATFORMS.get(target.platform, frozenset())
        if target.product not in invalid_products:
            return []
        return [LintingIssue(
            f"'{target.name}' for platform '{target.platform.value}' "
            f"can't have a product type '{target.product.value}'",
            IssueSeverity.ERROR,
        )]


class BundleIdentifierRule(LintingRule):
    """Validate that the bundle identifier is a uniform type identifier.

    Build setting interpolations such as ``${PRODUCT_NAME}`` or
    ``$(ORGANIZATION)`` are removed before checking characters.
    """

    @property
    def name(self) -> str:
        return "bundle_identifier"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        bundle_id = target.bundle_id
        for pattern in INTERPOLATION_PATTERNS:
            bundle_id = pattern.sub("", bundle_id)

        if set(bundle_id) <= BUNDLE_ID_CHARACTERS:
            return []
        return [LintingIssue(
            f"Invalid bundle identifier '{bundle_id}'. This string must be a uniform type "
            "identifier (UTI) that contains only alphanumeric (A-Z,a-z,0-9), hyphen (-), "
            "and period (.) characters.",
            IssueSeverity.ERROR,
        )]


class SourceFilesRule(LintingRule):
    """Validate source files against what the platform/product supports."""

    @property
    def name(self) -> str:
        return "source_files"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        if target.supports_sources and not target.sources:
            return [LintingIssue(
                f"The target {target.name} doesn't contain source files.",
                IssueSeverity.WARNING,
            )]
        if not target.supports_sources and target.sources:
            return [LintingIssue(
                f"Target {target.name} cannot contain sources. {target.platform.value} "
                f"{target.product.value} targets don't support source files",
                IssueSeverity.ERROR,
            )]
        return []


class CopiedFilesRule(LintingRule):
    """Warn about Info.plist and entitlements files listed as resources."""

    @property
    def name(self) -> str:
        return "copied_files"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        paths = [str(resource.path) for resource in target.resources]

        issues = [
            LintingIssue(
                f"Info.plist at path {path} being copied into the target {target.name} product.",
                IssueSeverity.WARNING,
            )
            for path in paths if "Info.plist" in path
        ]
        issues.extend(
            LintingIssue(
                f"Entitlements file at path {path} being copied into the target {target.name} product.",
                IssueSeverity.WARNING,
            )
            for path in paths if ".entitlements" in path
        )
        return issues


class LibraryResourcesRule(LintingRule):
    """Validate that library products carry no resources."""

    @property
    def name(self) -> str:
        return "library_resources"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        if target.product not in PRODUCTS_WITHOUT_RESOURCES or not target.resources:
            return []
        return [LintingIssue(
            f"Target {target.name} cannot contain resources. Libraries don't support resources",
            IssueSeverity.ERROR,
        )]


class DeploymentTargetRule(LintingRule):
    """Validate the deployment target version format."""

    @property
    def name(self) -> str:
        return "deployment_target"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        if target.deployment_target is None:
            return []
        if OS_VERSION_PATTERN.search(target.deployment_target.version):
            return []
        return [LintingIssue("The version of deployment target is incorrect", IssueSeverity.ERROR)]


class SettingsRule(LintingRule):
    """Delegate build settings checks to the settings linter."""

    @property
    def name(self) -> str:
        return "settings"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        return list(context.settings_linter.lint(target))


class DuplicateDependenciesRule(LintingRule):
    """Warn once for every dependency declared more than once."""

    @property
    def name(self) -> str:
        return "duplicate_dependencies"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        occurrences = Counter(target.dependencies)
        return [
            LintingIssue(
                f"Target has duplicate '{dependency}' dependency specified",
                IssueSeverity.WARNING,
            )
            for dependency, count in occurrences.items() if count > 1
        ]


class CoreDataModelsExistRule(LintingRule):
    """Validate that every Core Data model bundle exists."""

    @property
    def name(self) -> str:
        return "core_data_models_exist"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        return [
            LintingIssue(
                f"The Core Data model at path {model.path} does not exist",
                IssueSeverity.ERROR,
            )
            for model in target.core_data_models
            if not context.file_oracle.exists(model.path)
        ]


class CoreDataModelVersionsExistRule(LintingRule):
    """Validate that the current version of every Core Data model exists."""

    @property
    def name(self) -> str:
        return "core_data_model_versions_exist"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        issues = []
        for model in target.core_data_models:
            version_path = model.current_version_path
            if context.file_oracle.exists(version_path):
                continue
            issues.append(LintingIssue(
                f"The default version of the Core Data model at path {model.path}, "
                f"{model.current_version}, does not exist. There should be a file at {version_path}",
                IssueSeverity.ERROR,
            ))
        return issues


class InfoPlistExistsRule(LintingRule):
    """Validate that the Info.plist file referenced by the target exists."""

    @property
    def name(self) -> str:
        return "info_plist_exists"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        if target.info_plist is None or target.info_plist.path is None:
            return []
        if context.file_oracle.exists(target.info_plist.path):
            return []
        return [LintingIssue(
            f"Info.plist file not found at path {target.info_plist.path}",
            IssueSeverity.ERROR,
        )]


class EntitlementsExistRule(LintingRule):
    """Validate that the entitlements file referenced by the target exists."""

    @property
    def name(self) -> str:
        return "entitlements_exist"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        if target.entitlements is None or context.file_oracle.exists(target.entitlements):
            return []
        return [LintingIssue(
            f"Entitlements file not found at path {target.entitlements}",
            IssueSeverity.ERROR,
        )]


class ActionsRule(LintingRule):
    """Delegate each build-phase action to the action linter, in order."""

    @property
    def name(self) -> str:
        return "actions"

    def lint(self, target: Target, context: LintContext) -> list[LintingIssue]:
        issues = []
        for action in target.actions:
            issues.extend(context.action_linter.lint(action))
        return issues

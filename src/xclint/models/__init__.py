"""Data models for xclint."""

from .issue import IssueSeverity, LintingIssue
from .target import (
    ActionOrder,
    Configuration,
    CoreDataModel,
    Dependency,
    DependencyKind,
    DeploymentTarget,
    InfoPlist,
    Platform,
    Product,
    ResourceFileElement,
    Settings,
    Target,
    TargetAction,
)

__all__ = [
    "IssueSeverity",
    "LintingIssue",
    "ActionOrder",
    "Configuration",
    "CoreDataModel",
    "Dependency",
    "DependencyKind",
    "DeploymentTarget",
    "InfoPlist",
    "Platform",
    "Product",
    "ResourceFileElement",
    "Settings",
    "Target",
    "TargetAction",
]

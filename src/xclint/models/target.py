"""Models describing a single build target and its value types."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Platform(str, Enum):
    """Platforms a target can be built for."""
    IOS = "iOS"
    MACOS = "macOS"
    TVOS = "tvOS"
    WATCHOS = "watchOS"


class Product(str, Enum):
    """Kinds of artifact a target produces."""
    APP = "app"
    STATIC_LIBRARY = "static_library"
    DYNAMIC_LIBRARY = "dynamic_library"
    FRAMEWORK = "framework"
    STATIC_FRAMEWORK = "static_framework"
    UNIT_TESTS = "unit_tests"
    UI_TESTS = "ui_tests"
    BUNDLE = "bundle"
    APP_EXTENSION = "app_extension"
    STICKER_PACK_EXTENSION = "sticker_pack_extension"
    MESSAGES_EXTENSION = "messages_extension"
    WATCH2_APP = "watch2_app"
    WATCH2_EXTENSION = "watch2_extension"


# (platform, product) combinations that cannot compile source files
PRODUCTS_WITHOUT_SOURCES: frozenset[tuple[Platform, Product]] = frozenset({
    (Platform.IOS, Product.BUNDLE),
    (Platform.IOS, Product.STICKER_PACK_EXTENSION),
    (Platform.WATCHOS, Product.WATCH2_APP),
})


class ResourceFileElement(BaseModel):
    """A file copied into the product's resources."""
    path: Path

    model_config = ConfigDict(frozen=True)


class InfoPlist(BaseModel):
    """Info.plist reference.

    Generated or dictionary based Info.plist files have no path on disk.
    """
    path: Path | None = None

    model_config = ConfigDict(frozen=True)


class DeploymentTarget(BaseModel):
    """Minimum OS version the target supports."""
    version: str
    devices: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class DependencyKind(str, Enum):
    """Dependency descriptor kinds."""
    TARGET = "target"
    PROJECT = "project"
    FRAMEWORK = "framework"
    LIBRARY = "library"
    PACKAGE = "package"
    SDK = "sdk"
    XCFRAMEWORK = "xcframework"
    COCOAPODS = "cocoapods"


class Dependency(BaseModel):
    """Dependency descriptor, equal and hashable by kind, name and path."""
    kind: DependencyKind
    name: str | None = None
    path: Path | None = None

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        details = []
        if self.name is not None:
            details.append(f"name: {self.name}")
        if self.path is not None:
            details.append(f"path: {self.path}")
        return f"{self.kind.value}({', '.join(details)})"


class CoreDataModel(BaseModel):
    """Versioned Core Data model bundle (.xcdatamodeld directory)."""
    path: Path
    current_version: str = Field(alias="currentVersion")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def current_version_path(self) -> Path:
        """Path of the .xcdatamodel file for the current version.

        Always inside ``path``; leading separators in the version are ignored.
        """
        return self.path / f"{self.current_version.lstrip('/')}.xcdatamodel"


class Configuration(BaseModel):
    """Build configuration settings and optional xcconfig file."""
    settings: dict[str, str] = Field(default_factory=dict)
    xcconfig: Path | None = None

    model_config = ConfigDict(frozen=True)


class Settings(BaseModel):
    """Target build settings."""
    base: dict[str, str] = Field(default_factory=dict)
    configurations: dict[str, Configuration | None] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class ActionOrder(str, Enum):
    """Whether an action runs before or after the compile phase."""
    PRE = "pre"
    POST = "post"


class TargetAction(BaseModel):
    """Script build phase run through a tool or a script path."""
    name: str
    order: ActionOrder = ActionOrder.PRE
    tool: str | None = None
    path: Path | None = None
    arguments: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Target(BaseModel):
    """A buildable unit within a project."""
    name: str
    platform: Platform
    product: Product
    product_name: str = Field(alias="productName")
    bundle_id: str = Field(alias="bundleId")
    sources: list[Path] = Field(default_factory=list)
    resources: list[ResourceFileElement] = Field(default_factory=list)
    info_plist: InfoPlist | None = Field(alias="infoPlist", default=None)
    entitlements: Path | None = None
    deployment_target: DeploymentTarget | None = Field(alias="deploymentTarget", default=None)
    settings: Settings | None = None
    dependencies: list[Dependency] = Field(default_factory=list)
    core_data_models: list[CoreDataModel] = Field(alias="coreDataModels", default_factory=list)
    actions: list[TargetAction] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def default_product_name(cls, data):
        """Fall back to the target name when no product name is given."""
        if isinstance(data, dict) and data.get("productName") is None and data.get("product_name") is None:
            data = {**data, "productName": data.get("name")}
        return data

    @property
    def supports_sources(self) -> bool:
        """Whether the platform/product combination can contain source files."""
        return (self.platform, self.product) not in PRODUCTS_WITHOUT_SOURCES

"""Frontend framework detection."""

from litestar_devproxy.frameworks._catalog import FRAMEWORKS, FrameworkDefinition, FrameworkName
from litestar_devproxy.frameworks._detector import FrameworkDetector, PackageJsonDetector
from litestar_devproxy.frameworks._types import BuildSettings, DevCommands, FrameworkInfo, WatchSettings

__all__ = (
    "FRAMEWORKS",
    "BuildSettings",
    "DevCommands",
    "FrameworkDefinition",
    "FrameworkDetector",
    "FrameworkInfo",
    "FrameworkName",
    "PackageJsonDetector",
    "WatchSettings",
)

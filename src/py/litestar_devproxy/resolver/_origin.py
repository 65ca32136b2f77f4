"""Selection of the strategy that determines the application command and port."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from litestar_devproxy.config._constants import FRAMEWORK_AUTO, FRAMEWORK_CUSTOM, FRAMEWORK_STATIC

if TYPE_CHECKING:
    from litestar_devproxy.config import DevConfig, DevFlags

__all__ = (
    "AutoDetected",
    "Custom",
    "Fallback",
    "NamedFramework",
    "SettingsOrigin",
    "StaticDir",
    "has_custom_command",
    "select_origin",
)


@dataclass(frozen=True)
class StaticDir:
    """Serve ``directory`` with the static server, as requested by the ``--dir`` flag."""

    directory: str
    preferred_port: "int | None" = None


@dataclass(frozen=True)
class AutoDetected:
    """Detect the framework from the project files."""


@dataclass(frozen=True)
class Custom:
    """Run the configured ``command`` and proxy to ``targetPort``."""


@dataclass(frozen=True)
class NamedFramework:
    """Use the framework named in the configuration."""

    name: str


@dataclass(frozen=True)
class Fallback:
    """Nothing chosen yet; the static server takes over unless a command is configured."""


SettingsOrigin = Union[StaticDir, AutoDetected, Custom, NamedFramework, Fallback]


def has_custom_command(dev_config: "DevConfig") -> bool:
    """Return True when both ``command`` and ``targetPort`` are supplied."""
    return bool(dev_config.command and dev_config.target_port)


def select_origin(dev_config: "DevConfig", flags: "DevFlags") -> SettingsOrigin:
    """Pick the settings origin; the first matching rule wins.

    1. ``--dir`` flag: static server for that directory.
    2. ``framework = "#auto"`` without both ``command`` and ``targetPort``: detection.
    3. ``framework = "#custom"`` or both ``command`` and ``targetPort``: custom command.
    4. Any framework other than ``"#static"``: the named framework.
    5. Otherwise: fallback.

    Returns:
        The selected origin.
    """
    if flags.dir:
        return StaticDir(directory=flags.dir, preferred_port=flags.static_server_port)
    if dev_config.framework == FRAMEWORK_AUTO and not has_custom_command(dev_config):
        return AutoDetected()
    if dev_config.framework == FRAMEWORK_CUSTOM or has_custom_command(dev_config):
        return Custom()
    if dev_config.framework != FRAMEWORK_STATIC:
        return NamedFramework(name=dev_config.framework)
    return Fallback()

"""Framework descriptor types returned by detectors."""

from dataclasses import dataclass, field

from litestar_devproxy.config._constants import empty_dict_factory

__all__ = ("BuildSettings", "DevCommands", "FrameworkInfo", "WatchSettings")


@dataclass(frozen=True)
class DevCommands:
    """How a framework runs its own dev server.

    Attributes:
        commands: Alternative start commands, most preferred first.
        port: Port the framework dev server listens on.
    """

    commands: tuple[str, ...]
    port: "int | None" = None


@dataclass(frozen=True)
class BuildSettings:
    """Build output settings.

    Attributes:
        directory: Directory the production build is written to.
    """

    directory: "str | None" = None


@dataclass(frozen=True)
class WatchSettings:
    """Watch mode alternatives.

    Attributes:
        commands: Alternative watch commands, each an argument list.
    """

    commands: tuple[tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class FrameworkInfo:
    """A framework detected in a project.

    Attributes:
        name: Catalog identifier, the value accepted by the ``framework`` option.
        dev: Dev server commands and port.
        build: Build output settings.
        static_assets_directory: Directory with static assets, served in place
            of the build directory when set.
        env: Environment variables the dev command expects.
        watch: Watch mode alternatives, used to label interactive choices.
        title: Human readable name.
    """

    name: str
    dev: DevCommands
    build: BuildSettings = field(default_factory=BuildSettings)
    static_assets_directory: "str | None" = None
    env: dict[str, str] = field(default_factory=empty_dict_factory)
    watch: WatchSettings = field(default_factory=WatchSettings)
    title: "str | None" = None

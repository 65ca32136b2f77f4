"""Settings for serving a directory with the built-in static server."""

from pathlib import Path
from typing import TYPE_CHECKING

from litestar_devproxy._utils import display_path
from litestar_devproxy.ports import negotiate_port
from litestar_devproxy.resolver._types import SettingsDraft

if TYPE_CHECKING:
    from collections.abc import Callable

    from litestar_devproxy.config import ResolverDefaults
    from litestar_devproxy.ports import PortProber

__all__ = ("static_server_settings",)


async def static_server_settings(
    dist: "str | None",
    preferred_port: "int | None",
    project_dir: Path,
    *,
    prober: "PortProber",
    defaults: "ResolverDefaults",
    log: "Callable[[str], None]",
    warn: "Callable[[str], None]",
) -> SettingsDraft:
    """Build a draft that serves ``dist`` without an application command.

    Args:
        dist: Directory to serve; the current working directory when empty.
        preferred_port: Preferred static server port, ``defaults.static_port`` when unset.
        project_dir: The project root, used to display ``dist``.
        prober: The port prober.
        defaults: Resolver defaults.
        log: Informational message sink.
        warn: Warning message sink.

    Returns:
        A ``no_cmd`` draft with a negotiated ``framework_port``.
    """
    if not dist:
        log("Using current working directory")
        warn("Unable to determine public folder to serve files from")
        warn("Setup a devproxy.toml file with a [dev] section to specify your dev server settings.")
        dist = str(Path.cwd())

    warn(f'Running static server from "{display_path(dist, project_dir)}"')
    framework_port = await negotiate_port(prober, preferred_port or defaults.static_port)
    return SettingsDraft(no_cmd=True, framework_port=framework_port, dist=dist)

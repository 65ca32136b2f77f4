"""DevProxy plugin for Litestar.

The plugin exposes the ``devproxy`` command group on the Litestar CLI and holds
the defaults used when settings are resolved from the command line.

Example::

    from litestar import Litestar
    from litestar_devproxy import DevProxyPlugin, ResolverDefaults

    app = Litestar(plugins=[DevProxyPlugin(defaults=ResolverDefaults(port=9000))])
"""

from pathlib import Path
from typing import TYPE_CHECKING

from litestar.plugins import CLIPlugin

from litestar_devproxy.config import ResolverDefaults

if TYPE_CHECKING:
    from click import Group

__all__ = ("DevProxyPlugin",)


class DevProxyPlugin(CLIPlugin):
    """Register the ``devproxy`` CLI commands."""

    __slots__ = ("_defaults", "_project_dir")

    def __init__(self, defaults: "ResolverDefaults | None" = None, project_dir: "Path | str | None" = None) -> None:
        """Initialize the plugin.

        Args:
            defaults: Resolver defaults. Defaults to ``ResolverDefaults()`` if not provided.
            project_dir: Project root. The current working directory is used when omitted.
        """
        self._defaults = defaults or ResolverDefaults()
        self._project_dir = Path(project_dir) if project_dir is not None else None

    @property
    def defaults(self) -> ResolverDefaults:
        return self._defaults

    @property
    def project_dir(self) -> Path:
        return self._project_dir or Path.cwd()

    def on_cli_init(self, cli: "Group") -> None:
        """Register CLI commands.

        Args:
            cli: The Click command group to add commands to.
        """
        from litestar_devproxy.cli import devproxy_group

        cli.add_command(devproxy_group)

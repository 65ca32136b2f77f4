from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from click import Path as ClickPath
from click import group, option
from litestar.cli._utils import LitestarGroup  # pyright: ignore[reportPrivateImportUsage]

if TYPE_CHECKING:
    from litestar import Litestar

    from litestar_devproxy.plugin import DevProxyPlugin


@group(cls=LitestarGroup, name="devproxy")
def devproxy_group() -> None:
    """Manage the development proxy."""


def _get_plugin(app: "Litestar") -> "DevProxyPlugin":
    from litestar_devproxy.plugin import DevProxyPlugin

    return app.plugins.get(DevProxyPlugin)


def _format_value(key: str, value: Any) -> str:
    if value is None:
        return "-"
    if key == "https":
        return f"key {value['keyBytes']} bytes, certificate {value['certBytes']} bytes"
    if isinstance(value, dict):
        return ", ".join(f"{name}={item}" for name, item in value.items()) or "-"
    return str(value)


@devproxy_group.command(
    name="settings",
    help="Resolve the development proxy settings for the project.",
)
@option("--dir", "static_dir", type=str, help="Serve this directory with the static server.", default=None)
@option(
    "--static-server-port",
    type=int,
    help="Preferred port of the static server.",
    default=None,
    required=False,
)
@option(
    "--config",
    "config_file",
    type=ClickPath(dir_okay=False, file_okay=True, exists=True, path_type=Path),
    help="Project configuration file. Defaults to devproxy.toml in the project directory.",
    default=None,
    required=False,
)
@option(
    "--project-dir",
    type=ClickPath(dir_okay=True, file_okay=False, exists=True, path_type=Path),
    help="The project root directory.",
    default=None,
    required=False,
)
@option("--json", "as_json", type=bool, help="Print the settings as JSON.", default=False, is_flag=True)
def devproxy_settings(
    app: "Litestar",
    static_dir: "Optional[str]",
    static_server_port: "Optional[int]",
    config_file: "Optional[Path]",
    project_dir: "Optional[Path]",
    as_json: "bool",
) -> None:
    """Resolve and print the development proxy settings."""
    import logging
    import sys

    import msgspec
    from litestar.cli._utils import console  # pyright: ignore[reportPrivateImportUsage]
    from litestar.serialization import encode_json
    from rich.markup import escape
    from rich.table import Table
    from rich.text import Text

    from litestar_devproxy._utils import log_fail, log_success
    from litestar_devproxy.config import DevFlags, load_dev_config
    from litestar_devproxy.exceptions import DevProxyError
    from litestar_devproxy.resolver import resolve_settings

    plugin = _get_plugin(app)
    root = Path(project_dir or plugin.project_dir)
    flags = DevFlags(dir=static_dir, static_server_port=static_server_port)
    collaborators: dict[str, Any] = {"defaults": plugin.defaults}
    if as_json:
        # keep stdout parseable
        logger = logging.getLogger("litestar_devproxy")
        collaborators.update(log=logger.info, warn=logger.warning)
    else:
        console.rule("[yellow]Resolving development proxy settings[/]", align="left")

    try:
        dev_config = load_dev_config(root, config_file)
        settings = resolve_settings(dev_config, flags, root, **collaborators)
    except DevProxyError as e:
        log_fail(escape(str(e)))
        sys.exit(1)

    data = settings.to_dict()
    if as_json:
        console.out(msgspec.json.format(encode_json(data), indent=2).decode())
        return

    table = Table(show_header=False, box=None)
    table.add_column(style="cyan")
    table.add_column()
    for key, value in data.items():
        table.add_row(key, Text(_format_value(key, value)))
    console.print(table)
    log_success(f"Proxy on port {settings.port}, application on port {settings.framework_port}")


@devproxy_group.command(
    name="frameworks",
    help="List the frontend frameworks detected in the project.",
)
@option(
    "--project-dir",
    type=ClickPath(dir_okay=True, file_okay=False, exists=True, path_type=Path),
    help="The project root directory.",
    default=None,
    required=False,
)
def devproxy_frameworks(app: "Litestar", project_dir: "Optional[Path]") -> None:
    """List detected frameworks."""
    import sys

    import anyio
    from litestar.cli._utils import console  # pyright: ignore[reportPrivateImportUsage]
    from rich.markup import escape
    from rich.table import Table
    from rich.text import Text

    from litestar_devproxy._utils import log_fail, log_info
    from litestar_devproxy.exceptions import DevProxyError
    from litestar_devproxy.frameworks import PackageJsonDetector

    root = Path(project_dir or _get_plugin(app).project_dir)
    console.rule("[yellow]Detected frameworks[/]", align="left")
    try:
        frameworks = anyio.run(PackageJsonDetector().list_frameworks, root)
    except DevProxyError as e:
        log_fail(escape(str(e)))
        sys.exit(1)

    if not frameworks:
        log_info("No framework detected")
        return

    table = Table("Framework", "Command", "Port", "Directory")
    for framework in frameworks:
        table.add_row(
            Text(framework.title or framework.name),
            Text(framework.dev.commands[0] if framework.dev.commands else "-"),
            str(framework.dev.port or "-"),
            Text(framework.static_assets_directory or framework.build.directory or "-"),
        )
    console.print(table)

"""Litestar-DevProxy: settings resolution for a local development proxy.

The package works out how a development session should run: which command
starts the application, which port it listens on, which port the proxy listens
on, and the optional TLS and functions server settings.

Basic usage:
    from litestar import Litestar
    from litestar_devproxy import DevProxyPlugin

    app = Litestar(plugins=[DevProxyPlugin()])

Resolving settings programmatically:
    from pathlib import Path
    from litestar_devproxy import load_dev_config, resolve_settings

    settings = resolve_settings(load_dev_config(Path.cwd()), {"dir": None}, Path.cwd())
"""

from litestar_devproxy.__metadata__ import __version__
from litestar_devproxy.config import DevConfig, DevFlags, HttpsConfig, ResolverDefaults, load_dev_config
from litestar_devproxy.frameworks import FrameworkDetector, FrameworkInfo, PackageJsonDetector
from litestar_devproxy.picker import ConsolePicker, FrameworkOption, FrameworkPicker
from litestar_devproxy.plugin import DevProxyPlugin
from litestar_devproxy.ports import PortProber, SocketPortProber
from litestar_devproxy.resolver import ResolvedSettings, SettingsResolver, resolve_settings
from litestar_devproxy.tls import FileReader, TLSSettings

__all__ = (
    "__version__",
    "ConsolePicker",
    "DevConfig",
    "DevFlags",
    "DevProxyPlugin",
    "FileReader",
    "FrameworkDetector",
    "FrameworkInfo",
    "FrameworkOption",
    "FrameworkPicker",
    "HttpsConfig",
    "PackageJsonDetector",
    "PortProber",
    "ResolvedSettings",
    "ResolverDefaults",
    "SettingsResolver",
    "SocketPortProber",
    "TLSSettings",
    "load_dev_config",
    "resolve_settings",
)

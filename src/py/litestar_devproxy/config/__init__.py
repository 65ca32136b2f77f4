"""Litestar-DevProxy Configuration.

The configuration is split into logical groups:

- DevConfig: the ``[dev]`` block of the project configuration file
- DevFlags: command line overrides
- ResolverDefaults: fallback ports and JWT settings, overridable from the environment

Example usage::

    from pathlib import Path

    from litestar_devproxy.config import DevFlags, load_dev_config

    dev_config = load_dev_config(Path.cwd())
    flags = DevFlags(dir="public")
"""

from litestar_devproxy.config._constants import (  # pyright: ignore[reportPrivateUsage]
    CONFIG_FILE_NAMES,
    DEFAULT_JWT_ROLE_PATH,
    DEFAULT_JWT_SECRET,
    DEFAULT_PORT,
    DEFAULT_STATIC_PORT,
    FRAMEWORK_AUTO,
    FRAMEWORK_CUSTOM,
    FRAMEWORK_STATIC,
)
from litestar_devproxy.config._defaults import ResolverDefaults  # pyright: ignore[reportPrivateUsage]
from litestar_devproxy.config._dev import (  # pyright: ignore[reportPrivateUsage]
    DevConfig,
    DevFlags,
    HttpsConfig,
    normalize_dev_config,
    normalize_flags,
)
from litestar_devproxy.config._loader import (  # pyright: ignore[reportPrivateUsage]
    find_config_file,
    load_dev_block,
    load_dev_config,
)

__all__ = (
    "CONFIG_FILE_NAMES",
    "DEFAULT_JWT_ROLE_PATH",
    "DEFAULT_JWT_SECRET",
    "DEFAULT_PORT",
    "DEFAULT_STATIC_PORT",
    "FRAMEWORK_AUTO",
    "FRAMEWORK_CUSTOM",
    "FRAMEWORK_STATIC",
    "DevConfig",
    "DevFlags",
    "HttpsConfig",
    "ResolverDefaults",
    "find_config_file",
    "load_dev_block",
    "load_dev_config",
    "normalize_dev_config",
    "normalize_flags",
)

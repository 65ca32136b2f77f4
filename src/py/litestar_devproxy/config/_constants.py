"""Constants and utility functions for configuration."""

from typing import Any

__all__ = (
    "CONFIG_FILE_NAMES",
    "DEFAULT_HOST",
    "DEFAULT_JWT_ROLE_PATH",
    "DEFAULT_JWT_SECRET",
    "DEFAULT_PORT",
    "DEFAULT_STATIC_PORT",
    "FRAMEWORK_AUTO",
    "FRAMEWORK_CUSTOM",
    "FRAMEWORK_STATIC",
    "empty_dict_factory",
)

FRAMEWORK_AUTO = "#auto"
FRAMEWORK_CUSTOM = "#custom"
FRAMEWORK_STATIC = "#static"

DEFAULT_PORT = 8888
DEFAULT_STATIC_PORT = 3999
DEFAULT_HOST = "127.0.0.1"
DEFAULT_JWT_SECRET = "secret"  # noqa: S105
DEFAULT_JWT_ROLE_PATH = "app_metadata.authorization.roles"

CONFIG_FILE_NAMES = ("devproxy.toml", ".devproxy.toml")


def empty_dict_factory() -> dict[str, Any]:
    """Return an empty ``dict[str, Any]``.

    Returns:
        An empty dictionary.
    """
    return {}

"""Project configuration file loading."""

from pathlib import Path
from typing import TYPE_CHECKING, Any

import msgspec

from litestar_devproxy.config._constants import CONFIG_FILE_NAMES, FRAMEWORK_AUTO
from litestar_devproxy.config._dev import DevConfig, normalize_dev_config
from litestar_devproxy.exceptions import ConfigFileError

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ("find_config_file", "load_dev_block", "load_dev_config")


def find_config_file(project_dir: Path, names: "Sequence[str]" = CONFIG_FILE_NAMES) -> "Path | None":
    """Locate the project configuration file.

    Args:
        project_dir: Directory to search.
        names: Candidate file names, in order of preference.

    Returns:
        The first existing candidate, or None.
    """
    for name in names:
        candidate = project_dir / name
        if candidate.is_file():
            return candidate
    return None


def load_dev_block(path: Path) -> dict[str, Any]:
    """Read the ``[dev]`` table of a TOML configuration file.

    Args:
        path: The configuration file.

    Raises:
        ConfigFileError: If the file cannot be read, is not valid TOML, or its
            ``dev`` entry is not a table.

    Returns:
        The ``[dev]`` table, or an empty dict when the file has none.
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ConfigFileError(str(path), e.strerror or str(e)) from e
    try:
        document = msgspec.toml.decode(content)
    except msgspec.DecodeError as e:
        raise ConfigFileError(str(path), str(e)) from e

    dev = document.get("dev", {})
    if not isinstance(dev, dict):
        raise ConfigFileError(str(path), "the [dev] entry must be a table")
    return dev


def load_dev_config(project_dir: Path, path: "Path | None" = None) -> DevConfig:
    """Load and normalize the ``[dev]`` block for a project.

    A missing file or a block without ``framework`` resolves to ``"#auto"``.

    Args:
        project_dir: The project root directory.
        path: Explicit configuration file, bypassing the lookup.

    Returns:
        The normalized ``[dev]`` configuration.
    """
    config_path = path or find_config_file(project_dir)
    dev = load_dev_block(config_path) if config_path is not None else {}
    dev.setdefault("framework", FRAMEWORK_AUTO)
    return normalize_dev_config(dev)

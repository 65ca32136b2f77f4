"""Utilities for console logging and path display."""

__all__ = (
    "console",
    "display_path",
    "echo_info",
    "echo_warn",
    "log_fail",
    "log_info",
    "log_success",
    "log_warn",
)

import os
from pathlib import Path

from litestar.cli._utils import console  # pyright: ignore[reportPrivateImportUsage]
from rich.markup import escape

_TICK = "[bold green]✓[/]"
_INFO = "[cyan]•[/]"
_WARN = "[yellow]![/]"
_FAIL = "[red]x[/]"


def log_success(message: str) -> None:
    """Print a success message with consistent styling."""

    console.print(f"{_TICK} {message}")


def log_info(message: str) -> None:
    """Print an informational message with consistent styling."""

    console.print(f"{_INFO} {message}")


def log_warn(message: str) -> None:
    """Print a warning message with consistent styling."""

    console.print(f"{_WARN} {message}")


def log_fail(message: str) -> None:
    """Print an error message with consistent styling."""

    console.print(f"{_FAIL} {message}")


def display_path(path: "Path | str", project_dir: "Path | str") -> str:
    """Render ``path`` relative to the parent of ``project_dir``.

    The project directory name stays visible in the output, so a static server
    started from ``site/public`` is shown as ``site/public`` rather than ``public``.

    Args:
        path: The path to display.
        project_dir: The project root directory.

    Returns:
        A relative path string. Paths on another drive are returned unchanged.
    """
    base = Path(project_dir).resolve().parent
    target = Path(path)
    if not target.is_absolute():
        target = Path(project_dir) / target
    try:
        return os.path.relpath(target.resolve(), base)
    except ValueError:
        # Windows: path and base live on different drives
        return str(path)


def echo_info(message: str) -> None:
    """Print an informational message verbatim, without markup parsing."""

    log_info(escape(message))


def echo_warn(message: str) -> None:
    """Print a warning message verbatim, without markup parsing."""

    log_warn(escape(message))

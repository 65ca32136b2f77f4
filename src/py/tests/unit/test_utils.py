from pathlib import Path

import pytest

from litestar_devproxy import _utils
from litestar_devproxy._utils import display_path, echo_info, echo_warn, log_fail, log_info, log_success, log_warn


def test_display_path_keeps_project_name(tmp_path: Path) -> None:
    project = tmp_path / "site"
    project.mkdir()

    assert display_path("public", project) == "site/public"
    assert display_path(project / "dist", project) == "site/dist"
    assert display_path(project, project) == "site"


def test_display_path_outside_project(tmp_path: Path) -> None:
    project = tmp_path / "site"
    project.mkdir()

    assert display_path(tmp_path / "shared", project) == "shared"


def test_log_helpers_use_console(monkeypatch: pytest.MonkeyPatch) -> None:
    printed: list[str] = []
    monkeypatch.setattr(_utils.console, "print", lambda message: printed.append(message))

    log_success("done")
    log_info("info")
    log_warn("careful")
    log_fail("broken")

    assert printed == [
        "[bold green]✓[/] done",
        "[cyan]•[/] info",
        "[yellow]![/] careful",
        "[red]x[/] broken",
    ]


def test_echo_helpers_escape_markup(monkeypatch: pytest.MonkeyPatch) -> None:
    printed: list[str] = []
    monkeypatch.setattr(_utils.console, "print", lambda message: printed.append(message))

    echo_info("Add it to [dev] section")
    echo_warn("[bold]not bold[/bold]")

    assert printed == [
        "[cyan]•[/] Add it to \\[dev] section",
        "[yellow]![/] \\[bold]not bold\\[/bold]",
    ]


def test_version_is_exposed() -> None:
    import litestar_devproxy

    assert isinstance(litestar_devproxy.__version__, str)
    assert litestar_devproxy.__version__

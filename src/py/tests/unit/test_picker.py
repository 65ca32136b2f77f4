from collections.abc import Callable, Iterator
from unittest.mock import patch

import pytest

from litestar_devproxy.exceptions import PickerError
from litestar_devproxy.frameworks import FrameworkInfo
from litestar_devproxy.picker import (
    ConsolePicker,
    FrameworkOption,
    FrameworkPicker,
    filter_options,
    format_framework_options,
    fuzzy_match,
)

MakeFramework = Callable[..., FrameworkInfo]


@pytest.fixture
def options(make_framework: MakeFramework) -> list[FrameworkOption]:
    return format_framework_options(
        [
            make_framework("vite", commands=("npm run dev",), watch=[["vite"], ["vite", "--host"]]),
            make_framework("next", 3000, commands=("npm run next",)),
        ]
    )


def test_format_framework_options(options: list[FrameworkOption]) -> None:
    assert [option.name for option in options] == [
        "[vite] npm run dev vite",
        "[vite] npm run dev vite --host",
        "[next] npm run next",
    ]
    assert [option.short for option in options] == ["vite-vite", "vite-vite --host", "next"]
    assert options[1].value.watch.commands == (("vite", "--host"),)
    assert options[2].value.watch.commands == ()
    assert options[1].value.dev.port == 5173


@pytest.mark.parametrize(
    ("pattern", "text", "expected"),
    [
        ("", "anything", True),
        ("nxt", "[next] npm run next", True),
        ("NEXT", "[next] npm run next", True),
        ("vite host", "[vite] npm run dev vite --host", True),
        ("txen", "[next] npm run next", False),
        ("svelte", "[vite] npm run dev", False),
    ],
)
def test_fuzzy_match(pattern: str, text: str, expected: bool) -> None:
    assert fuzzy_match(pattern, text) is expected


def test_filter_options(options: list[FrameworkOption]) -> None:
    assert filter_options(options, "") == options
    assert filter_options(options, "host") == [options[1]]
    assert filter_options(options, "vite") == options[:2]
    assert filter_options(options, "gatsby") == []


def test_console_picker_is_a_framework_picker() -> None:
    assert isinstance(ConsolePicker(), FrameworkPicker)


def _answers(*values: str) -> Iterator[str]:
    yield from values


def test_console_picker_selects_by_number(options: list[FrameworkOption]) -> None:
    answers = _answers("2")
    with patch("litestar_devproxy.picker.Prompt.ask", side_effect=lambda *args, **kwargs: next(answers)):
        assert ConsolePicker()._choose(options, filter_options) == options[1]  # pyright: ignore[reportPrivateUsage]


def test_console_picker_filters_until_one_match(options: list[FrameworkOption]) -> None:
    answers = _answers("vite", "gatsby", "host")
    with patch("litestar_devproxy.picker.Prompt.ask", side_effect=lambda *args, **kwargs: next(answers)):
        assert ConsolePicker()._choose(options, filter_options) == options[1]  # pyright: ignore[reportPrivateUsage]


def test_console_picker_number_refers_to_filtered_list(options: list[FrameworkOption]) -> None:
    answers = _answers("9", "vite", "1")
    with patch("litestar_devproxy.picker.Prompt.ask", side_effect=lambda *args, **kwargs: next(answers)):
        assert ConsolePicker()._choose(options, filter_options) == options[0]  # pyright: ignore[reportPrivateUsage]


def test_console_picker_without_options() -> None:
    with pytest.raises(PickerError):
        ConsolePicker()._choose([], filter_options)  # pyright: ignore[reportPrivateUsage]


@pytest.mark.anyio
async def test_console_picker_choose(options: list[FrameworkOption]) -> None:
    with patch("litestar_devproxy.picker.Prompt.ask", return_value="next"):
        chosen = await ConsolePicker().choose(options, filter_options)

    assert chosen == options[2]

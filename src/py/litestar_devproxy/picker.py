"""Interactive framework selection.

When detection finds more than one framework the user picks the start command
to run. Every ``(framework, watch command)`` pair becomes one option; typing
narrows the list with a fuzzy match on the option label.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Protocol, runtime_checkable

import anyio.to_thread
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from litestar_devproxy._utils import console, log_success, log_warn
from litestar_devproxy.exceptions import PickerError
from litestar_devproxy.frameworks import FrameworkInfo

__all__ = (
    "ConsolePicker",
    "FrameworkOption",
    "FrameworkPicker",
    "OptionFilter",
    "filter_options",
    "format_framework_options",
    "fuzzy_match",
)


@dataclass(frozen=True)
class FrameworkOption:
    """One selectable start command.

    Attributes:
        name: Label shown to the user and matched against typed input.
        value: The framework descriptor the settings are derived from.
        short: Compact label echoed after selection.
    """

    name: str
    value: FrameworkInfo
    short: str


OptionFilter = Callable[[Sequence[FrameworkOption], str], list[FrameworkOption]]


def format_framework_options(frameworks: Sequence[FrameworkInfo]) -> list[FrameworkOption]:
    """Build one option per ``(framework, watch command)`` pair.

    A framework without watch commands still yields a single option for its
    primary command.

    Returns:
        Options in detector order.
    """
    options: list[FrameworkOption] = []
    for framework in frameworks:
        primary = framework.dev.commands[0] if framework.dev.commands else ""
        watch_commands = framework.watch.commands or ((),)
        for command in watch_commands:
            label = " ".join(part for part in (f"[{framework.name}]", primary, *command) if part)
            short = f"{framework.name}-{' '.join(command)}" if command else framework.name
            options.append(
                FrameworkOption(
                    name=label,
                    value=replace(framework, watch=replace(framework.watch, commands=(command,) if command else ())),
                    short=short,
                )
            )
    return options


def fuzzy_match(pattern: str, text: str) -> bool:
    """Return True if every character of ``pattern`` appears in ``text`` in order.

    The comparison ignores case and whitespace in ``pattern``.
    """
    remaining = iter(text.lower())
    return all(char in remaining for char in pattern.lower() if not char.isspace())


def filter_options(options: Sequence[FrameworkOption], text: str) -> list[FrameworkOption]:
    """Narrow ``options`` to the labels that fuzzy match ``text``.

    Returns:
        All options when ``text`` is empty, otherwise the matching ones in their original order.
    """
    if not text:
        return list(options)
    return [option for option in options if fuzzy_match(text, option.name)]


@runtime_checkable
class FrameworkPicker(Protocol):
    """Asks the user to choose one option."""

    async def choose(self, options: Sequence[FrameworkOption], filter_fn: OptionFilter) -> FrameworkOption:
        """Return the option the user selected."""
        ...


class ConsolePicker:
    """Pick an option on the terminal with a numbered table and a rich prompt."""

    message = "Multiple possible start commands found"

    async def choose(self, options: Sequence[FrameworkOption], filter_fn: OptionFilter) -> FrameworkOption:
        option = await anyio.to_thread.run_sync(self._choose, options, filter_fn)
        log_success(f"Selected {escape(option.short)}")
        return option

    def _choose(self, options: Sequence[FrameworkOption], filter_fn: OptionFilter) -> FrameworkOption:
        if not options:
            msg = "No start commands to choose from"
            raise PickerError(msg)
        candidates = list(options)
        while True:
            self._render(candidates)
            answer = Prompt.ask("Enter a number or type to filter", console=console, default="").strip()
            if answer.isdigit():
                index = int(answer)
                if 1 <= index <= len(candidates):
                    return candidates[index - 1]
                log_warn(f"Choose a number between 1 and {len(candidates)}")
                continue
            filtered = filter_fn(options, answer)
            if len(filtered) == 1:
                return filtered[0]
            if not filtered:
                log_warn(f"No start command matches '{escape(answer)}'")
                continue
            candidates = filtered

    def _render(self, candidates: Sequence[FrameworkOption]) -> None:
        table = Table(title=self.message, title_justify="left", show_header=False, box=None)
        table.add_column(justify="right", style="cyan")
        table.add_column()
        for index, option in enumerate(candidates, start=1):
            table.add_row(str(index), Text(option.name))
        console.print(table)

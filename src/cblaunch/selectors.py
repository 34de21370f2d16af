"""
CBLAUNCH selection strategies.

A ``Selector`` turns a list of options into the index the user picked, or
``None`` when the user backs out. Three variants exist:

    FzfSelector       pipes option lines through the external ``fzf`` tool
    NumberedSelector  prints a numbered list and reads one line of input
    InquirerSelector  in-process fuzzy prompt built on InquirerPy

``choose_selector`` picks one at runtime from the configured mode and what the
environment offers.
"""

import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Callable, NamedTuple, Optional, Sequence, TextIO

import typer
from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from cblaunch.config import SelectorMode
from cblaunch.errors import (
    InvalidSelectionError,
    NameLookupError,
    NoChoicesError,
    SelectorError,
    SelectorUnavailableError,
)
from cblaunch.helpers import is_available
from cblaunch.ui import inquirer_style, render_choices

FZF = "fzf"
LABEL_SEPARATOR = " - "

# fzf exit statuses that mean "nothing chosen"
FZF_NO_MATCH = 1
FZF_ABORTED = 130


class SelectOption(NamedTuple):
    key: str
    label: str


def parse_selection(line: str) -> str:
    """Return the name part of a ``name - description`` line."""
    return line.rstrip("\r\n").split(LABEL_SEPARATOR, 1)[0]


def index_of(options: Sequence[SelectOption], key: str) -> int:
    """Index of the first option with ``key``.

    Raises:
        NameLookupError: if no option matches
    """
    for index, option in enumerate(options):
        if option.key == key:
            return index
    raise NameLookupError(f"'{key}' does not match any entry.")


class Selector(ABC):
    """Base class for the interactive selection strategies."""

    def select(self, options: Sequence[SelectOption], what: str) -> Optional[int]:
        """Let the user pick one of ``options``.

        Args:
            options: the candidates, in display order
            what: a short noun for prompts and messages ("API key", "model")

        Returns:
            The index of the chosen option, or None if the user cancelled.

        Raises:
            NoChoicesError: if ``options`` is empty
        """
        if not options:
            raise NoChoicesError(what)
        return self._select(options, what)

    @abstractmethod
    def _select(self, options: Sequence[SelectOption], what: str) -> Optional[int]:
        ...


class FzfSelector(Selector):
    """Fuzzy selection through the external ``fzf`` binary."""

    def __init__(self, executable: str = FZF):
        self.executable = executable

    def _select(self, options, what):
        result = subprocess.run(
            [self.executable, "--prompt", f"{what}> ", "--height", "40%", "--reverse"],
            input="\n".join(option.label for option in options),
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
        if result.returncode in (FZF_NO_MATCH, FZF_ABORTED):
            return None
        if result.returncode != 0:
            raise SelectorError(f"{self.executable} exited with status {result.returncode}.")

        line = result.stdout.strip("\r\n")
        if not line:
            return None
        return index_of(options, parse_selection(line))


def _prompt_line(message: str) -> str:
    return typer.prompt(message, default="", show_default=False)


class NumberedSelector(Selector):
    """Built-in fallback: 1-based numbered list plus a line of input."""

    def __init__(self, read_line: Optional[Callable[[str], str]] = None):
        self.read_line = read_line or _prompt_line

    def _select(self, options, what):
        count = len(options)
        typer.echo(f"Available {what}s:")
        render_choices(option.label for option in options)

        raw = self.read_line(f"Select {what} [1-{count}]").strip()
        if not raw:
            return None
        if not raw.isdecimal():
            raise InvalidSelectionError(
                f"Invalid input '{raw}': enter a number between 1 and {count}."
            )
        number = int(raw)
        if not 1 <= number <= count:
            raise InvalidSelectionError(
                f"Invalid choice {number}: enter a number between 1 and {count}."
            )
        return number - 1


class InquirerSelector(Selector):
    """In-process fuzzy prompt, for terminals without fzf."""

    def _select(self, options, what):
        choices = [Choice(value=index, name=option.label) for index, option in enumerate(options)]
        return inquirer.fuzzy(
            message=f"Select {what}:",
            choices=choices,
            style=inquirer_style(),
            mandatory=False,
            border=True,
        ).execute()


def _is_interactive(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def choose_selector(
    mode: SelectorMode = SelectorMode.AUTO,
    stdin: Optional[TextIO] = None,
) -> Selector:
    """Pick a selection strategy.

    ``auto`` uses fzf when it is installed and stdin is a terminal, and the
    numbered list otherwise. Explicit modes are honoured as given.

    Raises:
        SelectorUnavailableError: if fzf is requested but not installed
    """
    mode = SelectorMode(mode)

    if mode is SelectorMode.FZF:
        if not is_available(FZF):
            raise SelectorUnavailableError(
                "fzf was requested but is not installed.",
                hint="Install fzf or pass --selector numbered.",
            )
        return FzfSelector()
    if mode is SelectorMode.INQUIRER:
        return InquirerSelector()
    if mode is SelectorMode.NUMBERED:
        return NumberedSelector()

    if is_available(FZF) and _is_interactive(stdin if stdin is not None else sys.stdin):
        return FzfSelector()
    return NumberedSelector()

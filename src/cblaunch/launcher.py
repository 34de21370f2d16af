# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
CBLAUNCH launcher core.

Resolves an API key and model (quick start or interactive selection), builds
the ``claude-bridge`` command line and runs it as a foreground child whose
exit status becomes ours.

Classes:
    LaunchMode: how the key/model pair is resolved
    CommandSpec: program + arguments of the delegate invocation
    Launcher: orchestrates config validation, resolution and execution
"""

import shlex
import signal
import subprocess
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, TextIO

from cblaunch.config import ApiKeyEntry, ConfigManager, ModelEntry, SelectorMode, Settings
from cblaunch.errors import DelegateNotFoundError, LauncherError, NoSelectionError
from cblaunch.helpers import ExecutableNotFoundError, get_app_path, mask_secret
from cblaunch.selectors import SelectOption, Selector, choose_selector
from cblaunch.ui import render_card, render_status

DELEGATE = "claude-bridge"
DELEGATE_SUBCOMMAND = "openai"
RESUME_FLAG = "--resume"
API_KEY_FLAG = "--apiKey"
BASE_URL_FLAG = "--baseURL"


class LaunchMode(str, Enum):
    AUTO = "auto"
    PROMPT = "prompt"
    RESUME = "resume"


@dataclass(frozen=True)
class CommandSpec:
    """A delegate invocation: program name plus its arguments."""

    program: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def redacted(self) -> str:
        """Shell-quoted command line with the API key masked."""
        shown = []
        mask_next = False
        for part in self.argv:
            shown.append(mask_secret(part) if mask_next else part)
            mask_next = part == API_KEY_FLAG
        return shlex.join(shown)


def exit_status(returncode: int) -> int:
    """Map a subprocess return code to a shell exit status."""
    if returncode < 0:
        # killed by signal -returncode
        return 128 - returncode
    return returncode


@contextmanager
def interrupts_ignored():
    """Ignore SIGINT in this process for the duration of the block."""
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


class Launcher:
    """Resolves credentials and runs the delegate command."""

    def __init__(
        self,
        config_manager: ConfigManager,
        delegate: str = DELEGATE,
        selector_mode: Optional[SelectorMode] = None,
        stdin: Optional[TextIO] = None,
    ):
        self.config = config_manager
        self.delegate = delegate
        self.selector_mode = selector_mode
        self.stdin = stdin
        self.delegate_path: Optional[str] = None

    def check_delegate(self) -> str:
        """Make sure the delegate resolves on PATH and remember where.

        Raises:
            DelegateNotFoundError: if it does not
        """
        try:
            self.delegate_path = get_app_path(self.delegate)
        except ExecutableNotFoundError as e:
            raise DelegateNotFoundError(self.delegate) from e
        return self.delegate_path

    def resolve_by_quick_start(
        self, settings: Settings, api_keys: Sequence[ApiKeyEntry]
    ) -> Optional[tuple[ApiKeyEntry, ModelEntry]]:
        """Return the configured default pair, or None to fall back to prompting.

        The default model id is used as-is; only the API key name is checked.
        """
        if not settings.quick_start:
            return None
        if not settings.default_api_key or not settings.default_model:
            return None

        for entry in api_keys:
            if entry.name == settings.default_api_key:
                return entry, ModelEntry(id=settings.default_model)

        render_status(
            f"Default API key '{settings.default_api_key}' not found, switching to interactive selection.",
            level="warning",
        )
        return None

    def select_api_key(
        self, entries: Sequence[ApiKeyEntry], selector: Selector
    ) -> Optional[ApiKeyEntry]:
        options = [SelectOption(entry.name, entry.label) for entry in entries]
        index = selector.select(options, "API key")
        return None if index is None else entries[index]

    def select_model(
        self, entries: Sequence[ModelEntry], selector: Selector
    ) -> Optional[ModelEntry]:
        options = [SelectOption(entry.id, entry.id) for entry in entries]
        index = selector.select(options, "model")
        return None if index is None else entries[index]

    def resolve(
        self,
        mode: LaunchMode,
        settings: Settings,
        api_keys: Sequence[ApiKeyEntry],
        models: Sequence[ModelEntry],
    ) -> tuple[ApiKeyEntry, ModelEntry]:
        """Resolve the key/model pair for ``mode``.

        Raises:
            NoSelectionError: if the user cancels either prompt
        """
        if mode is LaunchMode.AUTO:
            pair = self.resolve_by_quick_start(settings, api_keys)
            if pair is not None:
                render_status("Quick start: using configured defaults.", level="info")
                return pair

        selector = choose_selector(self.selector_mode or settings.selector, self.stdin)

        api_key = self.select_api_key(api_keys, selector)
        if api_key is None:
            raise NoSelectionError("No API key selected.")

        model = self.select_model(models, selector)
        if model is None:
            raise NoSelectionError("No model selected.")

        return api_key, model

    def build_command(self, api_key: ApiKeyEntry, model: ModelEntry, resume: bool = True) -> CommandSpec:
        args = [
            DELEGATE_SUBCOMMAND,
            model.id,
            BASE_URL_FLAG,
            api_key.base_url,
            API_KEY_FLAG,
            api_key.key,
        ]
        if resume:
            args.append(RESUME_FLAG)
        return CommandSpec(self.delegate, tuple(args))

    def execute(self, command: CommandSpec) -> int:
        """Run ``command`` in the foreground and return its exit status."""
        argv = command.argv
        if self.delegate_path:
            argv[0] = self.delegate_path
        try:
            process = subprocess.Popen(argv)
        except OSError as e:
            raise LauncherError(f"Failed to launch {command.program}: {e}") from e
        # Ctrl-C belongs to the delegate; the handler is swapped after Popen so
        # the child does not inherit SIG_IGN.
        with interrupts_ignored():
            returncode = process.wait()
        return exit_status(returncode)

    def run(
        self,
        mode: LaunchMode = LaunchMode.AUTO,
        resume: Optional[bool] = None,
        dry_run: bool = False,
    ) -> int:
        """Resolve, build and run the delegate command.

        Args:
            mode: resolution mode
            resume: append ``--resume``; None means use the ``alwaysResume`` setting
            dry_run: print the command instead of running it

        Returns:
            The exit status to hand back to the shell.
        """
        mode = LaunchMode(mode)
        if not dry_run:
            self.check_delegate()

        if mode is LaunchMode.RESUME:
            command = CommandSpec(self.delegate, (RESUME_FLAG,))
        else:
            self.config.validate()
            api_keys = self.config.load_api_keys()
            models = self.config.load_models()
            settings = self.config.load_settings()

            api_key, model = self.resolve(mode, settings, api_keys, models)
            if resume is None:
                resume = settings.always_resume
            command = self.build_command(api_key, model, resume=resume)
            render_card(
                f"Launching {self.delegate}",
                [
                    ("API key", api_key.name),
                    ("Endpoint", api_key.base_url),
                    ("Key", mask_secret(api_key.key)),
                    ("Model", model.id),
                    ("Resume", "yes" if resume else "no"),
                ],
            )

        if dry_run:
            render_status(command.redacted(), level="info")
            return 0
        return self.execute(command)

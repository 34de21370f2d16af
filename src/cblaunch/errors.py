"""
CBLAUNCH error types.

Every error here is terminal for the current run: the launch command renders
the message (and hint, when present) and exits with ``exit_code``.
"""

from pathlib import Path
from typing import Iterable, Optional


class LauncherError(Exception):
    """Base class for user-facing launcher failures."""

    exit_code = 1

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class ConfigMissingError(LauncherError):
    """Raised when one or more config files are absent."""

    def __init__(self, paths: Iterable[Path]):
        self.paths = list(paths)
        listing = ", ".join(str(p) for p in self.paths)
        super().__init__(
            f"Missing config file(s): {listing}",
            hint="Create the missing files or point --config-dir at the right directory.",
        )


class ConfigParseError(LauncherError):
    """Raised when a config file is not valid JSON or lacks a required field."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Could not parse {path}: {detail}")


class DelegateNotFoundError(LauncherError):
    """Raised when the delegate executable is not on PATH."""

    def __init__(self, program: str):
        self.program = program
        super().__init__(
            f"{program} not found in system PATH.",
            hint=f"Install {program} and make sure it is on your PATH.",
        )


class InvalidSelectionError(LauncherError):
    """Raised for non-numeric or out-of-range numbered input."""


class NoChoicesError(InvalidSelectionError):
    """Raised when a selector is handed an empty list of options."""

    def __init__(self, what: str):
        super().__init__(
            f"No {what}s available to choose from.",
            hint="Add entries to your config files first.",
        )


class NoSelectionError(LauncherError):
    """Raised when the user cancels a selection or leaves a prompt empty."""


class NameLookupError(LauncherError):
    """Raised when a selected or configured name matches no entry."""


class SelectorError(LauncherError):
    """Raised when the external fuzzy selector fails."""


class SelectorUnavailableError(SelectorError):
    """Raised when an explicitly requested selector cannot be used."""

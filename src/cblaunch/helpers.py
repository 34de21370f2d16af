"""
CBLAUNCH Shared Utility Functions.

This module contains utility functions used across the launcher, the
selectors and the CLI command to avoid circular imports.
"""

import os
import shutil
from typing import Optional


class ExecutableNotFoundError(Exception):
    """Raised when executable cannot be found in system PATH."""
    pass


def get_app_path(exe_name: str = 'claude-bridge') -> str:
    """Find the full path to an executable in a cross-platform way.

    On Windows, prefers .cmd and .exe versions when multiple variants exist,
    since npm-installed tools ship a .cmd shim next to the bare script.

    Args:
        exe_name: Name of the executable to find

    Returns:
        Full path to the executable

    Raises:
        ExecutableNotFoundError: If executable is not found in PATH
        ValueError: If executable name is invalid
    """
    if not exe_name or not exe_name.strip():
        raise ValueError(f'Invalid executable name provided: {exe_name!r}')

    app_path = shutil.which(exe_name)
    if app_path is None:
        raise ExecutableNotFoundError(f'{exe_name} not found in system PATH. Please ensure it is installed and in your PATH.')

    if os.name == 'nt':
        preferred_extensions = ['.cmd', '.exe']
        for ext in preferred_extensions:
            if not exe_name.lower().endswith(ext):
                preferred_path = shutil.which(exe_name + ext)
                if preferred_path:
                    return preferred_path

    return app_path


def is_available(exe_name: str) -> bool:
    """Return True if ``exe_name`` resolves on PATH."""
    return shutil.which(exe_name) is not None


def mask_secret(value: Optional[str]) -> str:
    """Mask an API key for display, keeping only its first and last characters."""
    if not value:
        return "<unset>"
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}...{value[-4:]}"

"""
CBLAUNCH Launch Command.

This module provides the single ``cblaunch`` command: it maps the command-line
flags to a launch mode, runs the launcher and turns launcher errors into a
red status line and exit code 1.
"""

from pathlib import Path
from typing import Optional

import typer

from cblaunch import __version__
from cblaunch.config import CONFIG_DIR_ENV, SelectorMode, get_config_manager
from cblaunch.errors import LauncherError
from cblaunch.launcher import LaunchMode, Launcher
from cblaunch.ui import render_status


def _version_callback(value: bool):
    if value:
        typer.echo(f"cblaunch {__version__}")
        raise typer.Exit()


def launch(
    prompt: bool = typer.Option(False, "--prompt", "-p", help="Always choose the API key and model interactively"),
    resume: bool = typer.Option(False, "--resume", help="Skip selection and run 'claude-bridge --resume'"),
    fresh: bool = typer.Option(False, "--fresh", help="Start a new session instead of resuming the last one"),
    selector: Optional[SelectorMode] = typer.Option(
        None, "--selector", "-s", case_sensitive=False, help="Selection style (default: from settings.json)"
    ),
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", envvar=CONFIG_DIR_ENV, file_okay=False, help="Directory holding the config files"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the command instead of running it"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
):
    """
    Launch claude-bridge with a stored API key and model.

    Without flags the defaults from settings.json are used when quickStart is
    enabled; otherwise you are asked to pick an API key and a model.
    Config files: config.json (apiKeys), models.json (data), settings.json.
    """
    if resume:
        mode = LaunchMode.RESUME
    elif prompt:
        mode = LaunchMode.PROMPT
    else:
        mode = LaunchMode.AUTO

    launcher = Launcher(get_config_manager(config_dir), selector_mode=selector)
    try:
        code = launcher.run(mode, resume=False if fresh else None, dry_run=dry_run)
    except LauncherError as e:
        render_status(e.message, level="error", footer=e.hint)
        raise typer.Exit(e.exit_code)

    raise typer.Exit(code)

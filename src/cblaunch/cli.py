# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
CBLAUNCH Command Line Interface.

This module provides the CLI entry point for CBLAUNCH, a launcher that picks
a stored API key and model and starts ``claude-bridge`` with them.

Usage:
    cblaunch              quick start if configured, otherwise prompt
    cblaunch -p           always prompt for API key and model
    cblaunch --resume     resume the last claude-bridge session
    cblaunch -h           show help
"""

import typer

from cblaunch.commands import launch


app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


# Single command: Typer runs it directly without a subcommand name
app.command()(launch)


if __name__ == "__main__":
    app()

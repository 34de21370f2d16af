"""UI helper exports for the CBLAUNCH CLI."""

from .components import console, render_card, render_choices, render_status
from .theme import THEME, style, inquirer_style

__all__ = [
    "console",
    "render_card",
    "render_choices",
    "render_status",
    "THEME",
    "style",
    "inquirer_style",
]

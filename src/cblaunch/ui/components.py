"""Reusable Rich components for the CBLAUNCH CLI."""

from typing import Iterable, Optional

from rich import box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .theme import style


console = Console()


def _compute_width(padding: int = 4) -> int:
    """Return a width that keeps layouts readable in narrow terminals."""
    try:
        width = console.size.width
    except Exception:  # pragma: no cover - non-terminal consoles
        width = 80
    return max(40, min(width - padding, 78))


def render_card(
    title: Optional[str],
    rows: Iterable[tuple[str, str]],
) -> Panel:
    """Render a card of ``label: value`` rows."""
    text_parts: list[Text] = []
    for label, value in rows:
        line = Text(f"{label}: ", style=style("text_muted"))
        line.append(value, style=style("text_primary"))
        text_parts.append(line)

    group = Group(*text_parts) if text_parts else Text("", style=style("text_primary"))

    panel = Panel(
        Align.left(group),
        title=Text(title, style=f"bold {style('accent')}") if title else None,
        title_align="left",
        border_style=style("border"),
        box=box.ROUNDED,
        padding=(0, 2),
        width=_compute_width(),
    )
    console.print(panel)

    return panel


def render_status(
    message: str,
    level: str = "info",
    footer: Optional[str] = None,
) -> Text:
    """Render a status line with semantic coloring."""
    icons = {
        "success": "✔",
        "warning": "!",
        "error": "✖",
        "info": "•",
    }
    styles = {
        "success": style("success"),
        "warning": style("warning"),
        "error": style("error"),
        "info": style("accent_alt"),
    }

    icon = icons.get(level, icons["info"])
    text_style = styles.get(level, styles["info"])
    status_text = Text(f"{icon} {message}", style=text_style)
    console.print(status_text)

    if footer:
        footer_text = Text(footer, style=style("text_muted"))
        console.print(footer_text)

    return status_text


def render_choices(labels: Iterable[str]) -> None:
    """Print a 1-based numbered list."""
    for number, label in enumerate(labels, start=1):
        line = Text(f"  {number:>2}) ", style=style("accent"))
        line.append(label, style=style("text_primary"))
        console.print(line)

"""Unit tests for ui/components.py."""

from rich.panel import Panel

from cblaunch.ui import console, render_card, render_status


def test_render_card_prints_rows():
    with console.capture() as capture:
        panel = render_card("Launching claude-bridge", [("Model", "gpt-4"), ("Key", "sk-1...abcd")])

    assert isinstance(panel, Panel)
    output = capture.get()
    assert "Model:" in output and "gpt-4" in output
    assert "Key:" in output and "sk-1...abcd" in output


def test_render_status_with_footer():
    with console.capture() as capture:
        render_status("claude-bridge not found", level="error", footer="Install it first.")

    output = capture.get()
    assert "✖ claude-bridge not found" in output
    assert "Install it first." in output

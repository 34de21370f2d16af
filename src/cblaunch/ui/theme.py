"""Color palette shared by Rich output and InquirerPy prompts."""

from InquirerPy import get_style
from InquirerPy.utils import InquirerPyStyle


THEME = {
    "accent": "#5fafff",
    "accent_alt": "#87d7ff",
    "text_primary": "#e4e4e4",
    "text_muted": "#8a8a8a",
    "border": "#4e4e4e",
    "success": "#5fd787",
    "warning": "#ffd75f",
    "error": "#ff5f5f",
}


def style(name: str) -> str:
    """Return the color for a semantic name, falling back to the primary text color."""
    return THEME.get(name, THEME["text_primary"])


def inquirer_style() -> InquirerPyStyle:
    """Build an InquirerPy style matching the Rich palette."""
    return get_style(
        {
            "questionmark": style("accent"),
            "question": "bold",
            "answer": style("accent_alt"),
            "pointer": style("accent"),
            "fuzzy_prompt": style("accent"),
            "fuzzy_match": style("warning"),
            "fuzzy_info": style("text_muted"),
            "fuzzy_border": style("border"),
        },
        style_override=False,
    )

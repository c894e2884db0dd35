"""Terminal colorization for printed index JSON."""

from __future__ import annotations

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def colorize_json(text: str, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return ANSI-highlighted JSON, or ``text`` unchanged when color is off."""
    if no_color:
        return text
    formatter = Terminal256Formatter(style=normalize_style(style))
    return pygments_highlight(text, JsonLexer(), formatter).rstrip("\n")


__all__ = [
    "DEFAULT_STYLE",
    "normalize_style",
    "colorize_json",
]

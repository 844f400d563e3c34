from typing import Dict, Literal, Tuple
from dataclasses import dataclass

# Color names understood by the terminal backend, e.g. "blue" -> curses.COLOR_BLUE
# "default" keeps the terminal's own color.

@dataclass
class ColorPalette:
    background: str
    foreground: str
    accent: str
    error: str
    warning: str
    success: str
    disabled: str
    border: str
    header: str
    selection: str

class AppStyle:
    """Manages application-wide styling with light and dark mode support."""

    # Color palettes for different themes
    _DARK_PALETTE = ColorPalette(
        background="default",
        foreground="white",
        accent="cyan",
        error="red",
        warning="yellow",
        success="green",
        disabled="white",
        border="blue",
        header="yellow",
        selection="blue"
    )

    _LIGHT_PALETTE = ColorPalette(
        background="default",
        foreground="black",
        accent="blue",
        error="red",
        warning="magenta",
        success="green",
        disabled="black",
        border="blue",
        header="magenta",
        selection="cyan"
    )

    def __init__(self, theme: Literal["dark", "light"] = "dark"):
        self._palette = self._DARK_PALETTE if theme == "dark" else self._LIGHT_PALETTE

    def get_color_pairs(self) -> Dict[str, Tuple[str, str]]:
        """(foreground, background) per drawing role."""
        p = self._palette
        return {
            "normal": (p.foreground, p.background),
            "header": (p.header, p.background),
            "selected": (p.foreground, p.selection),
            "border": (p.border, p.background),
            "input": (p.accent, p.background),
            "info": (p.disabled, p.background),
            "error": (p.error, p.background),
            "title": (p.success, p.background),
        }

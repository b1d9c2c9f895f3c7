"""Terminal styling and prompts for the installer."""

from utils.tui.prompts import ask
from utils.tui.theme import Theme, set_theme

__all__ = [
    "Theme",
    "set_theme",
    "ask",
]

"""Theme system with dark and light mode support."""

from dataclasses import dataclass
from typing import Dict


@dataclass
class ThemeColors:
    """Color palette for a terminal theme."""

    primary: str  # Headers, info lines, prompts
    success: str
    warning: str
    error: str

    text_primary: str
    text_secondary: str
    text_muted: str  # Borders, dividers


DARK_THEME = ThemeColors(
    primary="#00D9FF",  # Bright cyan
    success="#10B981",  # Emerald green
    warning="#F59E0B",  # Amber
    error="#EF4444",  # Red
    text_primary="#F0F6FC",
    text_secondary="#8B949E",
    text_muted="#484F58",
)

LIGHT_THEME = ThemeColors(
    primary="#0969DA",  # Blue
    success="#1A7F37",  # Green
    warning="#9A6700",  # Amber
    error="#CF222E",  # Red
    text_primary="#1F2328",
    text_secondary="#57606A",
    text_muted="#8C959F",
)


class Theme:
    """Theme manager."""

    _current_theme: str = "dark"
    _themes: Dict[str, ThemeColors] = {
        "dark": DARK_THEME,
        "light": LIGHT_THEME,
    }

    @classmethod
    def get_colors(cls) -> ThemeColors:
        """Get the current theme colors."""
        return cls._themes[cls._current_theme]

    @classmethod
    def set_theme(cls, name: str) -> None:
        """Set the current theme.

        Args:
            name: Theme name ('dark' or 'light')

        Raises:
            ValueError: If theme name is invalid
        """
        if name not in cls._themes:
            raise ValueError(f"Unknown theme: {name}. Available: {list(cls._themes.keys())}")
        cls._current_theme = name

    @classmethod
    def names(cls) -> list[str]:
        return list(cls._themes.keys())

    @classmethod
    def get_prompt_toolkit_style(cls) -> Dict[str, str]:
        """Get style dict for prompt_toolkit."""
        colors = cls.get_colors()
        return {
            "prompt": f"{colors.primary} bold",
            "": colors.text_primary,  # Default text
        }


def set_theme(name: str) -> None:
    """Set the current theme (convenience function)."""
    Theme.set_theme(name)

"""Configuration management for skills-installer."""

import os

# Path constants are defined here directly to avoid circular imports with utils
# (utils.terminal_ui imports Config, and utils.runtime is in the utils package)
_RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".skills-installer")
_CONFIG_FILE = os.path.join(_RUNTIME_DIR, "config")

_THEMES = ("dark", "light")


def _load_config(path: str) -> dict[str, str]:
    """Parse a KEY=VALUE config file, skipping comments and blank lines."""
    cfg: dict[str, str] = {}
    if not os.path.isfile(path):
        return cfg
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            # Strip inline comments (# ...) from the value
            if "#" in value:
                value = value[: value.index("#")]
            cfg[key.strip()] = value.strip()
    return cfg


_cfg = _load_config(_CONFIG_FILE)


class Config:
    """Configuration for skills-installer.

    Values come from the optional ~/.skills-installer/config file; the file is
    never created automatically. Access values directly via Config.XXX.
    """

    # Logging Configuration (only used with --verbose)
    LOG_LEVEL = _cfg.get("LOG_LEVEL", "DEBUG").upper()

    # Terminal output
    TUI_THEME = _cfg.get("TUI_THEME", "dark")  # "dark" or "light"

    # Default skills source directory (falls back to the working directory)
    SKILLS_SOURCE_DIR = _cfg.get("SKILLS_SOURCE_DIR") or None

    # Destination overrides (None = built-in home-relative default)
    ROOCODE_SKILLS_DIR = _cfg.get("ROOCODE_SKILLS_DIR") or None
    OPENCODE_CONFIG_FILE = _cfg.get("OPENCODE_CONFIG_FILE") or None
    OPENCLAW_SKILLS_DIR = _cfg.get("OPENCLAW_SKILLS_DIR") or None

    @classmethod
    def validate(cls):
        """Validate configuration.

        Raises:
            ValueError: If a configured value is not usable
        """
        if cls.TUI_THEME not in _THEMES:
            raise ValueError(
                f"Unknown TUI_THEME '{cls.TUI_THEME}' in {_CONFIG_FILE}. "
                f"Available: {', '.join(_THEMES)}"
            )
        if cls.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown LOG_LEVEL '{cls.LOG_LEVEL}' in {_CONFIG_FILE}.")

"""Install SKILL.md directories into AI coding assistants."""

from .discovery import discover_skills
from .errors import (
    ConfigFileError,
    DestinationError,
    EmptySelectionError,
    InstallerError,
    InvalidTargetError,
    SkillsNotFoundError,
    UnknownSkillError,
    UsageError,
)
from .report import report_outcome
from .runner import install_to_config, install_to_directory, run_install
from .selection import build_mode, resolve_selection
from .targets import TARGETS, parse_target
from .types import (
    MARKER_FILE,
    ConfigStatus,
    InstallOutcome,
    InstallRequest,
    InteractiveMode,
    NonInteractiveMode,
    SkillUnit,
    TargetKind,
)

__all__ = [
    "ConfigFileError",
    "ConfigStatus",
    "DestinationError",
    "EmptySelectionError",
    "InstallOutcome",
    "InstallRequest",
    "InstallerError",
    "InteractiveMode",
    "InvalidTargetError",
    "MARKER_FILE",
    "NonInteractiveMode",
    "SkillUnit",
    "SkillsNotFoundError",
    "TARGETS",
    "TargetKind",
    "UnknownSkillError",
    "UsageError",
    "build_mode",
    "discover_skills",
    "install_to_config",
    "install_to_directory",
    "parse_target",
    "report_outcome",
    "resolve_selection",
    "run_install",
]

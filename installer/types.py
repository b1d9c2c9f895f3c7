"""Data models for skill installation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

MARKER_FILE = "SKILL.md"


@dataclass(frozen=True)
class SkillUnit:
    name: str
    path: Path
    description: str = ""


class TargetKind(str, Enum):
    ROOCODE = "roocode"
    OPENCODE = "opencode"
    OPENCLAW = "openclaw"


class InstallStrategy(str, Enum):
    COPY = "copy"
    CONFIG = "config"


class ConfigStatus(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class NonInteractiveMode:
    target: TargetKind
    install_all: bool
    skill_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class InteractiveMode:
    pass


Mode = NonInteractiveMode | InteractiveMode


@dataclass(frozen=True)
class InstallRequest:
    target: TargetKind
    skills: tuple[SkillUnit, ...]
    source_dir: Path

    @property
    def names(self) -> list[str]:
        return [skill.name for skill in self.skills]


@dataclass
class InstallOutcome:
    """Result of one installation run.

    For copy targets ``succeeded``/``failed`` hold skill names. The config
    target has no per-skill result and records ``config_status`` instead.
    """

    target: TargetKind
    selected: list[str]
    destination: Path
    succeeded: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    replaced: list[str] = field(default_factory=list)
    config_status: ConfigStatus | None = None
    fatal_error: str | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.failed or self.fatal_error else 0

"""Supported install targets and their destinations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from config import Config

from .errors import InvalidTargetError
from .types import InstallStrategy, TargetKind


def _override_or(value: str | None, default: Callable[[], Path]) -> Path:
    if value:
        return Path(value).expanduser()
    return default()


def roocode_skills_dir() -> Path:
    return _override_or(Config.ROOCODE_SKILLS_DIR, lambda: Path.home() / ".roo" / "skills")


def opencode_config_file() -> Path:
    return _override_or(
        Config.OPENCODE_CONFIG_FILE,
        lambda: Path.home() / ".config" / "opencode" / "opencode.json",
    )


def openclaw_skills_dir() -> Path:
    return _override_or(
        Config.OPENCLAW_SKILLS_DIR,
        lambda: Path.home() / ".openclaw" / "workspace" / "skills",
    )


@dataclass(frozen=True)
class TargetSpec:
    kind: TargetKind
    label: str
    description: str
    strategy: InstallStrategy
    resolve_destination: Callable[[], Path]

    @property
    def destination(self) -> Path:
        return self.resolve_destination()


# Menu order for interactive selection
TARGETS: dict[TargetKind, TargetSpec] = {
    TargetKind.ROOCODE: TargetSpec(
        kind=TargetKind.ROOCODE,
        label="Roo Code (Claude Code)",
        description="Skills copied to ~/.roo/skills/",
        strategy=InstallStrategy.COPY,
        resolve_destination=roocode_skills_dir,
    ),
    TargetKind.OPENCODE: TargetSpec(
        kind=TargetKind.OPENCODE,
        label="OpenCode",
        description="Skills directory configured in ~/.config/opencode/opencode.json",
        strategy=InstallStrategy.CONFIG,
        resolve_destination=opencode_config_file,
    ),
    TargetKind.OPENCLAW: TargetSpec(
        kind=TargetKind.OPENCLAW,
        label="OpenClaw",
        description="Skills copied to ~/.openclaw/workspace/skills/",
        strategy=InstallStrategy.COPY,
        resolve_destination=openclaw_skills_dir,
    ),
}


def target_names() -> list[str]:
    return [kind.value for kind in TARGETS]


def parse_target(value: str) -> TargetKind:
    normalized = value.strip().lower()
    for kind in TARGETS:
        if kind.value == normalized:
            return kind
    raise InvalidTargetError(
        f"Invalid target: {value}. Valid targets: {', '.join(target_names())}"
    )

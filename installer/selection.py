"""Resolve the target and skill selection from command line flags."""

from __future__ import annotations

from typing import Iterable, Sequence

from .errors import EmptySelectionError, UnknownSkillError, UsageError
from .targets import parse_target
from .types import InteractiveMode, Mode, NonInteractiveMode, SkillUnit


def split_skill_list(value: str) -> list[str]:
    names: list[str] = []
    for part in value.split(","):
        name = part.strip()
        if name and name not in names:
            names.append(name)
    return names


def build_mode(target: str | None, install_all: bool, skills: str | None) -> Mode:
    """Decide between interactive and flag-driven mode.

    Raises:
        InvalidTargetError: If ``target`` is not a known target
        UsageError: If a selection flag is given without a target
        EmptySelectionError: If a target is given without a selection flag
    """
    names = split_skill_list(skills) if skills is not None else []

    if target is None:
        if install_all or skills is not None:
            raise UsageError("--all and --skills require --target")
        return InteractiveMode()

    kind = parse_target(target)
    if not install_all and not names:
        raise EmptySelectionError("No skills specified. Use -a for all or -s for specific skills")
    return NonInteractiveMode(target=kind, install_all=install_all, skill_names=tuple(names))


def select_by_names(available: Sequence[SkillUnit], names: Iterable[str]) -> list[SkillUnit]:
    """Map names to discovered skills, failing on any unknown name."""
    by_name = {skill.name: skill for skill in available}
    selected: list[SkillUnit] = []
    missing: list[str] = []
    for name in names:
        skill = by_name.get(name)
        if skill is None:
            if name not in missing:
                missing.append(name)
        elif skill not in selected:
            selected.append(skill)
    if missing:
        raise UnknownSkillError(missing)
    return selected


def resolve_selection(available: Sequence[SkillUnit], mode: NonInteractiveMode) -> list[SkillUnit]:
    if mode.install_all:
        return list(available)
    return select_by_names(available, mode.skill_names)


def parse_index_selection(text: str, count: int) -> tuple[list[int], list[str]]:
    """Parse comma-separated 1-based indices.

    Returns:
        (indices, rejected): zero-based indices in entry order without
        duplicates, and the tokens that were not valid numbers in range
    """
    indices: list[int] = []
    rejected: list[str] = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        if token.isascii() and token.isdigit() and 1 <= int(token) <= count:
            index = int(token) - 1
            if index not in indices:
                indices.append(index)
        else:
            rejected.append(token)
    return indices, rejected

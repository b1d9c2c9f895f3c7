"""Locate installable skill directories."""

from __future__ import annotations

import asyncio
from pathlib import Path

from utils import get_logger

from .errors import SkillsNotFoundError
from .parser import read_description
from .types import MARKER_FILE, SkillUnit

logger = get_logger(__name__)


def _list_skill_dirs(source_dir: Path) -> list[Path]:
    results: list[Path] = []
    for entry in source_dir.iterdir():
        if entry.name.startswith("."):
            continue
        try:
            if entry.is_dir() and (entry / MARKER_FILE).is_file():
                results.append(entry)
        except OSError as e:
            logger.info(f"Skipping unreadable entry {entry}: {e}")
    return sorted(results, key=lambda p: p.name)


async def discover_skills(source_dir: Path) -> list[SkillUnit]:
    """Return the immediate children of ``source_dir`` that contain a SKILL.md.

    Raises:
        SkillsNotFoundError: If ``source_dir`` cannot be listed
    """
    source_dir = source_dir.expanduser().resolve()
    try:
        skill_dirs = await asyncio.to_thread(_list_skill_dirs, source_dir)
    except OSError as e:
        raise SkillsNotFoundError(f"Cannot read skills directory {source_dir}: {e}") from e

    skills: list[SkillUnit] = []
    for skill_dir in skill_dirs:
        description = await read_description(skill_dir / MARKER_FILE)
        skills.append(SkillUnit(name=skill_dir.name, path=skill_dir, description=description))

    logger.info(f"Discovered {len(skills)} skill(s) in {source_dir}")
    return skills

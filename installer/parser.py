"""SKILL.md frontmatter parsing."""

from __future__ import annotations

from pathlib import Path

import aiofiles
import yaml


def split_frontmatter(text: str) -> tuple[dict[str, object], str]:
    lines = text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, text

    end_idx = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end_idx = i
            break

    if end_idx is None:
        return {}, text

    yaml_text = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])

    try:
        data = yaml.safe_load(yaml_text) or {}
    except yaml.YAMLError:
        return {}, text

    if not isinstance(data, dict):
        return {}, body

    return data, body


async def read_text(path: Path) -> str:
    async with aiofiles.open(path, encoding="utf-8") as handle:
        return await handle.read()


async def read_description(skill_file: Path) -> str:
    """Return the frontmatter ``description`` of a SKILL.md, or an empty string."""
    try:
        content = await read_text(skill_file)
    except (OSError, UnicodeDecodeError):
        return ""
    frontmatter, _ = split_frontmatter(content)
    description = frontmatter.get("description", "")
    if description is None:
        return ""
    return " ".join(str(description).split())

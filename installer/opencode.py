"""Point OpenCode at a skills directory by editing its JSON config."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import aiofiles.os

from utils import get_logger

from .errors import ConfigFileError
from .fs import write_text_atomic
from .parser import read_text
from .types import ConfigStatus

SKILLS_DIR_KEY = "skillsDir"

logger = get_logger(__name__)


def parse_config(text: str, path: Path) -> dict[str, Any]:
    """Parse an OpenCode config document.

    Blank documents are treated as an empty object. Anything that is not a
    JSON object raises ConfigFileError so the file is never overwritten.
    """
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigFileError(
            f"{path} is not valid JSON (line {e.lineno}, column {e.colno}: {e.msg}); "
            "leaving it untouched"
        ) from e
    if not isinstance(data, dict):
        raise ConfigFileError(
            f"{path} must contain a JSON object, found {type(data).__name__}; "
            "leaving it untouched"
        )
    return data


def merge_skills_dir(config: dict[str, Any], skills_dir: str) -> tuple[dict[str, Any], bool]:
    """Return ``(config, changed)`` with ``skillsDir`` set to ``skills_dir``."""
    if config.get(SKILLS_DIR_KEY) == skills_dir:
        return config, False
    merged = dict(config)
    merged[SKILLS_DIR_KEY] = skills_dir
    return merged, True


def dump_config(config: dict[str, Any]) -> str:
    return json.dumps(config, indent=2, ensure_ascii=False) + "\n"


async def upsert_skills_dir(config_file: Path, skills_dir: Path) -> ConfigStatus:
    """Set ``skillsDir`` in ``config_file``, preserving every other key.

    Raises:
        ConfigFileError: If the existing file cannot be parsed
        OSError: If the file cannot be read or written
    """
    exists = await aiofiles.os.path.exists(config_file)
    config: dict[str, Any] = {}
    if exists:
        try:
            text = await read_text(config_file)
        except UnicodeDecodeError as e:
            raise ConfigFileError(f"{config_file} is not valid UTF-8; leaving it untouched") from e
        config = parse_config(text, config_file)

    merged, changed = merge_skills_dir(config, str(skills_dir))
    if not changed:
        logger.info(f"{config_file} already points at {skills_dir}")
        return ConfigStatus.UNCHANGED

    await write_text_atomic(config_file, dump_config(merged))
    logger.info(f"Wrote {SKILLS_DIR_KEY}={skills_dir} to {config_file}")
    return ConfigStatus.UPDATED if exists else ConfigStatus.CREATED

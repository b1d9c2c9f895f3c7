"""Shared fixtures for installer tests."""

import logging
from pathlib import Path

import pytest

from config import Config
from utils import logger as log_module


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Ignore any ~/.skills-installer/config on the machine running the tests."""
    monkeypatch.setattr(Config, "SKILLS_SOURCE_DIR", None)
    monkeypatch.setattr(Config, "ROOCODE_SKILLS_DIR", None)
    monkeypatch.setattr(Config, "OPENCODE_CONFIG_FILE", None)
    monkeypatch.setattr(Config, "OPENCLAW_SKILLS_DIR", None)
    monkeypatch.setattr(Config, "TUI_THEME", "dark")
    monkeypatch.setattr(Config, "LOG_LEVEL", "DEBUG")


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


def _write_skill(root: Path, name: str, description: str = "") -> Path:
    skill_dir = root / name
    skill_dir.mkdir(parents=True)
    frontmatter = f"---\nname: {name}\ndescription: {description}\n---\n" if description else ""
    (skill_dir / "SKILL.md").write_text(frontmatter + f"# {name}\n")
    return skill_dir


@pytest.fixture
def make_skill():
    """Factory creating a skill directory with an optional description."""
    return _write_skill


@pytest.fixture
def source_dir(tmp_path) -> Path:
    """Source with skills ``a`` and ``b`` plus a marker-less directory ``c``."""
    root = tmp_path / "source"
    root.mkdir()
    a = _write_skill(root, "a", "First skill.")
    (a / "scripts").mkdir()
    (a / "scripts" / "run.sh").write_text("#!/bin/sh\necho a\n")
    (a / "scripts" / "run.sh").chmod(0o755)
    _write_skill(root, "b")
    (root / "c").mkdir()
    (root / "c" / "README.md").write_text("Not a skill.\n")
    return root


@pytest.fixture
def log_dir(tmp_path, monkeypatch) -> Path:
    """Point file logging at a temp directory and undo setup_logger() afterwards."""
    directory = tmp_path / "logs"
    monkeypatch.setattr(log_module, "get_log_dir", lambda: str(directory))
    monkeypatch.setattr(log_module, "_log_file_path", None)
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield directory
    for handler in logging.root.handlers[:]:
        if handler not in handlers:
            logging.root.removeHandler(handler)
            handler.close()
    logging.root.setLevel(level)

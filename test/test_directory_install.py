"""Tests for the directory-copy and config installers."""

import json
import os
import shutil
import stat

import pytest

from installer import (
    ConfigStatus,
    InstallRequest,
    TargetKind,
    discover_skills,
    install_to_config,
    install_to_directory,
    run_install,
)
from installer.targets import openclaw_skills_dir, opencode_config_file, roocode_skills_dir
from utils import terminal_ui


@pytest.fixture
def messages(monkeypatch):
    calls = {"error": [], "info": [], "success": [], "warning": []}
    monkeypatch.setattr(
        terminal_ui, "print_error", lambda msg, title="Error": calls["error"].append(msg)
    )
    monkeypatch.setattr(terminal_ui, "print_info", lambda msg: calls["info"].append(msg))
    monkeypatch.setattr(terminal_ui, "print_success", lambda msg: calls["success"].append(msg))
    monkeypatch.setattr(terminal_ui, "print_warning", lambda msg: calls["warning"].append(msg))
    monkeypatch.setattr(terminal_ui, "print_header", lambda *args, **kwargs: None)
    return calls


def _snapshot(root):
    result = {}
    for dirpath, _, filenames in os.walk(root):
        for filename in filenames:
            path = os.path.join(dirpath, filename)
            with open(path, "rb") as f:
                result[os.path.relpath(path, root)] = f.read()
    return result


async def _request(source_dir, target=TargetKind.ROOCODE, names=None):
    skills = await discover_skills(source_dir)
    if names is not None:
        skills = [s for s in skills if s.name in names]
    return InstallRequest(target=target, skills=tuple(skills), source_dir=source_dir.resolve())


def test_default_destinations_follow_home(home) -> None:
    assert roocode_skills_dir() == home / ".roo" / "skills"
    assert openclaw_skills_dir() == home / ".openclaw" / "workspace" / "skills"
    assert opencode_config_file() == home / ".config" / "opencode" / "opencode.json"


def test_configured_destination_overrides_default(home, monkeypatch, tmp_path) -> None:
    from config import Config

    monkeypatch.setattr(Config, "ROOCODE_SKILLS_DIR", str(tmp_path / "custom"))
    assert roocode_skills_dir() == tmp_path / "custom"


@pytest.mark.asyncio
async def test_copies_full_tree_and_creates_destination(source_dir, tmp_path, messages) -> None:
    destination = tmp_path / "dest" / "skills"
    request = await _request(source_dir)

    outcome = await install_to_directory(request, destination)

    assert outcome.exit_code == 0
    assert outcome.succeeded == ["a", "b"]
    assert _snapshot(destination / "a") == _snapshot(source_dir / "a")
    assert not (destination / "c").exists()
    assert f"Directory created: {destination}" in messages["success"]


@pytest.mark.asyncio
async def test_preserves_executable_bit(source_dir, tmp_path, messages) -> None:
    destination = tmp_path / "dest"
    await install_to_directory(await _request(source_dir, names={"a"}), destination)

    mode = (destination / "a" / "scripts" / "run.sh").stat().st_mode
    assert mode & stat.S_IXUSR


@pytest.mark.asyncio
async def test_reinstall_replaces_previous_copy(source_dir, tmp_path, messages) -> None:
    destination = tmp_path / "dest"
    request = await _request(source_dir)
    await install_to_directory(request, destination)
    first = _snapshot(destination)
    (destination / "a" / "stale.txt").write_text("left over")

    outcome = await install_to_directory(request, destination)

    assert outcome.exit_code == 0
    assert outcome.replaced == ["a", "b"]
    assert _snapshot(destination) == first
    assert any("Removing existing skill" in w for w in messages["warning"])


@pytest.mark.asyncio
async def test_existing_file_or_symlink_is_replaced(source_dir, tmp_path, messages) -> None:
    destination = tmp_path / "dest"
    destination.mkdir()
    (destination / "a").write_text("not a directory")
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    (elsewhere / "keep.txt").write_text("keep")
    (destination / "b").symlink_to(elsewhere, target_is_directory=True)

    outcome = await install_to_directory(await _request(source_dir), destination)

    assert outcome.exit_code == 0
    assert (destination / "a" / "SKILL.md").is_file()
    assert not (destination / "b").is_symlink()
    assert (elsewhere / "keep.txt").read_text() == "keep"


@pytest.mark.asyncio
async def test_missing_source_fails_only_that_skill(source_dir, tmp_path, messages) -> None:
    destination = tmp_path / "dest"
    request = await _request(source_dir)
    shutil.rmtree(source_dir / "a")

    outcome = await install_to_directory(request, destination)

    assert outcome.failed == ["a"]
    assert outcome.succeeded == ["b"]
    assert outcome.exit_code == 1
    assert (destination / "b" / "SKILL.md").is_file()


@pytest.mark.asyncio
async def test_copy_error_fails_only_that_skill(
    source_dir, tmp_path, messages, monkeypatch
) -> None:
    from installer import runner

    real_copy_tree = runner.copy_tree

    async def copy_tree(src, dst):
        if src.name == "a":
            raise OSError(28, "No space left on device")
        await real_copy_tree(src, dst)

    monkeypatch.setattr(runner, "copy_tree", copy_tree)
    destination = tmp_path / "dest"

    outcome = await install_to_directory(await _request(source_dir), destination)

    assert outcome.failed == ["a"]
    assert outcome.succeeded == ["b"]
    assert outcome.exit_code == 1
    assert (destination / "b" / "SKILL.md").is_file()
    assert any("No space left on device" in e for e in messages["error"])


@pytest.mark.asyncio
async def test_symlinks_inside_skill_are_recreated(tmp_path, make_skill, messages) -> None:
    source = tmp_path / "src"
    source.mkdir()
    skill_dir = make_skill(source, "s")
    (skill_dir / "real").mkdir()
    (skill_dir / "real" / "f.txt").write_text("data")
    (skill_dir / "link").symlink_to("real", target_is_directory=True)
    (skill_dir / "doc.md").symlink_to("SKILL.md")
    (skill_dir / "dangling").symlink_to("nowhere")
    destination = tmp_path / "dest"

    outcome = await install_to_directory(await _request(source), destination)

    installed = destination / "s"
    assert outcome.succeeded == ["s"]
    assert (installed / "link").is_symlink()
    assert os.readlink(installed / "link") == "real"
    assert (installed / "link" / "f.txt").read_text() == "data"
    assert (installed / "doc.md").is_symlink()
    assert os.readlink(installed / "dangling") == "nowhere"



@pytest.mark.asyncio
async def test_installing_onto_itself_is_refused(source_dir, messages) -> None:
    request = await _request(source_dir, names={"b"})

    outcome = await install_to_directory(request, source_dir)

    assert outcome.failed == ["b"]
    assert (source_dir / "b" / "SKILL.md").is_file()


@pytest.mark.asyncio
async def test_uncreatable_destination_is_fatal(source_dir, tmp_path, messages) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")

    outcome = await install_to_directory(await _request(source_dir), blocker / "skills")

    assert outcome.exit_code == 1
    assert outcome.fatal_error
    assert outcome.succeeded == []
    assert outcome.failed == []


@pytest.mark.asyncio
async def test_config_install_points_at_source(source_dir, tmp_path, messages) -> None:
    config_file = tmp_path / "cfg" / "opencode.json"
    request = await _request(source_dir, target=TargetKind.OPENCODE)

    first = await install_to_config(request, config_file)
    second = await install_to_config(request, config_file)

    assert first.config_status == ConfigStatus.CREATED
    assert second.config_status == ConfigStatus.UNCHANGED
    assert second.exit_code == 0
    assert json.loads(config_file.read_text()) == {"skillsDir": str(source_dir.resolve())}
    assert any("already configured" in m for m in messages["success"])
    assert not (tmp_path / "cfg" / "a").exists()


@pytest.mark.asyncio
async def test_config_install_with_broken_file_fails(source_dir, tmp_path, messages) -> None:
    config_file = tmp_path / "opencode.json"
    config_file.write_text("{broken")
    request = await _request(source_dir, target=TargetKind.OPENCODE)

    outcome = await install_to_config(request, config_file)

    assert outcome.exit_code == 1
    assert outcome.config_status is None
    assert config_file.read_text() == "{broken"


@pytest.mark.asyncio
async def test_run_install_dispatches_by_target(source_dir, home, messages) -> None:
    copy_outcome = await run_install(await _request(source_dir, TargetKind.OPENCLAW))
    config_outcome = await run_install(await _request(source_dir, TargetKind.OPENCODE))

    assert (home / ".openclaw" / "workspace" / "skills" / "a" / "SKILL.md").is_file()
    assert copy_outcome.destination == home / ".openclaw" / "workspace" / "skills"
    assert config_outcome.config_status == ConfigStatus.CREATED
    assert (home / ".config" / "opencode" / "opencode.json").is_file()

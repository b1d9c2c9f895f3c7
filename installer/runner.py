"""Run an install request against its target."""

from __future__ import annotations

import asyncio
from pathlib import Path

import aiofiles.os

from utils import get_logger, terminal_ui

from .errors import ConfigFileError, DestinationError
from .fs import copy_tree, ensure_directory, path_exists, remove_tree
from .opencode import upsert_skills_dir
from .targets import TARGETS
from .types import ConfigStatus, InstallOutcome, InstallRequest, InstallStrategy, SkillUnit

logger = get_logger(__name__)


async def _ensure_destination(path: Path) -> None:
    if await ensure_directory(path):
        terminal_ui.print_success(f"Directory created: {path}")


async def _same_directory(a: Path, b: Path) -> bool:
    if not await path_exists(b):
        return False
    return await asyncio.to_thread(lambda: a.resolve() == b.resolve())


async def _install_one(skill: SkillUnit, destination: Path, outcome: InstallOutcome) -> None:
    target_dir = destination / skill.name
    terminal_ui.print_info(f"Installing: {skill.name}")

    if not await aiofiles.os.path.isdir(skill.path):
        terminal_ui.print_error(f"Source directory not found: {skill.path}", title="Install Error")
        outcome.failed.append(skill.name)
        return

    if await _same_directory(skill.path, target_dir):
        terminal_ui.print_error(
            f"Source and destination are the same directory: {target_dir}", title="Install Error"
        )
        outcome.failed.append(skill.name)
        return

    try:
        if await path_exists(target_dir):
            terminal_ui.print_warning(f"Removing existing skill: {target_dir}")
            await remove_tree(target_dir)
            outcome.replaced.append(skill.name)
        await copy_tree(skill.path, target_dir)
    except OSError as e:
        logger.info(f"Failed to install {skill.name} to {target_dir}: {e}")
        terminal_ui.print_error(f"Failed to install {skill.name}: {e}", title="Install Error")
        outcome.failed.append(skill.name)
        return

    logger.info(f"Installed {skill.name} to {target_dir}")
    terminal_ui.print_success(f"Installed: {skill.name}")
    outcome.succeeded.append(skill.name)


async def install_to_directory(request: InstallRequest, destination: Path) -> InstallOutcome:
    """Copy each selected skill into ``destination``, replacing older copies.

    A failure on one skill does not stop the others. Failing to create
    ``destination`` is recorded as a fatal error and nothing is copied.
    """
    spec = TARGETS[request.target]
    terminal_ui.print_header(f"Installing to {spec.label}")
    outcome = InstallOutcome(target=request.target, selected=request.names, destination=destination)

    try:
        await _ensure_destination(destination)
    except DestinationError as e:
        terminal_ui.print_error(str(e), title=e.title)
        outcome.fatal_error = str(e)
        return outcome

    for skill in request.skills:
        await _install_one(skill, destination, outcome)
    return outcome


async def install_to_config(request: InstallRequest, config_file: Path) -> InstallOutcome:
    """Point the target's JSON config at the skills source directory."""
    spec = TARGETS[request.target]
    terminal_ui.print_header(f"Configuring for {spec.label}")
    outcome = InstallOutcome(target=request.target, selected=request.names, destination=config_file)

    try:
        await _ensure_destination(config_file.parent)
        if await aiofiles.os.path.exists(config_file):
            terminal_ui.print_info("Reading existing configuration...")
        status = await upsert_skills_dir(config_file, request.source_dir)
    except (DestinationError, ConfigFileError) as e:
        terminal_ui.print_error(str(e), title=e.title)
        outcome.fatal_error = str(e)
        return outcome
    except OSError as e:
        message = f"Failed to write configuration {config_file}: {e}"
        terminal_ui.print_error(message, title="Configuration File Error")
        outcome.fatal_error = message
        return outcome

    outcome.config_status = status
    if status == ConfigStatus.UNCHANGED:
        terminal_ui.print_success(f"Skills directory already configured: {request.source_dir}")
    else:
        terminal_ui.print_success(f"Configuration {status.value}: {config_file}")
    return outcome


async def run_install(request: InstallRequest) -> InstallOutcome:
    spec = TARGETS[request.target]
    destination = spec.destination
    logger.info(
        f"Installing {len(request.skills)} skill(s) to {spec.kind.value} ({destination})"
    )
    if spec.strategy == InstallStrategy.CONFIG:
        return await install_to_config(request, destination)
    return await install_to_directory(request, destination)

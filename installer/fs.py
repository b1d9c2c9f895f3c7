"""Filesystem helpers for copying skills and writing config files."""

from __future__ import annotations

import asyncio
import os
import shutil
from pathlib import Path

import aiofiles
import aiofiles.os

from .errors import DestinationError


async def copy_file(src: Path, dst: Path) -> None:
    async with aiofiles.open(src, "rb") as reader, aiofiles.open(dst, "wb") as writer:
        while True:
            chunk = await reader.read(1024 * 128)
            if not chunk:
                break
            await writer.write(chunk)
    await asyncio.to_thread(shutil.copymode, src, dst)


async def copy_symlink(src: Path, dst: Path) -> None:
    link_target = await asyncio.to_thread(os.readlink, src)
    await asyncio.to_thread(os.symlink, link_target, dst)


async def copy_tree(src: Path, dst: Path) -> None:
    """Copy ``src`` into ``dst``; symlinks are recreated, not followed."""

    def _walk() -> list[tuple[Path, list[str], list[str]]]:
        return [(Path(root), dirs, files) for root, dirs, files in os.walk(src)]

    for root, dirs, files in await asyncio.to_thread(_walk):
        rel = root.relative_to(src)
        target_dir = dst / rel
        await aiofiles.os.makedirs(target_dir, exist_ok=True)
        for filename in files:
            if await aiofiles.os.path.islink(root / filename):
                await copy_symlink(root / filename, target_dir / filename)
            else:
                await copy_file(root / filename, target_dir / filename)
        for dirname in dirs:
            # os.walk lists directory symlinks here but does not descend into them
            if await aiofiles.os.path.islink(root / dirname):
                await copy_symlink(root / dirname, target_dir / dirname)
            else:
                await aiofiles.os.makedirs(target_dir / dirname, exist_ok=True)


async def path_exists(path: Path) -> bool:
    """True for anything at ``path``, including dangling symlinks."""
    return await asyncio.to_thread(os.path.lexists, path)


async def remove_tree(path: Path) -> None:
    if not await path_exists(path):
        return
    if await aiofiles.os.path.islink(path) or not await aiofiles.os.path.isdir(path):
        await aiofiles.os.remove(path)
        return
    await asyncio.to_thread(shutil.rmtree, path)


async def ensure_directory(path: Path) -> bool:
    """Create ``path`` (and parents) if missing.

    Returns:
        True if the directory was created, False if it already existed

    Raises:
        DestinationError: If the directory cannot be created
    """
    if await aiofiles.os.path.isdir(path):
        return False
    try:
        await aiofiles.os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise DestinationError(f"Failed to create directory: {path} ({e})") from e
    return True


async def write_text_atomic(path: Path, content: str) -> None:
    """Replace the file behind ``path`` (following symlinks), keeping its mode."""
    path = await asyncio.to_thread(path.resolve)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
            await f.write(content)
        if await aiofiles.os.path.exists(path):
            await asyncio.to_thread(shutil.copymode, path, tmp_path)
        await asyncio.to_thread(os.replace, tmp_path, path)
    finally:
        if await path_exists(tmp_path):
            await aiofiles.os.remove(tmp_path)

"""Main entry point for skills-installer."""

import argparse
import asyncio
import importlib.metadata
import os
import sys
from pathlib import Path

from config import Config
from installer import (
    InstallerError,
    InstallRequest,
    InteractiveMode,
    SkillUnit,
    TargetKind,
    build_mode,
    discover_skills,
    report_outcome,
    resolve_selection,
    run_install,
)
from installer.errors import EmptySelectionError
from installer.targets import TARGETS
from interactive import confirm, select_skills, select_target
from utils import get_log_file_path, get_logger, setup_logger, terminal_ui

logger = get_logger(__name__)

EXIT_INTERRUPTED = 130

_EPILOG = """\
target systems:
  roocode    skills are copied to ~/.roo/skills/
  opencode   skills directory is set as "skillsDir" in ~/.config/opencode/opencode.json
  openclaw   skills are copied to ~/.openclaw/workspace/skills/

Each skill is a directory containing a SKILL.md file.

examples:
  install-skills                          interactive mode
  install-skills -t roocode -a            install all skills to Roo Code
  install-skills -t opencode -s api-design,coding-standards
  install-skills -t openclaw -a --source ~/my-skills
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        terminal_ui.print_error(message, title="Invalid Arguments")
        terminal_ui.print_info("Use -h or --help for usage information")
        self.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="install-skills",
        description="Install skills into Roo Code, OpenCode, or OpenClaw",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    try:
        version = importlib.metadata.version("skills-installer")
    except importlib.metadata.PackageNotFoundError:
        version = "dev"
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {version}")

    parser.add_argument(
        "--target",
        "-t",
        type=str,
        metavar="SYSTEM",
        help="Target system: roocode, opencode, or openclaw (omit for interactive mode)",
    )
    parser.add_argument(
        "--all",
        "-a",
        action="store_true",
        help="Install all available skills",
    )
    parser.add_argument(
        "--skills",
        "-s",
        type=str,
        metavar="LIST",
        help="Comma-separated list of skills to install",
    )
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="List available skills and exit",
    )
    parser.add_argument(
        "--source",
        type=str,
        metavar="DIR",
        help="Directory containing the skills (default: current directory)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging to ~/.skills-installer/logs/",
    )
    return parser


def resolve_source_dir(source: str | None) -> Path:
    """Pick the skills source directory: --source, then config, then cwd."""
    value = source or Config.SKILLS_SOURCE_DIR or os.getcwd()
    return Path(value).expanduser().resolve()


async def _choose_interactively(
    source_dir: Path, available: list[SkillUnit]
) -> tuple[TargetKind, list[SkillUnit]]:
    terminal_ui.print_header("Skills Installation", subtitle=f"Source directory: {source_dir}")
    terminal_ui.print_info("Available skills:")
    terminal_ui.print_skill_list(available)

    target = await select_target()
    skills = await select_skills(available)
    return target, skills


async def _run(args: argparse.Namespace) -> int:
    source_dir = resolve_source_dir(args.source)
    available = await discover_skills(source_dir)
    if not available:
        terminal_ui.print_error(f"No skills found in {source_dir}", title="No Skills")
        terminal_ui.print_info("Each skill must be a directory containing a SKILL.md file")
        return 1

    if args.list:
        terminal_ui.print_info(f"Available skills in {source_dir}:")
        terminal_ui.print_skill_list(available)
        return 0

    mode = build_mode(args.target, args.all, args.skills)
    interactive = isinstance(mode, InteractiveMode)
    if interactive:
        target, skills = await _choose_interactively(source_dir, available)
    else:
        target = mode.target
        skills = resolve_selection(available, mode)

    if not skills:
        raise EmptySelectionError("No skills selected for installation")

    request = InstallRequest(target=target, skills=tuple(skills), source_dir=source_dir)

    terminal_ui.console.print()
    terminal_ui.print_info(f"Target system: {TARGETS[target].label} ({target.value})")
    terminal_ui.print_info(f"Skills to install: {' '.join(request.names)}")

    if interactive and not await confirm():
        terminal_ui.print_info("Installation cancelled")
        return 0

    outcome = await run_install(request)
    return report_outcome(request, outcome)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Initialize logging only in verbose mode
    if args.verbose:
        setup_logger()

    try:
        Config.validate()
    except ValueError as e:
        terminal_ui.print_error(str(e), title="Configuration Error")
        return 1

    try:
        exit_code = asyncio.run(_run(args))
    except InstallerError as e:
        logger.info(f"Installation aborted: {e}")
        terminal_ui.print_error(str(e), title=e.title)
        exit_code = 1
    except (KeyboardInterrupt, EOFError):
        terminal_ui.console.print()
        terminal_ui.print_info("Installation cancelled")
        exit_code = EXIT_INTERRUPTED

    log_file = get_log_file_path()
    if args.verbose and log_file:
        terminal_ui.print_log_location(log_file)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())

"""Interactive target and skill selection."""

from __future__ import annotations

from typing import Sequence

from installer.errors import EmptySelectionError
from installer.selection import parse_index_selection
from installer.targets import TARGETS
from installer.types import SkillUnit, TargetKind
from utils import get_logger, terminal_ui
from utils.tui.prompts import ask

logger = get_logger(__name__)


async def select_target() -> TargetKind:
    """Ask for a target by menu number until a valid one is entered."""
    kinds = list(TARGETS)
    options = [
        (str(idx), f"{spec.label} - {spec.description}")
        for idx, spec in enumerate(TARGETS.values(), start=1)
    ]
    terminal_ui.print_menu("What platform do you want to install to?", options)

    while True:
        choice = await ask("Choose platform: ")
        if choice.isascii() and choice.isdigit() and 1 <= int(choice) <= len(kinds):
            return kinds[int(choice) - 1]
        terminal_ui.print_error(
            f"Invalid choice. Please enter a number from 1 to {len(kinds)}.", title="Invalid Choice"
        )


async def select_skills(available: Sequence[SkillUnit]) -> list[SkillUnit]:
    """Ask for all skills or a comma-separated list of menu numbers.

    Raises:
        EmptySelectionError: If none of the entered numbers is valid
    """
    terminal_ui.print_menu(
        "Select skills to install:",
        [("a", "Install all skills"), ("s", "Select specific skills")],
    )

    while True:
        choice = (await ask("Enter choice [a: All / s: Select skills]: ")).lower()
        if choice == "a":
            return list(available)
        if choice == "s":
            break
        terminal_ui.print_error("Invalid choice. Please enter 'a' or 's'.", title="Invalid Choice")

    terminal_ui.print_skill_list(available)
    terminal_ui.print_info("Enter skill numbers (comma-separated, e.g., 1,3,5):")
    indices, rejected = parse_index_selection(await ask("> "), len(available))
    for token in rejected:
        terminal_ui.print_warning(f"Invalid number: {token} (skipping)")
    if not indices:
        raise EmptySelectionError("No valid skill numbers entered")

    logger.info(f"Interactive selection: {indices}")
    return [available[i] for i in indices]


async def confirm(message: str = "Proceed with installation? [y/N]: ") -> bool:
    return (await ask(message)) in ("y", "Y")

"""Terminal UI utilities using Rich library for output.

Status lines go to stdout; errors go to stderr so a failing run can be
told apart from its progress output.
"""

from typing import Any, Dict, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from config import Config
from utils.tui.theme import Theme, set_theme

# Initialize theme from config (an unknown name is reported by Config.validate)
if Config.TUI_THEME in Theme.names():
    set_theme(Config.TUI_THEME)

console = Console()
err_console = Console(stderr=True)


def _get_colors():
    """Get current theme colors."""
    return Theme.get_colors()


def print_header(title: str, subtitle: Optional[str] = None) -> None:
    """Print a formatted header panel.

    Args:
        title: Main title text
        subtitle: Optional subtitle text
    """
    colors = _get_colors()
    content = f"[bold {colors.primary}]{title}[/bold {colors.primary}]"
    if subtitle:
        content += f"\n[{colors.text_secondary}]{subtitle}[/{colors.text_secondary}]"

    console.print()
    console.print(Panel(content, border_style=colors.primary, box=box.DOUBLE, padding=(0, 2)))


def print_skill_list(skills: Sequence[Any]) -> None:
    """Print discovered skills as a numbered table.

    Args:
        skills: Objects with ``name`` and ``description`` attributes
    """
    colors = _get_colors()
    table = Table(
        show_header=True,
        header_style=f"bold {colors.primary}",
        box=box.SIMPLE,
        border_style=colors.text_muted,
        padding=(0, 1),
    )
    table.add_column("#", justify="right", style=colors.text_secondary)
    table.add_column("Skill", style=f"{colors.primary} bold")
    table.add_column("Description", style=colors.text_secondary)

    for idx, skill in enumerate(skills, start=1):
        table.add_row(str(idx), Text(skill.name), Text(skill.description or ""))

    console.print(table)


def print_menu(title: str, options: Sequence[tuple[str, str]]) -> None:
    """Print a titled menu of ``(key, label)`` options."""
    colors = _get_colors()
    console.print()
    print_info(title)
    for key, label in options:
        console.print(f"  [bold {colors.primary}]{key}.[/bold {colors.primary}] {escape(label)}")
    console.print()


def print_summary(title: str, rows: Dict[str, Any], success: bool = True) -> None:
    """Print a boxed key/value summary.

    Args:
        title: Panel title
        rows: Ordered mapping of labels to values
        success: Colors the border green when True, red otherwise
    """
    colors = _get_colors()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style=f"{colors.primary} bold")
    table.add_column("Value", style=colors.text_primary)

    for key, value in rows.items():
        table.add_row(key, Text(str(value)))

    border = colors.success if success else colors.error
    console.print()
    console.print(
        Panel(
            table,
            title=f"[bold {border}]{title}[/bold {border}]",
            border_style=border,
            box=box.ROUNDED,
            padding=(1, 2),
        )
    )


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message.

    Args:
        message: Error message
        title: Error title (default: "Error")
    """
    colors = _get_colors()
    err_console.print(
        Panel(
            f"[{colors.error}]{escape(message)}[/{colors.error}]",
            title=f"[bold {colors.error}]{title}[/bold {colors.error}]",
            border_style=colors.error,
            box=box.ROUNDED,
        )
    )


def print_warning(message: str) -> None:
    """Print a warning message.

    Args:
        message: Warning message
    """
    colors = _get_colors()
    console.print(f"[{colors.warning}]⚠ {escape(message)}[/{colors.warning}]")


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Success message
    """
    colors = _get_colors()
    console.print(f"[{colors.success}]✓ {escape(message)}[/{colors.success}]")


def print_info(message: str) -> None:
    """Print an info message.

    Args:
        message: Info message
    """
    colors = _get_colors()
    console.print(f"[{colors.primary}]ℹ {escape(message)}[/{colors.primary}]")


def print_log_location(log_file: str) -> None:
    """Print log file location.

    Args:
        log_file: Path to log file
    """
    colors = _get_colors()
    console.print()
    console.print(f"[{colors.text_muted}]Detailed logs: {escape(log_file)}[/{colors.text_muted}]")


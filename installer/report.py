"""Summaries printed after an installation run."""

from __future__ import annotations

from utils import terminal_ui

from .targets import TARGETS
from .types import InstallOutcome, InstallRequest, InstallStrategy


def report_outcome(request: InstallRequest, outcome: InstallOutcome) -> int:
    """Print the run summary and return the process exit code."""
    ok = outcome.exit_code == 0

    if TARGETS[outcome.target].strategy == InstallStrategy.CONFIG:
        rows = {
            "Skills directory": request.source_dir,
            "Config file": outcome.destination,
            "Selected skills": len(request.skills),
        }
        if outcome.config_status is not None:
            rows["Status"] = outcome.config_status.value
        if outcome.fatal_error:
            rows["Error"] = outcome.fatal_error
        terminal_ui.print_summary("Configuration Summary", rows, success=ok)
    else:
        rows = {
            "Destination": outcome.destination,
            "Total skills": len(outcome.selected),
            "Successful": len(outcome.succeeded),
        }
        if outcome.replaced:
            rows["Replaced"] = len(outcome.replaced)
        if outcome.failed:
            rows["Failed"] = f"{len(outcome.failed)} ({', '.join(outcome.failed)})"
        if outcome.fatal_error:
            rows["Error"] = outcome.fatal_error
        terminal_ui.print_summary("Installation Summary", rows, success=ok)

    if ok:
        terminal_ui.print_success("Installation completed successfully!")
    else:
        terminal_ui.print_error("Installation completed with errors", title="Installation Failed")
    return outcome.exit_code

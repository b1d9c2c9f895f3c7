"""Runtime directory management.

Runtime data lives under ~/.skills-installer/:
- config: Optional configuration file (read by config.py, never created)
- logs/: Log files (only created with --verbose)
"""

import os

RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".skills-installer")


def get_log_dir() -> str:
    """Get the log directory path.

    Returns:
        Path to ~/.skills-installer/logs/
    """
    return os.path.join(RUNTIME_DIR, "logs")

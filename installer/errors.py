"""Exceptions raised while resolving or running an installation."""

from __future__ import annotations

from typing import Iterable


class InstallerError(Exception):
    """Base installation error."""

    title = "Error"


class SkillsNotFoundError(InstallerError):
    title = "No Skills"


class UsageError(InstallerError):
    title = "Invalid Arguments"


class InvalidTargetError(UsageError):
    title = "Invalid Target"


class UnknownSkillError(InstallerError):
    title = "Unknown Skill"

    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(f"Skill not found: {', '.join(self.names)}")


class EmptySelectionError(InstallerError):
    title = "Nothing Selected"


class DestinationError(InstallerError):
    title = "Destination Error"


class ConfigFileError(InstallerError):
    title = "Configuration File Error"

"""Fatal error taxonomy surfaced by the CLI with a non-zero exit."""

from __future__ import annotations


class AutogoalsError(RuntimeError):
    """Base class for errors that abort a run."""


class ConfigError(AutogoalsError):
    """Invalid environment configuration."""


class PathNotFoundError(AutogoalsError):
    """Project directory does not exist."""


class StatusFileMissingError(AutogoalsError):
    """Project has no goals status file."""


class GoalsReadError(AutogoalsError):
    """Status file could not be loaded."""


class GoalsIoError(GoalsReadError):
    """Status file is missing or unreadable."""


class GoalsFormatError(GoalsReadError):
    """Status file content does not match the expected structure."""


class SessionLaunchError(AutogoalsError):
    """Agent process could not be started."""

"""Runtime configuration for the session runner."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path, PurePath

from autogoals.errors import ConfigError

DEFAULT_AGENT_COMMAND = "claude"
DEFAULT_GOALS_FILENAME = "goals.yaml"
DEFAULT_LOGS_DIR = ".autogoals/logs"


@dataclass(slots=True)
class Settings:
    """Runner settings resolved from the environment."""

    agent_command: str = DEFAULT_AGENT_COMMAND
    goals_filename: str = DEFAULT_GOALS_FILENAME
    capture_output: bool = False
    logs_dir: Path = Path(DEFAULT_LOGS_DIR)

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment with defaults matching a plain ``claude`` setup."""

        return cls(
            agent_command=os.getenv("AUTOGOALS_AGENT_COMMAND", DEFAULT_AGENT_COMMAND),
            goals_filename=os.getenv("AUTOGOALS_GOALS_FILENAME", DEFAULT_GOALS_FILENAME),
            capture_output=_env_bool("AUTOGOALS_CAPTURE_OUTPUT", default=False),
            logs_dir=Path(os.getenv("AUTOGOALS_LOGS_DIR", DEFAULT_LOGS_DIR)),
        )

    def validate(self) -> None:
        """Raise configuration error if the agent command or goals filename is unusable."""

        self.agent_argv()
        filename = self.goals_filename.strip()
        if not filename:
            raise ConfigError("AUTOGOALS_GOALS_FILENAME must not be empty.")
        pure = PurePath(filename)
        if pure.is_absolute() or ".." in pure.parts:
            raise ConfigError(
                "AUTOGOALS_GOALS_FILENAME must be relative to the project directory: "
                f"{self.goals_filename!r}",
            )

    def agent_argv(self) -> tuple[str, ...]:
        try:
            argv = shlex.split(self.agent_command)
        except ValueError as error:
            raise ConfigError(
                f"Invalid AUTOGOALS_AGENT_COMMAND {self.agent_command!r}: {error}",
            ) from error
        if not argv:
            raise ConfigError("AUTOGOALS_AGENT_COMMAND must not be empty.")
        return tuple(argv)

    def goals_path(self, project_path: Path) -> Path:
        return project_path / self.goals_filename.strip()

    def logs_root(self, project_path: Path) -> Path:
        return self.logs_dir if self.logs_dir.is_absolute() else project_path / self.logs_dir

    def session_log_paths(self, project_path: Path, session_number: int) -> tuple[Path, Path]:
        """Return stdout/stderr log paths for one captured session."""

        logs_root = self.logs_root(project_path)
        stem = f"session-{session_number:03d}"
        return logs_root / f"{stem}.stdout.log", logs_root / f"{stem}.stderr.log"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ConfigError(f"Invalid boolean value for {name}: {value!r}")

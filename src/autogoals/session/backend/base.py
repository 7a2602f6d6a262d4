"""Backend interface for running one agent session."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(slots=True)
class SessionRunRequest:
    """Inputs required to execute one agent session."""

    project_path: Path
    command: tuple[str, ...]
    session_number: int
    attach_streams: bool = True
    stdout_path: Path | None = None
    stderr_path: Path | None = None


@dataclass(slots=True)
class SessionRunResult:
    """Exit status of a finished session.

    ``exit_code`` is ``-1`` when the process did not exit normally, for
    example when it was killed by a signal; ``signal_number`` then holds the
    signal.
    """

    exit_code: int
    signal_number: int | None = None
    elapsed_seconds: float = 0.0
    stdout_path: Path | None = None
    stderr_path: Path | None = None

    @property
    def success(self) -> bool:
        return self.exit_code == 0


class SessionBackend(Protocol):
    """Protocol implemented by session runners."""

    def run(self, request: SessionRunRequest) -> SessionRunResult:
        """Run a session to completion and return its exit status."""

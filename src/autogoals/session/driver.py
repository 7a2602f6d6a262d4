"""Session loop: keep launching agent sessions while goals.yaml has pending work."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from autogoals.config import Settings
from autogoals.errors import GoalsReadError, PathNotFoundError, StatusFileMissingError
from autogoals.goals import GoalSet, StatusCounts, read_goals
from autogoals.session.backend import SessionBackend, SessionRunRequest, SessionRunResult

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


@dataclass(slots=True)
class RunSummary:
    """Outcome of a finished run."""

    sessions_run: int
    sessions_failed: int
    counts: StatusCounts


class SessionDriver:
    """Re-read the status file, launch a session, repeat until nothing is pending.

    There is no iteration cap: the loop ends only when the agent marks the
    remaining goals done, or on a fatal error. A session that exits non-zero
    is reported and the loop carries on, since the agent may have made
    progress before failing.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        backend: SessionBackend,
        report: Reporter,
    ) -> None:
        self._settings = settings
        self._backend = backend
        self._report = report

    def run(self, project_path: Path) -> RunSummary:
        goals_path = self._check_project(project_path)
        command = self._settings.agent_argv()

        session_number = 1
        sessions_failed = 0
        while True:
            goal_set = self._load(goals_path)
            counts = goal_set.count_by_status()
            self._report("")
            self._report(
                f"Goal Status: {counts.completed}/{len(goal_set)} completed, "
                f"{counts.active} in progress, {counts.pending} pending",
            )

            if not goal_set.has_pending_work():
                self._report("")
                self._report("All goals completed!")
                break

            self._report("")
            self._report(f"Starting agent session #{session_number}...")
            self._report("")
            result = self._backend.run(
                self._build_request(project_path, command, session_number),
            )
            self._report("")
            self._report_outcome(session_number, result)
            if not result.success:
                sessions_failed += 1

            session_number += 1
            self._report("Checking for remaining work...")

        return RunSummary(
            sessions_run=session_number - 1,
            sessions_failed=sessions_failed,
            counts=counts,
        )

    def _check_project(self, project_path: Path) -> Path:
        self._report(f"Project: {project_path}")
        if not project_path.exists():
            raise PathNotFoundError(f"Project path does not exist: {project_path}")

        goals_path = self._settings.goals_path(project_path)
        if not goals_path.is_file():
            raise StatusFileMissingError(
                f"No {goals_path.name} found in {project_path}. "
                "Create one first or run 'autogoals init'.",
            )
        self._report(f"Found {goals_path.name}")
        return goals_path

    def _load(self, goals_path: Path) -> GoalSet:
        try:
            return read_goals(goals_path)
        except GoalsReadError as error:
            raise type(error)(f"Failed to parse {goals_path.name}: {error}") from error

    def _build_request(
        self,
        project_path: Path,
        command: tuple[str, ...],
        session_number: int,
    ) -> SessionRunRequest:
        if not self._settings.capture_output:
            return SessionRunRequest(
                project_path=project_path,
                command=command,
                session_number=session_number,
            )
        stdout_path, stderr_path = self._settings.session_log_paths(project_path, session_number)
        return SessionRunRequest(
            project_path=project_path,
            command=command,
            session_number=session_number,
            attach_streams=False,
            stdout_path=stdout_path,
            stderr_path=stderr_path,
        )

    def _report_outcome(self, session_number: int, result: SessionRunResult) -> None:
        if result.success:
            self._report(f"Session #{session_number} completed")
            return
        logger.info(
            "Session #%d failed: exit_code=%d signal=%s",
            session_number,
            result.exit_code,
            result.signal_number,
        )
        self._report(f"Session #{session_number} exited with code: {result.exit_code}")

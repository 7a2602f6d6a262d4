"""Controllers for autogoals CLI commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from autogoals.config import Settings
from autogoals.errors import AutogoalsError, PathNotFoundError, StatusFileMissingError
from autogoals.goals import read_goals
from autogoals.session import RunSummary, SessionDriver
from autogoals.session.backend import CliAgentBackend, SessionBackend

GOALS_TEMPLATE = """\
goals:
  - id: "example-goal-1"
    description: "Your first goal - describe what you want to build"
    status: "pending"

  - id: "example-goal-2"
    description: "Another goal - AutoGoals will work through these sequentially"
    status: "pending"

# Goal Status Lifecycle:
# - pending: Not started
# - ready_for_execution: Plan complete, ready to implement
# - in_progress: Currently being worked on
# - ready_for_verification: Implementation done, needs testing
# - completed: Done and verified
# - failed: Encountered errors

# Tips:
# 1. Be specific in your goal descriptions
# 2. Break large features into smaller goals
# 3. The agent will update this file as it completes goals
# 4. You can edit this file anytime to add/modify goals
"""


@dataclass(slots=True)
class StartCommand:
    """CLI input for the session loop."""

    project_path: Path


@dataclass(slots=True)
class InitCommand:
    """CLI input for project scaffolding."""

    project_path: Path


@dataclass(slots=True)
class StatusCommand:
    """CLI input for goal status listing."""

    project_path: Path
    show_plans: bool = False


class AutogoalsCliController:
    """Coordinates settings, session loop, and status file inspection."""

    def __init__(self, backend_factory: Callable[[], SessionBackend] = CliAgentBackend) -> None:
        self._backend_factory = backend_factory

    def start(self, command: StartCommand, report: Callable[[str], None]) -> RunSummary:
        settings = _settings()
        report("AutoGoals Runner")
        driver = SessionDriver(
            settings=settings,
            backend=self._backend_factory(),
            report=report,
        )
        summary = driver.run(command.project_path)
        report("")
        report(f"All goals completed successfully after {summary.sessions_run} session(s).")
        return summary

    def init(self, command: InitCommand) -> list[str]:
        settings = _settings()
        goals_path = settings.goals_path(command.project_path)
        if goals_path.exists():
            raise AutogoalsError(f"{goals_path.name} already exists: {goals_path}")

        if command.project_path.exists() and not command.project_path.is_dir():
            raise AutogoalsError(f"Project path is not a directory: {command.project_path}")

        logs_dir = settings.logs_root(command.project_path)
        try:
            command.project_path.mkdir(parents=True, exist_ok=True)
            goals_path.write_text(GOALS_TEMPLATE, "utf-8")
            lines = [f"Created {goals_path.name}"]
            if not logs_dir.exists():
                logs_dir.mkdir(parents=True)
                lines.append(f"Created {logs_dir}")
        except OSError as error:
            raise AutogoalsError(
                f"Failed to initialize project in {command.project_path}: {error}",
            ) from error

        lines.extend(
            [
                "",
                "Next steps:",
                f"   1. Edit {goals_path.name} to define your goals",
                "   2. Run: autogoals start",
            ],
        )
        return lines

    def status(self, command: StatusCommand) -> list[str]:
        settings = _settings()
        if not command.project_path.exists():
            raise PathNotFoundError(f"Project path does not exist: {command.project_path}")
        goals_path = settings.goals_path(command.project_path)
        if not goals_path.is_file():
            raise StatusFileMissingError(
                f"No {goals_path.name} found in {command.project_path}. "
                "Create one first or run 'autogoals init'.",
            )

        goal_set = read_goals(goals_path)
        counts = goal_set.count_by_status()
        lines = [
            f"Goal Status: {counts.completed}/{len(goal_set)} completed, "
            f"{counts.active} in progress, {counts.pending} pending",
            f"Pending work: {'yes' if goal_set.has_pending_work() else 'no'}",
        ]
        for goal in goal_set.goals:
            status_text = goal.raw_status or goal.status.value
            lines.append(f"- [{status_text}] {goal.id}: {goal.description}")
            if command.show_plans and goal.plan:
                lines.extend(f"    {plan_line}" for plan_line in goal.plan.splitlines())
        return lines


def _settings() -> Settings:
    settings = Settings.from_env()
    settings.validate()
    return settings

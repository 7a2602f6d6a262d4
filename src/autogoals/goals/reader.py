"""Load goals.yaml into an immutable ``GoalSet``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from autogoals.errors import GoalsFormatError, GoalsIoError
from autogoals.goals.models import GoalRecord, GoalSet, GoalStatus

logger = logging.getLogger(__name__)


def read_goals(path: Path) -> GoalSet:
    """Read and parse the status file.

    The file is re-read on every call; nothing is cached because the agent
    rewrites it between sessions.
    """

    try:
        content = path.read_text("utf-8")
    except OSError as error:
        raise GoalsIoError(f"Failed to read {path}: {error}") from error
    except UnicodeDecodeError as error:
        raise GoalsFormatError(f"Failed to decode {path} as UTF-8: {error}") from error

    try:
        payload = yaml.safe_load(content)
    except yaml.YAMLError as error:
        raise GoalsFormatError(f"Failed to parse YAML in {path}: {error}") from error

    goal_set = GoalSet(path=path, goals=parse_goals_payload(payload, source=path))
    logger.debug("Loaded %d goals from %s", len(goal_set), path)
    return goal_set


def parse_goals_payload(payload: Any, *, source: Path) -> tuple[GoalRecord, ...]:
    """Validate the decoded YAML document and build goal records."""

    if not isinstance(payload, dict):
        raise GoalsFormatError(f"Expected a mapping with a 'goals' list in {source}")
    raw_goals = payload.get("goals")
    if not isinstance(raw_goals, list):
        raise GoalsFormatError(f"Missing or invalid 'goals' list in {source}")

    return tuple(
        _parse_goal(item, index=index, source=source) for index, item in enumerate(raw_goals)
    )


def _parse_goal(item: Any, *, index: int, source: Path) -> GoalRecord:
    if not isinstance(item, dict):
        raise GoalsFormatError(f"Goal #{index + 1} in {source} is not a mapping")

    goal_id = _scalar_text(item.get("id"))
    if goal_id is None:
        raise GoalsFormatError(f"Goal #{index + 1} in {source} has no 'id'")

    raw_status = item.get("status")
    status = GoalStatus.parse(raw_status)
    if status is GoalStatus.UNKNOWN:
        logger.debug("Goal %s has unrecognized status %r", goal_id, raw_status)

    return GoalRecord(
        id=goal_id,
        description=_scalar_text(item.get("description")) or "",
        status=status,
        raw_status=_scalar_text(raw_status) or "",
        plan=_scalar_text(item.get("plan")),
    )


def _scalar_text(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)

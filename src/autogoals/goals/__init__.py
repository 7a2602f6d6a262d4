"""Status file model and reader."""

from autogoals.goals.models import GoalRecord, GoalSet, GoalStatus, StatusBucket, StatusCounts
from autogoals.goals.reader import read_goals

__all__ = [
    "GoalRecord",
    "GoalSet",
    "GoalStatus",
    "StatusBucket",
    "StatusCounts",
    "read_goals",
]

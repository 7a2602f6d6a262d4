"""Domain models for goal records and their lifecycle states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class GoalStatus(str, Enum):
    """Goal lifecycle states written by the agent into goals.yaml."""

    NOT_STARTED = "not_started"
    PENDING = "pending"
    READY_FOR_EXECUTION = "ready_for_execution"
    IN_PROGRESS = "in_progress"
    READY_FOR_VERIFICATION = "ready_for_verification"
    COMPLETED = "completed"
    FAILED = "failed"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> GoalStatus:
        """Map a raw status value to a known state, falling back to ``UNKNOWN``."""

        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def bucket(self) -> StatusBucket:
        if self is GoalStatus.COMPLETED:
            return StatusBucket.COMPLETED
        if self in _ACTIVE_STATUSES:
            return StatusBucket.ACTIVE
        return StatusBucket.PENDING

    @property
    def is_pending_work(self) -> bool:
        return self in _PENDING_WORK_STATUSES


class StatusBucket(str, Enum):
    """Aggregation buckets used for progress reporting."""

    COMPLETED = "completed"
    ACTIVE = "active"
    PENDING = "pending"


_ACTIVE_STATUSES = frozenset(
    {
        GoalStatus.IN_PROGRESS,
        GoalStatus.READY_FOR_EXECUTION,
        GoalStatus.READY_FOR_VERIFICATION,
    },
)

# not_started, failed and unknown are counted as pending but never keep the loop alive.
_PENDING_WORK_STATUSES = _ACTIVE_STATUSES | {GoalStatus.PENDING}


@dataclass(frozen=True, slots=True)
class GoalRecord:
    """One unit of work tracked in the status file."""

    id: str
    description: str
    status: GoalStatus
    raw_status: str = ""
    plan: str | None = None


@dataclass(frozen=True, slots=True)
class StatusCounts:
    """Per-bucket goal totals."""

    completed: int = 0
    active: int = 0
    pending: int = 0

    @property
    def total(self) -> int:
        return self.completed + self.active + self.pending


@dataclass(frozen=True, slots=True)
class GoalSet:
    """Snapshot of goals.yaml taken at one point in time."""

    path: Path
    goals: tuple[GoalRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.goals)

    def count_by_status(self) -> StatusCounts:
        totals = {bucket: 0 for bucket in StatusBucket}
        for goal in self.goals:
            totals[goal.status.bucket] += 1
        return StatusCounts(
            completed=totals[StatusBucket.COMPLETED],
            active=totals[StatusBucket.ACTIVE],
            pending=totals[StatusBucket.PENDING],
        )

    def has_pending_work(self) -> bool:
        return any(goal.status.is_pending_work for goal in self.goals)

from __future__ import annotations

from pathlib import Path

import allure
import pytest

from autogoals.goals import GoalRecord, GoalSet, GoalStatus, StatusBucket, StatusCounts

pytestmark = [
    allure.epic("Status File"),
    allure.feature("Goal Classification"),
]


def _goal_set(*statuses: str) -> GoalSet:
    return GoalSet(
        path=Path("goals.yaml"),
        goals=tuple(
            GoalRecord(
                id=f"goal-{index}",
                description="",
                status=GoalStatus.parse(status),
                raw_status=status,
            )
            for index, status in enumerate(statuses)
        ),
    )


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("completed", StatusBucket.COMPLETED),
        ("in_progress", StatusBucket.ACTIVE),
        ("ready_for_execution", StatusBucket.ACTIVE),
        ("ready_for_verification", StatusBucket.ACTIVE),
        ("pending", StatusBucket.PENDING),
        ("not_started", StatusBucket.PENDING),
        ("failed", StatusBucket.PENDING),
        ("Completed", StatusBucket.PENDING),
        ("completed ", StatusBucket.PENDING),
        (" in_progress", StatusBucket.PENDING),
        ("done", StatusBucket.PENDING),
        ("", StatusBucket.PENDING),
    ],
)
def test_every_status_string_lands_in_one_bucket(raw: str, expected: StatusBucket) -> None:
    assert GoalStatus.parse(raw).bucket is expected


@pytest.mark.parametrize("value", [None, 3, ["pending"], {"state": "pending"}])
def test_non_string_status_is_unknown(value: object) -> None:
    assert GoalStatus.parse(value) is GoalStatus.UNKNOWN


def test_count_by_status_partitions_all_goals() -> None:
    goal_set = _goal_set(
        "completed",
        "completed",
        "in_progress",
        "ready_for_verification",
        "pending",
        "not_started",
        "mystery",
    )

    counts = goal_set.count_by_status()

    assert counts == StatusCounts(completed=2, active=2, pending=3)
    assert counts.total == len(goal_set)


def test_empty_goal_set_has_no_pending_work() -> None:
    goal_set = _goal_set()

    assert goal_set.count_by_status() == StatusCounts()
    assert not goal_set.has_pending_work()


def test_all_completed_has_no_pending_work() -> None:
    assert not _goal_set("completed", "completed").has_pending_work()


@pytest.mark.parametrize(
    "status",
    ["pending", "ready_for_execution", "in_progress", "ready_for_verification"],
)
def test_pending_work_statuses_keep_loop_alive(status: str) -> None:
    assert _goal_set("completed", status).has_pending_work()


@pytest.mark.parametrize("status", ["not_started", "failed", "blocked"])
def test_statuses_outside_pending_work_set_do_not_keep_loop_alive(status: str) -> None:
    goal_set = _goal_set("completed", status)

    assert goal_set.count_by_status().pending == 1
    assert not goal_set.has_pending_work()

import pytest
from conftest import make_quest

from questboard.core.enums import QuestStatus
from questboard.services.quest_progress import (
    QUEST_TRANSITIONS,
    apply_quest_progress,
    can_transition,
    progress_percentage,
)


def test_reaching_target_completes_quest() -> None:
    quest = make_quest(progress={"current": 4, "target": 5, "percentage": 80})

    updated = apply_quest_progress(quest, 5)

    assert updated.progress.current == 5
    assert updated.progress.percentage == 100
    assert updated.status == QuestStatus.COMPLETED


def test_partial_progress_keeps_status() -> None:
    quest = make_quest(progress={"current": 1, "target": 4, "percentage": 25})

    updated = apply_quest_progress(quest, 3)

    assert updated.progress.current == 3
    assert updated.progress.percentage == 75
    assert updated.status == QuestStatus.IN_PROGRESS


@pytest.mark.parametrize(("new_current", "expected"), [(-3, 0), (0, 0), (7, 7), (10, 10), (99, 10)])
def test_progress_is_clamped_to_target(new_current: int, expected: int) -> None:
    quest = make_quest(progress={"current": 2, "target": 10, "percentage": 20})

    updated = apply_quest_progress(quest, new_current)

    assert updated.progress.current == expected
    assert updated.progress.percentage == pytest.approx(expected / 10 * 100)


def test_original_quest_is_not_mutated() -> None:
    quest = make_quest(progress={"current": 1, "target": 3, "percentage": 33})

    apply_quest_progress(quest, 3)

    assert quest.progress.current == 1
    assert quest.status == QuestStatus.IN_PROGRESS


def test_zero_target_has_zero_percentage() -> None:
    quest = make_quest(progress={"current": 0, "target": 0, "percentage": 0})

    updated = apply_quest_progress(quest, 4)

    assert updated.progress.current == 0
    assert updated.progress.percentage == 0


def test_available_quest_can_complete() -> None:
    quest = make_quest(status="available", progress={"current": 0, "target": 1, "percentage": 0})

    assert apply_quest_progress(quest, 1).status == QuestStatus.COMPLETED


@pytest.mark.parametrize("status", ["completed", "claimed"])
def test_completion_is_never_reverted(status: str) -> None:
    quest = make_quest(status=status, progress={"current": 5, "target": 5, "percentage": 100})

    updated = apply_quest_progress(quest, 2)

    assert updated.status == QuestStatus(status)
    assert updated.progress.current == 2
    assert updated.progress.percentage == 40


@pytest.mark.parametrize("status", ["locked", "expired"])
def test_engine_does_not_touch_external_statuses(status: str) -> None:
    quest = make_quest(status=status, progress={"current": 0, "target": 2, "percentage": 0})

    assert apply_quest_progress(quest, 2).status == QuestStatus(status)


def test_transition_table() -> None:
    assert can_transition(QuestStatus.IN_PROGRESS, QuestStatus.COMPLETED)
    assert can_transition(QuestStatus.COMPLETED, QuestStatus.CLAIMED)
    assert not can_transition(QuestStatus.COMPLETED, QuestStatus.IN_PROGRESS)
    assert not can_transition(QuestStatus.LOCKED, QuestStatus.COMPLETED)
    assert QUEST_TRANSITIONS[QuestStatus.EXPIRED] == frozenset()
    assert QUEST_TRANSITIONS[QuestStatus.CLAIMED] == frozenset()


def test_progress_percentage_caps_at_hundred() -> None:
    assert progress_percentage(12, 10) == 100
    assert progress_percentage(1, 3) == pytest.approx(33.333, rel=1e-3)

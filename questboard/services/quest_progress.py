from questboard.core.enums import QuestStatus
from questboard.models.quest import DashboardQuest, QuestProgress

QUEST_TRANSITIONS: dict[QuestStatus, frozenset[QuestStatus]] = {
    QuestStatus.LOCKED: frozenset({QuestStatus.AVAILABLE, QuestStatus.EXPIRED}),
    QuestStatus.AVAILABLE: frozenset(
        {QuestStatus.IN_PROGRESS, QuestStatus.COMPLETED, QuestStatus.EXPIRED}
    ),
    QuestStatus.IN_PROGRESS: frozenset({QuestStatus.COMPLETED, QuestStatus.EXPIRED}),
    QuestStatus.COMPLETED: frozenset({QuestStatus.CLAIMED}),
    QuestStatus.CLAIMED: frozenset(),
    QuestStatus.EXPIRED: frozenset(),
}
"""Legal status moves. Unlocking, claiming and expiry are decided by the server."""


def can_transition(source: QuestStatus, target: QuestStatus) -> bool:
    return target in QUEST_TRANSITIONS[source]


def progress_percentage(current: int, target: int) -> float:
    if target <= 0:
        return 0.0
    return max(0.0, min(current / target * 100, 100.0))


def apply_quest_progress(quest: DashboardQuest, new_current: int) -> DashboardQuest:
    """Return a copy of ``quest`` with its progress moved to ``new_current``.

    The value is clamped to ``[0, target]`` and the percentage recomputed.
    Reaching the target completes an available or in-progress quest. Completion
    is one-way: lowering progress later never reopens the quest.
    """
    target = quest.progress.target
    current = max(0, min(new_current, target))

    status = quest.status
    if current >= target and can_transition(status, QuestStatus.COMPLETED):
        status = QuestStatus.COMPLETED

    progress = QuestProgress(
        current=current, target=target, percentage=progress_percentage(current, target)
    )
    return quest.model_copy(update={"progress": progress, "status": status})

"""Read-only views over :class:`DashboardState`.

Every selector is a plain function of the state it is given; none of them
touch the store. Collections come back as tuples.
"""

from questboard.core.enums import QuestStatus, QuestType
from questboard.models.activity import DashboardActivity
from questboard.models.leaderboard import LeaderboardEntry
from questboard.models.quest import DashboardQuest
from questboard.models.schedule import UpcomingClass
from questboard.models.user import DashboardUser, UserStats
from questboard.schemas.dashboard import DashboardViews
from questboard.schemas.state import DashboardState
from questboard.utils.misc import get_greeting

_FINISHED_STATUSES = frozenset({QuestStatus.COMPLETED, QuestStatus.CLAIMED})


def select_user(state: DashboardState) -> DashboardUser | None:
    return state.user


def select_user_stats(state: DashboardState) -> UserStats | None:
    return state.user.stats if state.user else None


def select_active_quests(state: DashboardState) -> tuple[DashboardQuest, ...]:
    return state.active_quests


def select_activities(state: DashboardState) -> tuple[DashboardActivity, ...]:
    return state.activities


def select_upcoming_classes(state: DashboardState) -> tuple[UpcomingClass, ...]:
    return state.upcoming_classes


def select_leaderboard(state: DashboardState) -> tuple[LeaderboardEntry, ...]:
    return state.leaderboard


def select_is_loading(state: DashboardState) -> bool:
    return state.is_loading


def select_error(state: DashboardState) -> str | None:
    return state.error


def select_loading_status(state: DashboardState) -> tuple[bool, bool]:
    """``(is_loading, is_refreshing)``"""
    return state.is_loading, state.is_refreshing


def select_in_progress_quests(state: DashboardState) -> tuple[DashboardQuest, ...]:
    return tuple(q for q in state.active_quests if q.status == QuestStatus.IN_PROGRESS)


def select_daily_quests(state: DashboardState) -> tuple[DashboardQuest, ...]:
    return tuple(q for q in state.active_quests if q.type == QuestType.DAILY)


def select_expiring_quests(state: DashboardState) -> tuple[DashboardQuest, ...]:
    return tuple(q for q in state.active_quests if q.is_expiring_soon)


def select_visible_quests(state: DashboardState) -> tuple[DashboardQuest, ...]:
    """Quests after applying the quest type filter and the completed toggle."""
    quest_type = state.filters.quest_type
    show_completed = state.show_completed_quests
    return tuple(
        q
        for q in state.active_quests
        if (quest_type is None or q.type == quest_type)
        and (show_completed or q.status not in _FINISHED_STATUSES)
    )


def select_limited_activities(state: DashboardState) -> tuple[DashboardActivity, ...]:
    # The log is kept newest first
    return state.activities[: state.activity_limit]


def select_current_user_rank(state: DashboardState) -> LeaderboardEntry | None:
    # Only searches the loaded leaderboard window
    return next((entry for entry in state.leaderboard if entry.is_current_user), None)


def select_level_progress(state: DashboardState) -> float:
    return state.user.stats.progress_ratio if state.user else 0.0


def select_dashboard_views(state: DashboardState, *, hour: int | None = None) -> DashboardViews:
    return DashboardViews(
        in_progress_quests=select_in_progress_quests(state),
        daily_quests=select_daily_quests(state),
        expiring_quests=select_expiring_quests(state),
        visible_quests=select_visible_quests(state),
        limited_activities=select_limited_activities(state),
        current_user_rank=select_current_user_rank(state),
        level_progress=select_level_progress(state),
        greeting=get_greeting(hour),
    )

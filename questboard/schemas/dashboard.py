from questboard.models._base import BaseModel
from questboard.models.activity import DashboardActivity
from questboard.models.leaderboard import LeaderboardEntry
from questboard.models.quest import DashboardQuest


class DashboardViews(BaseModel):
    """Derived views the dashboard page renders."""

    in_progress_quests: tuple[DashboardQuest, ...]
    daily_quests: tuple[DashboardQuest, ...]
    expiring_quests: tuple[DashboardQuest, ...]
    visible_quests: tuple[DashboardQuest, ...]
    limited_activities: tuple[DashboardActivity, ...]
    current_user_rank: LeaderboardEntry | None
    level_progress: float
    greeting: str

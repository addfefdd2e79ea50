from questboard.models._base import BaseModel
from questboard.models.activity import DashboardActivity
from questboard.models.badge import FeaturedBadge
from questboard.models.leaderboard import LeaderboardEntry
from questboard.models.quest import DashboardQuest
from questboard.models.schedule import UpcomingClass
from questboard.models.user import DashboardUser
from questboard.models.weekly_stats import WeeklyStats


class PartialSnapshot(BaseModel):
    """Fast-changing subset returned by a refresh."""

    user: DashboardUser
    active_quests: tuple[DashboardQuest, ...] = ()
    activities: tuple[DashboardActivity, ...] = ()
    upcoming_classes: tuple[UpcomingClass, ...] = ()


class DashboardSnapshot(PartialSnapshot):
    """Everything the dashboard shows, returned by a full load."""

    leaderboard: tuple[LeaderboardEntry, ...] = ()
    featured_badges: tuple[FeaturedBadge, ...] = ()
    weekly_stats: WeeklyStats

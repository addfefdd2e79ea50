from questboard.models._base import BaseModel
from questboard.models.activity import DashboardActivity
from questboard.models.badge import FeaturedBadge
from questboard.models.leaderboard import LeaderboardEntry
from questboard.models.quest import DashboardQuest
from questboard.models.schedule import UpcomingClass
from questboard.models.user import DashboardUser
from questboard.models.weekly_stats import WeeklyStats
from questboard.schemas.preferences import DashboardFilters, Preferences
from questboard.services.rewards import PendingRewards


class DashboardState(BaseModel):
    # Snapshot
    user: DashboardUser | None = None
    active_quests: tuple[DashboardQuest, ...] = ()
    activities: tuple[DashboardActivity, ...] = ()
    upcoming_classes: tuple[UpcomingClass, ...] = ()
    leaderboard: tuple[LeaderboardEntry, ...] = ()
    featured_badges: tuple[FeaturedBadge, ...] = ()
    weekly_stats: WeeklyStats | None = None

    # Lifecycle
    is_loading: bool = False
    is_refreshing: bool = False
    error: str | None = None

    preferences: Preferences = Preferences()
    pending_rewards: PendingRewards = PendingRewards()

    @property
    def show_completed_quests(self) -> bool:
        return self.preferences.show_completed_quests

    @property
    def activity_limit(self) -> int:
        return self.preferences.activity_limit

    @property
    def filters(self) -> DashboardFilters:
        return self.preferences.filters

    @property
    def pending_xp_gain(self) -> int:
        return self.pending_rewards.xp

    @property
    def pending_coins_gain(self) -> int:
        return self.pending_rewards.coins

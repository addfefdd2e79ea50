from enum import StrEnum


class RankTier(StrEnum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"
    MASTER = "master"
    LEGEND = "legend"


class QuestType(StrEnum):
    MAIN = "main"
    SIDE = "side"
    DAILY = "daily"
    WEEKLY = "weekly"
    EVENT = "event"
    ACHIEVEMENT = "achievement"


class QuestCategory(StrEnum):
    ACADEMIC = "academic"
    ATTENDANCE = "attendance"
    SOCIAL = "social"
    CLUB = "club"
    WELLNESS = "wellness"
    SPECIAL = "special"


class QuestDifficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    LEGENDARY = "legendary"


class QuestStatus(StrEnum):
    LOCKED = "locked"
    AVAILABLE = "available"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CLAIMED = "claimed"
    EXPIRED = "expired"


class ActivityType(StrEnum):
    QUEST_COMPLETED = "quest_completed"
    BADGE_EARNED = "badge_earned"
    LEVEL_UP = "level_up"
    ATTENDANCE_MARKED = "attendance_marked"
    STREAK_ACHIEVED = "streak_achieved"
    REWARD_CLAIMED = "reward_claimed"
    EVENT_JOINED = "event_joined"


class ItemRarity(StrEnum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class BadgeCategory(StrEnum):
    ACADEMIC = "academic"
    SOCIAL = "social"
    ATTENDANCE = "attendance"
    SPECIAL = "special"
    EVENT = "event"
    MILESTONE = "milestone"


class TimeRange(StrEnum):
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"


class LoadKind(StrEnum):
    FULL = "full"
    PARTIAL = "partial"


class StoreAction(StrEnum):
    """Every state transition the dashboard store can perform."""

    SET_USER = "set_user"
    SET_ACTIVE_QUESTS = "set_active_quests"
    SET_ACTIVITIES = "set_activities"
    SET_UPCOMING_CLASSES = "set_upcoming_classes"
    SET_LEADERBOARD = "set_leaderboard"
    SET_FEATURED_BADGES = "set_featured_badges"
    SET_WEEKLY_STATS = "set_weekly_stats"
    SET_ERROR = "set_error"

    FETCH_STARTED = "fetch_dashboard_data/started"
    FETCH_SUCCEEDED = "fetch_dashboard_data/success"
    FETCH_FAILED = "fetch_dashboard_data/error"
    FETCH_SETTLED = "fetch_dashboard_data/settled"
    REFRESH_STARTED = "refresh_dashboard/started"
    REFRESH_SUCCEEDED = "refresh_dashboard/success"
    REFRESH_FAILED = "refresh_dashboard/error"
    REFRESH_SETTLED = "refresh_dashboard/settled"

    UPDATE_QUEST_PROGRESS = "update_quest_progress"
    ADD_ACTIVITY = "add_activity"

    ADD_PENDING_XP = "add_pending_xp"
    ADD_PENDING_COINS = "add_pending_coins"
    CLEAR_PENDING_REWARDS = "clear_pending_rewards"

    SET_FILTERS = "set_filters"
    TOGGLE_SHOW_COMPLETED_QUESTS = "toggle_show_completed_quests"
    SET_ACTIVITY_LIMIT = "set_activity_limit"

    RESET_STORE = "reset_store"

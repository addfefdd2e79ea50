import random
from datetime import datetime, timedelta

import anyio
from loguru import logger

from questboard.models.activity import DashboardActivity
from questboard.models.badge import FeaturedBadge
from questboard.models.leaderboard import LeaderboardEntry
from questboard.models.quest import DashboardQuest
from questboard.models.schedule import UpcomingClass
from questboard.models.user import DashboardUser
from questboard.models.weekly_stats import WeeklyStats
from questboard.schemas.snapshot import DashboardSnapshot, PartialSnapshot
from questboard.utils.misc import get_utc_now

AVATAR_URL = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}&backgroundColor={color}"

MAX_REFRESH_XP_BUMP = 50


def build_user() -> DashboardUser:
    return DashboardUser.model_validate(
        {
            "id": "user_001",
            "studentId": "STU2024001",
            "displayName": "Alex Chen",
            "firstName": "Alex",
            "lastName": "Chen",
            "email": "alex.chen@university.edu",
            "avatar": {
                "url": AVATAR_URL.format(seed="Alex", color="6366f1"),
                "frameId": "frame_gold",
                "frameColor": "#fbbf24",
                "isAnimated": False,
            },
            "stats": {
                "level": 24,
                "currentXP": 2450,
                "requiredXP": 3000,
                "totalXP": 24450,
                "coins": 1850,
                "gems": 45,
                "rank": {
                    "id": "rank_gold_2",
                    "name": "Gold Scholar",
                    "tier": "gold",
                    "icon": "trophy",
                    "color": "#fbbf24",
                    "minXP": 5000,
                },
                "rankPosition": 127,
                "streakDays": 12,
                "achievementCount": 34,
                "questsCompleted": 156,
                "attendanceRate": 94.5,
            },
            "title": "Code Warrior",
            "clan": {
                "id": "clan_001",
                "name": "Binary Dragons",
                "emblem": "dragon",
                "color": "#8b5cf6",
            },
        }
    )


def build_active_quests(now: datetime) -> tuple[DashboardQuest, ...]:
    def quest(**data: object) -> DashboardQuest:
        return DashboardQuest.model_validate(data)

    return (
        quest(
            id="quest_001",
            title="Perfect Attendance Week",
            type="weekly",
            category="attendance",
            difficulty="medium",
            status="in_progress",
            progress={"current": 4, "target": 5, "percentage": 80},
            rewards={"xp": 500, "coins": 200},
            deadline=now + timedelta(days=3),
            icon="CalendarCheck",
            color="#10b981",
            isExpiringSoon=False,
            timeRemaining="3 days left",
        ),
        quest(
            id="quest_002",
            title="Knowledge Seeker",
            type="main",
            category="academic",
            difficulty="hard",
            status="in_progress",
            progress={"current": 7, "target": 10, "percentage": 70},
            rewards={"xp": 1000, "coins": 500, "gems": 10},
            deadline=now + timedelta(days=7),
            icon="BookOpen",
            color="#6366f1",
            timeRemaining="7 days left",
        ),
        quest(
            id="quest_003",
            title="Social Butterfly",
            type="side",
            category="social",
            difficulty="easy",
            status="in_progress",
            progress={"current": 2, "target": 3, "percentage": 66},
            rewards={"xp": 150, "coins": 75},
            icon="Users",
            color="#a855f7",
            timeRemaining="No deadline",
        ),
        quest(
            id="quest_004",
            title="Early Bird",
            type="daily",
            category="attendance",
            difficulty="easy",
            status="in_progress",
            progress={"current": 0, "target": 1, "percentage": 0},
            rewards={"xp": 100, "coins": 50},
            deadline=now + timedelta(hours=8),
            icon="Sunrise",
            color="#f59e0b",
            isExpiringSoon=True,
            timeRemaining="8 hours left",
        ),
        quest(
            id="quest_005",
            title="Club Champion",
            type="event",
            category="club",
            difficulty="legendary",
            status="in_progress",
            progress={"current": 1, "target": 5, "percentage": 20},
            rewards={"xp": 2000, "coins": 1000, "gems": 25},
            deadline=now + timedelta(days=14),
            icon="Flag",
            color="#ec4899",
            timeRemaining="2 weeks left",
        ),
    )


def build_activities(now: datetime) -> tuple[DashboardActivity, ...]:
    rows = [
        ("activity_001", "quest_completed", "Quest Completed!",
         'Completed "Morning Warrior" daily quest', timedelta(hours=2),
         "CheckCircle", "#10b981", 100, 50),
        ("activity_002", "attendance_marked", "Attendance Recorded",
         "Checked in to CS301 - Database Systems", timedelta(hours=4),
         "MapPin", "#6366f1", 50, None),
        ("activity_003", "badge_earned", "New Badge Unlocked!",
         'Earned "Punctual Pioneer" badge', timedelta(days=1),
         "Award", "#f59e0b", 200, None),
        ("activity_004", "streak_achieved", "10-Day Streak!",
         "You've attended classes for 10 days in a row", timedelta(days=2),
         "Flame", "#ef4444", 500, 200),
        ("activity_005", "level_up", "Level Up!",
         "Reached Level 24 - Code Warrior", timedelta(days=3),
         "TrendingUp", "#a855f7", 0, 100),
    ]  # fmt: skip
    return tuple(
        DashboardActivity(
            id=id_,
            type=type_,
            title=title,
            description=description,
            timestamp=now - ago,
            icon=icon,
            icon_color=icon_color,
            xp_gained=xp,
            coins_gained=coins,
        )
        for id_, type_, title, description, ago, icon, icon_color, xp, coins in rows
    )


def build_upcoming_classes() -> tuple[UpcomingClass, ...]:
    rows = [
        ("class_001", "Database Systems", "CS301", "Dr. Sarah Johnson", "Room 405",
         "09:00", "10:30", "#6366f1", True, "45 minutes"),
        ("class_002", "Software Engineering", "CS302", "Prof. Michael Lee", "Lab 201",
         "11:00", "12:30", "#10b981", False, "2 hours"),
        ("class_003", "Machine Learning", "CS401", "Dr. Emily Zhang", "Room 301",
         "14:00", "15:30", "#a855f7", False, "5 hours"),
        ("class_004", "Computer Networks", "CS305", "Dr. James Wilson", "Room 502",
         "16:00", "17:30", "#f59e0b", False, "7 hours"),
    ]  # fmt: skip
    return tuple(
        UpcomingClass.model_validate(
            {
                "id": id_,
                "courseName": name,
                "courseCode": code,
                "instructor": instructor,
                "room": room,
                "startTime": start,
                "endTime": end,
                "color": color,
                "isNext": is_next,
                "startsIn": starts_in,
            }
        )
        for id_, name, code, instructor, room, start, end, color, is_next, starts_in in rows
    )


def build_leaderboard() -> tuple[LeaderboardEntry, ...]:
    rows = [
        (1, "user_top1", "Emma Watson", "Emma", "ec4899", 42, 85420, 0, False),
        (2, "user_top2", "James Liu", "James", "10b981", 40, 78650, 2, False),
        (3, "user_top3", "Sofia Garcia", "Sofia", "f59e0b", 39, 75200, -1, False),
        (127, "user_001", "Alex Chen", "Alex", "6366f1", 24, 24450, 5, True),
    ]
    return tuple(
        LeaderboardEntry(
            rank=rank,
            user_id=user_id,
            display_name=name,
            avatar=AVATAR_URL.format(seed=seed, color=color),
            level=level,
            xp=xp,
            change=change,
            is_current_user=is_current_user,
        )
        for rank, user_id, name, seed, color, level, xp, change, is_current_user in rows
    )


def build_featured_badges() -> tuple[FeaturedBadge, ...]:
    return tuple(
        FeaturedBadge.model_validate(data)
        for data in (
            {
                "id": "badge_001",
                "name": "Perfect Month",
                "description": "Attend all classes for an entire month",
                "icon": "target",
                "rarity": "legendary",
                "category": "attendance",
                "progress": {"current": 18, "target": 22},
                "hint": "4 more classes to go!",
            },
            {
                "id": "badge_002",
                "name": "Quest Master",
                "description": "Complete 200 quests",
                "icon": "swords",
                "rarity": "epic",
                "category": "milestone",
                "progress": {"current": 156, "target": 200},
            },
            {
                "id": "badge_003",
                "name": "Social Legend",
                "description": "Participate in 50 club events",
                "icon": "users",
                "rarity": "rare",
                "category": "social",
                "progress": {"current": 23, "target": 50},
            },
            {
                "id": "badge_004",
                "name": "Diamond Scholar",
                "description": "Reach Diamond rank",
                "icon": "gem",
                "rarity": "legendary",
                "category": "milestone",
                "isLocked": True,
                "hint": "Reach 50,000 XP to unlock",
            },
        )
    )


def build_weekly_stats() -> WeeklyStats:
    return WeeklyStats.model_validate(
        {
            "xpEarned": 2450,
            "questsCompleted": 12,
            "attendanceRate": 100,
            "streakDays": 5,
            "comparedToLastWeek": {"xp": 15, "quests": 3, "attendance": 5},
        }
    )


def build_snapshot(now: datetime | None = None) -> DashboardSnapshot:
    now = now or get_utc_now()
    return DashboardSnapshot(
        user=build_user(),
        active_quests=build_active_quests(now),
        activities=build_activities(now),
        upcoming_classes=build_upcoming_classes(),
        leaderboard=build_leaderboard(),
        featured_badges=build_featured_badges(),
        weekly_stats=build_weekly_stats(),
    )


class MockDataSource:
    """Development data source returning canned data after a short delay."""

    def __init__(
        self,
        *,
        fetch_delay: float = 0.8,
        refresh_delay: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        self.fetch_delay = fetch_delay
        self.refresh_delay = refresh_delay
        self.rng = rng or random.Random()

    async def fetch_all(self) -> DashboardSnapshot:
        await anyio.sleep(self.fetch_delay)
        return build_snapshot()

    async def fetch_partial(self) -> PartialSnapshot:
        await anyio.sleep(self.refresh_delay)
        now = get_utc_now()
        user = build_user()

        # Simulate XP earned since the last load without crossing a level boundary
        stats = user.stats
        current_xp = min(
            stats.current_xp + self.rng.randrange(MAX_REFRESH_XP_BUMP), stats.required_xp - 1
        )
        logger.debug(f"Mock refresh moved current XP {stats.current_xp} -> {current_xp}")
        user = user.model_copy(
            update={"stats": stats.model_copy(update={"current_xp": current_xp})}
        )

        return PartialSnapshot(
            user=user,
            active_quests=build_active_quests(now),
            activities=build_activities(now),
            upcoming_classes=build_upcoming_classes(),
        )

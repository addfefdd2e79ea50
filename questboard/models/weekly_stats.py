import pydantic

from ._base import BaseModel


class WeeklyComparison(BaseModel):
    """Percentage change against the previous week, may be negative."""

    xp: int
    quests: int
    attendance: int


class WeeklyStats(BaseModel):
    xp_earned: int = pydantic.Field(ge=0)
    quests_completed: int = pydantic.Field(ge=0)
    attendance_rate: float = pydantic.Field(ge=0, le=100)
    streak_days: int = pydantic.Field(ge=0)
    compared_to_last_week: WeeklyComparison

from typing import Self

import pydantic

from questboard.core.enums import RankTier

from ._base import BaseModel


class UserRank(BaseModel):
    id: str
    name: str
    tier: RankTier
    icon: str
    color: str
    min_xp: int = pydantic.Field(alias="minXP", ge=0)


class UserStats(BaseModel):
    level: int = pydantic.Field(ge=1)
    current_xp: int = pydantic.Field(alias="currentXP", ge=0)
    required_xp: int = pydantic.Field(alias="requiredXP", gt=0)
    total_xp: int = pydantic.Field(alias="totalXP", ge=0)
    coins: int = pydantic.Field(ge=0)
    gems: int = pydantic.Field(ge=0)
    rank: UserRank
    rank_position: int = pydantic.Field(ge=1)
    streak_days: int = pydantic.Field(ge=0)
    achievement_count: int = pydantic.Field(ge=0)
    quests_completed: int = pydantic.Field(ge=0)
    attendance_rate: float = pydantic.Field(ge=0, le=100)

    @pydantic.model_validator(mode="after")
    def check_xp_below_requirement(self) -> Self:
        if self.current_xp >= self.required_xp:
            msg = f"currentXP ({self.current_xp}) must be below requiredXP ({self.required_xp})"
            raise ValueError(msg)
        return self

    @property
    def progress_ratio(self) -> float:
        """Fraction of the current level completed, used by the level ring."""
        return self.current_xp / self.required_xp


class DashboardAvatar(BaseModel):
    url: str
    frame_id: str | None = None
    frame_color: str | None = None
    is_animated: bool = False


class DashboardClan(BaseModel):
    id: str
    name: str
    emblem: str
    color: str


class DashboardUser(BaseModel):
    id: str
    student_id: str
    display_name: str
    first_name: str
    last_name: str
    email: str
    avatar: DashboardAvatar
    stats: UserStats
    title: str | None = None
    clan: DashboardClan | None = None

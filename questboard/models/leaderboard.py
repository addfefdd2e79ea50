import pydantic

from ._base import BaseModel


class LeaderboardEntry(BaseModel):
    rank: int = pydantic.Field(ge=1)
    user_id: str
    display_name: str
    avatar: str
    level: int = pydantic.Field(ge=1)
    xp: int = pydantic.Field(ge=0)
    change: int | None = None
    """Positions gained (positive) or lost since the previous period"""
    is_current_user: bool = False

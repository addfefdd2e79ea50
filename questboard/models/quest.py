import pydantic

from questboard.core.enums import QuestCategory, QuestDifficulty, QuestStatus, QuestType

from ._base import BaseModel, UtcDatetime


class QuestProgress(BaseModel):
    current: int = pydantic.Field(ge=0)
    target: int = pydantic.Field(ge=0)
    percentage: float = pydantic.Field(ge=0, le=100)


class QuestRewards(BaseModel):
    xp: int = pydantic.Field(ge=0)
    coins: int = pydantic.Field(ge=0)
    gems: int | None = pydantic.Field(default=None, ge=0)


class DashboardQuest(BaseModel):
    id: str
    title: str
    type: QuestType
    category: QuestCategory
    difficulty: QuestDifficulty
    status: QuestStatus
    progress: QuestProgress
    rewards: QuestRewards
    deadline: UtcDatetime | None = None
    icon: str
    color: str
    is_expiring_soon: bool = False
    """Set by the data source from the deadline"""
    time_remaining: str | None = None
    """Display string computed by the data source, e.g. '3 days left'"""

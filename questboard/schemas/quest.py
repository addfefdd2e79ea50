from pydantic import BaseModel, Field

from questboard.models._base import BaseModel as SnapshotModel
from questboard.models.quest import DashboardQuest


class QuestProgressUpdate(BaseModel):
    current: int = Field(description="New progress value, clamped to the quest target")


class QuestCard(SnapshotModel):
    """A quest with the display attributes the quest list needs."""

    quest: DashboardQuest
    difficulty_color: str
    difficulty_label: str

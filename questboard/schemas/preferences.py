import pydantic

from questboard.core.enums import QuestType, TimeRange
from questboard.models._base import BaseModel


class DashboardFilters(BaseModel):
    quest_type: QuestType | None = None
    time_range: TimeRange | None = None


class Preferences(BaseModel):
    """The slice of dashboard state that survives between sessions."""

    show_completed_quests: bool = False
    activity_limit: int = pydantic.Field(default=5, ge=0)
    filters: DashboardFilters = DashboardFilters()


class ActivityLimitUpdate(pydantic.BaseModel):
    activity_limit: int = pydantic.Field(ge=0, description="Number of activities to display")

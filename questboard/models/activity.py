from typing import Any

import pydantic

from questboard.core.enums import ActivityType

from ._base import BaseModel, UtcDatetime


class DashboardActivity(BaseModel):
    id: str
    type: ActivityType
    title: str
    description: str
    timestamp: UtcDatetime
    icon: str
    icon_color: str
    xp_gained: int | None = pydantic.Field(default=None, ge=0)
    coins_gained: int | None = pydantic.Field(default=None, ge=0)
    metadata: dict[str, Any] | None = None

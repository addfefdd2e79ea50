from questboard.models._base import BaseModel
from questboard.models.activity import DashboardActivity


class ActivityFeedItem(BaseModel):
    activity: DashboardActivity
    relative_time: str

from typing import Annotated

from fastapi import APIRouter, Depends

from questboard.core.container import get_store
from questboard.models.activity import DashboardActivity
from questboard.schemas.activity import ActivityFeedItem
from questboard.schemas.common import APIResponse
from questboard.services.selectors import select_limited_activities
from questboard.services.store import DashboardStore
from questboard.utils.misc import format_relative_time, get_utc_now

router = APIRouter(prefix="/activities", tags=["activities"])


@router.get("/")
async def get_activities(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[list[ActivityFeedItem]]:
    """The most recent activities, limited by the saved activity limit."""
    now = get_utc_now()
    items = [
        ActivityFeedItem(
            activity=activity, relative_time=format_relative_time(activity.timestamp, now)
        )
        for activity in select_limited_activities(store.state)
    ]
    return APIResponse(data=items)


@router.post("/")
async def add_activity(
    activity: DashboardActivity,
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[DashboardActivity]:
    store.add_activity(activity)
    return APIResponse(data=activity, message="Activity recorded")

from typing import Annotated

from fastapi import APIRouter, Depends

from questboard.core.container import get_store
from questboard.schemas.common import APIResponse
from questboard.schemas.preferences import ActivityLimitUpdate, DashboardFilters, Preferences
from questboard.services.store import DashboardStore

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("/")
async def get_preferences(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[Preferences]:
    return APIResponse(data=store.state.preferences)


@router.patch("/filters")
async def update_filters(
    filters: DashboardFilters,
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[Preferences]:
    """Merge the given filters into the saved ones. Send `null` to clear a filter."""
    store.set_filters(filters)
    return APIResponse(data=store.state.preferences)


@router.post("/show-completed-quests/toggle")
async def toggle_show_completed_quests(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[Preferences]:
    store.toggle_show_completed_quests()
    return APIResponse(data=store.state.preferences)


@router.put("/activity-limit")
async def set_activity_limit(
    payload: ActivityLimitUpdate,
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[Preferences]:
    store.set_activity_limit(payload.activity_limit)
    return APIResponse(data=store.state.preferences)

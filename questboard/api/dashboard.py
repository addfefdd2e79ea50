from typing import Annotated

from fastapi import APIRouter, Depends

from questboard.core.container import get_store
from questboard.schemas.common import APIResponse
from questboard.schemas.dashboard import DashboardViews
from questboard.schemas.state import DashboardState
from questboard.services.selectors import select_dashboard_views
from questboard.services.store import DashboardStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/")
async def get_dashboard(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[DashboardState]:
    return APIResponse(data=store.state)


@router.post("/fetch")
async def fetch_dashboard(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[DashboardState]:
    """
    Load the full dashboard snapshot.

    A failed load is reported through the `error` field of the returned state,
    previously loaded data stays in place.
    """
    await store.fetch_dashboard_data()
    return APIResponse(data=store.state)


@router.post("/refresh")
async def refresh_dashboard(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[DashboardState]:
    """
    Reload user, quests, activities and upcoming classes.

    Leaderboard, badges and weekly stats are left as they are.
    """
    await store.refresh_dashboard()
    return APIResponse(data=store.state)


@router.get("/views")
async def get_dashboard_views(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[DashboardViews]:
    return APIResponse(data=select_dashboard_views(store.state))


@router.delete("/")
async def reset_dashboard(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[DashboardState]:
    store.reset_store()
    return APIResponse(data=store.state, message="Dashboard reset successfully")

from typing import Annotated

from fastapi import APIRouter, Depends

from questboard.core.container import get_store
from questboard.schemas.common import APIResponse
from questboard.schemas.rewards import RewardAmount
from questboard.services.rewards import PendingRewards
from questboard.services.store import DashboardStore

router = APIRouter(prefix="/rewards", tags=["rewards"])


@router.get("/pending")
async def get_pending_rewards(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[PendingRewards]:
    return APIResponse(data=store.state.pending_rewards)


@router.post("/pending/xp")
async def add_pending_xp(
    payload: RewardAmount,
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[PendingRewards]:
    store.add_pending_xp(payload.amount)
    return APIResponse(data=store.state.pending_rewards, message=f"Added {payload.amount} XP")


@router.post("/pending/coins")
async def add_pending_coins(
    payload: RewardAmount,
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[PendingRewards]:
    store.add_pending_coins(payload.amount)
    return APIResponse(
        data=store.state.pending_rewards, message=f"Added {payload.amount} coins"
    )


@router.delete("/pending")
async def clear_pending_rewards(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[PendingRewards]:
    """Called once the reward popup animation has played."""
    store.clear_pending_rewards()
    return APIResponse(data=store.state.pending_rewards)

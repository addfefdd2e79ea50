from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from questboard.core.container import get_store
from questboard.models.quest import DashboardQuest
from questboard.schemas.common import APIResponse
from questboard.schemas.quest import QuestCard, QuestProgressUpdate
from questboard.services.selectors import select_visible_quests
from questboard.services.store import DashboardStore
from questboard.utils.display import get_difficulty_color, get_difficulty_label

router = APIRouter(prefix="/quests", tags=["quests"])


@router.get("/")
async def get_quests(
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[list[QuestCard]]:
    """List quests after applying the saved filters and completed-quest toggle."""
    cards = [
        QuestCard(
            quest=quest,
            difficulty_color=get_difficulty_color(quest.difficulty),
            difficulty_label=get_difficulty_label(quest.difficulty),
        )
        for quest in select_visible_quests(store.state)
    ]
    return APIResponse(data=cards)


@router.patch("/{quest_id}/progress")
async def update_quest_progress(
    quest_id: str,
    payload: QuestProgressUpdate,
    store: Annotated[DashboardStore, Depends(get_store)],
) -> APIResponse[DashboardQuest]:
    quest = store.update_quest_progress(quest_id, payload.current)
    if quest is None:
        raise HTTPException(status_code=404, detail="Quest not found")
    return APIResponse(data=quest, message="Quest progress updated")

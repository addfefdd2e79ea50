import pydantic

from questboard.core.enums import BadgeCategory, ItemRarity

from ._base import BaseModel, UtcDatetime


class BadgeProgress(BaseModel):
    current: int = pydantic.Field(ge=0)
    target: int = pydantic.Field(ge=0)


class FeaturedBadge(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    rarity: ItemRarity
    category: BadgeCategory
    unlocked_at: UtcDatetime | None = None
    is_new: bool = False
    progress: BadgeProgress | None = None
    is_locked: bool = False
    hint: str | None = None

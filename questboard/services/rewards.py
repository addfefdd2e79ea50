from typing import Self

import pydantic

from questboard.models._base import BaseModel


class PendingRewards(BaseModel):
    """Reward counters waiting to be drained by the reward popup animation.

    Counters only grow until cleared; there is no cap and no coalescing, so
    rewards granted in quick succession add up before the UI consumes them.
    """

    xp: int = pydantic.Field(default=0, ge=0)
    coins: int = pydantic.Field(default=0, ge=0)

    def add_xp(self, amount: int) -> Self:
        _check_amount(amount)
        return self.model_copy(update={"xp": self.xp + amount})

    def add_coins(self, amount: int) -> Self:
        _check_amount(amount)
        return self.model_copy(update={"coins": self.coins + amount})

    def cleared(self) -> Self:
        return self.model_copy(update={"xp": 0, "coins": 0})

    @property
    def is_empty(self) -> bool:
        return self.xp == 0 and self.coins == 0


def _check_amount(amount: int) -> None:
    if amount < 0:
        msg = f"Pending reward amount must be non-negative, got {amount}"
        raise ValueError(msg)

from pydantic import BaseModel, Field


class RewardAmount(BaseModel):
    amount: int = Field(ge=0, description="Amount to add to the pending counter")

from typing import Literal

from pydantic import BaseModel, Field

from questboard.utils.misc import get_utc_iso_now


class APIResponse[T](BaseModel):
    """Envelope shared by the HTTP API and the HTTP data source."""

    status: Literal["success", "error"] = "success"
    data: T | None = None
    message: str | None = None
    timestamp: str = Field(default_factory=get_utc_iso_now)

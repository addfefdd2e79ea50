from typing import Protocol

import httpx
import pydantic
from loguru import logger

from questboard.core.exceptions import FetchError, ValidationError
from questboard.schemas.common import APIResponse
from questboard.schemas.snapshot import DashboardSnapshot, PartialSnapshot


class DataSource(Protocol):
    """Where the dashboard store gets its snapshots from."""

    async def fetch_all(self) -> DashboardSnapshot: ...

    async def fetch_partial(self) -> PartialSnapshot: ...


class HttpDataSource:
    """Loads snapshots from a backend that wraps payloads in :class:`APIResponse`."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    @classmethod
    def from_url(cls, base_url: str, *, timeout: float = 10.0) -> "HttpDataSource":
        return cls(httpx.AsyncClient(base_url=base_url, timeout=timeout))

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch_all(self) -> DashboardSnapshot:
        return await self._get("/dashboard", DashboardSnapshot)

    async def fetch_partial(self) -> PartialSnapshot:
        return await self._get("/dashboard/partial", PartialSnapshot)

    async def _get[T: pydantic.BaseModel](self, path: str, model: type[T]) -> T:
        try:
            response = await self.client.get(path)
        except httpx.HTTPError as e:
            logger.warning(f"Request to {path} failed: {e!r}")
            msg = "Network error"
            raise FetchError(msg) from e

        if response.is_error:
            msg = _error_message(response) or f"Request failed with status {response.status_code}"
            logger.warning(f"GET {path} returned {response.status_code}: {msg}")
            raise FetchError(msg)

        try:
            envelope = APIResponse[model].model_validate_json(response.content)
        except pydantic.ValidationError as e:
            logger.warning(f"Malformed payload from {path}: {e}")
            msg = "Received malformed dashboard data"
            raise ValidationError(msg) from e

        if envelope.status == "error":
            raise FetchError(envelope.message or "Request failed")
        if envelope.data is None:
            msg = "Response contained no dashboard data"
            raise ValidationError(msg)
        return envelope.data


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message") or body.get("detail")
        return message if isinstance(message, str) else None
    return None

import random

import httpx
import pytest
from conftest import NOW, make_snapshot

from questboard.adapters.data_source import HttpDataSource
from questboard.adapters.mock_data import MockDataSource, build_snapshot
from questboard.core.exceptions import FetchError, ValidationError
from questboard.schemas.common import APIResponse
from questboard.schemas.snapshot import DashboardSnapshot


def make_source(handler) -> HttpDataSource:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
    return HttpDataSource(client)


@pytest.mark.anyio
async def test_fetch_all_unwraps_envelope() -> None:
    snapshot = make_snapshot()

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/dashboard"
        envelope = APIResponse[DashboardSnapshot](data=snapshot)
        return httpx.Response(200, json=envelope.model_dump(mode="json", by_alias=True))

    source = make_source(handler)
    try:
        result = await source.fetch_all()
    finally:
        await source.aclose()

    assert result == snapshot


@pytest.mark.anyio
async def test_fetch_partial_uses_partial_endpoint() -> None:
    snapshot = make_snapshot()
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        body = {
            "status": "success",
            "data": {
                "user": snapshot.user.model_dump(mode="json", by_alias=True),
                "activeQuests": [],
            },
        }
        return httpx.Response(200, json=body)

    source = make_source(handler)
    result = await source.fetch_partial()

    assert paths == ["/dashboard/partial"]
    assert result.user == snapshot.user
    assert result.active_quests == ()


@pytest.mark.anyio
async def test_transport_failure_is_a_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError, match="Network error"):
        await make_source(handler).fetch_all()


@pytest.mark.anyio
async def test_error_status_uses_envelope_message() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"status": "error", "message": "Maintenance"})

    with pytest.raises(FetchError, match="Maintenance"):
        await make_source(handler).fetch_all()


@pytest.mark.anyio
async def test_error_status_without_body() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="oops")

    with pytest.raises(FetchError, match="status 500"):
        await make_source(handler).fetch_all()


@pytest.mark.anyio
async def test_malformed_payload_is_a_validation_error() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "success", "data": {"user": {"id": 1}}})

    with pytest.raises(ValidationError):
        await make_source(handler).fetch_all()


@pytest.mark.anyio
async def test_missing_data_is_a_validation_error() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "success", "data": None})

    with pytest.raises(ValidationError):
        await make_source(handler).fetch_all()


@pytest.mark.anyio
async def test_mock_source_returns_development_data() -> None:
    source = MockDataSource(fetch_delay=0, refresh_delay=0, rng=random.Random(7))

    snapshot = await source.fetch_all()
    partial = await source.fetch_partial()

    assert snapshot.user.display_name == "Alex Chen"
    assert len(snapshot.active_quests) == 5
    assert len(snapshot.leaderboard) == 4
    stats = partial.user.stats
    assert 2450 <= stats.current_xp < stats.required_xp


def test_mock_deadlines_are_relative_to_now() -> None:
    snapshot = build_snapshot(NOW)

    deadlines = {q.id: q.deadline for q in snapshot.active_quests}
    assert deadlines["quest_003"] is None
    assert deadlines["quest_004"] is not None
    assert (deadlines["quest_004"] - NOW).total_seconds() == 8 * 3600

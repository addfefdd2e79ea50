from datetime import UTC, datetime, timedelta
from typing import Any

import anyio
import pytest

from questboard.adapters.mock_data import build_snapshot
from questboard.adapters.persistence import InMemoryPreferencesStore
from questboard.models.activity import DashboardActivity
from questboard.models.quest import DashboardQuest
from questboard.schemas.snapshot import DashboardSnapshot, PartialSnapshot
from questboard.services.store import DashboardStore

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


def make_quest(**overrides: Any) -> DashboardQuest:
    data: dict[str, Any] = {
        "id": "quest_test",
        "title": "Test Quest",
        "type": "side",
        "category": "academic",
        "difficulty": "easy",
        "status": "in_progress",
        "progress": {"current": 0, "target": 5, "percentage": 0},
        "rewards": {"xp": 100, "coins": 10},
        "icon": "Star",
        "color": "#ffffff",
    }
    data.update(overrides)
    return DashboardQuest.model_validate(data)


def make_activity(index: int) -> DashboardActivity:
    return DashboardActivity(
        id=f"activity_{index:03d}",
        type="quest_completed",
        title=f"Activity {index}",
        description="Did a thing",
        timestamp=NOW + timedelta(minutes=index),
        icon="CheckCircle",
        icon_color="#10b981",
        xp_gained=10,
    )


def make_snapshot() -> DashboardSnapshot:
    return build_snapshot(NOW)


def make_partial(display_name: str = "Refreshed Alex") -> PartialSnapshot:
    snapshot = make_snapshot()
    return PartialSnapshot(
        user=snapshot.user.model_copy(update={"display_name": display_name}),
        active_quests=snapshot.active_quests[:2],
        activities=snapshot.activities[:1],
        upcoming_classes=snapshot.upcoming_classes[:1],
    )


class FakeDataSource:
    def __init__(
        self,
        snapshot: DashboardSnapshot | None = None,
        partial: PartialSnapshot | None = None,
    ) -> None:
        self.snapshot = snapshot or make_snapshot()
        self.partial = partial or make_partial()
        self.error: Exception | None = None
        self.full_calls = 0
        self.partial_calls = 0

    async def fetch_all(self) -> DashboardSnapshot:
        self.full_calls += 1
        if self.error is not None:
            raise self.error
        return self.snapshot

    async def fetch_partial(self) -> PartialSnapshot:
        self.partial_calls += 1
        if self.error is not None:
            raise self.error
        return self.partial


class GatedDataSource(FakeDataSource):
    """Holds every load until the test releases it. Create inside a running test."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.full_started = anyio.Event()
        self.partial_started = anyio.Event()
        self.full_gate = anyio.Event()
        self.partial_gate = anyio.Event()

    async def fetch_all(self) -> DashboardSnapshot:
        self.full_started.set()
        await self.full_gate.wait()
        return await super().fetch_all()

    async def fetch_partial(self) -> PartialSnapshot:
        self.partial_started.set()
        await self.partial_gate.wait()
        return await super().fetch_partial()


@pytest.fixture
def data_source() -> FakeDataSource:
    return FakeDataSource()


@pytest.fixture
def preferences_store() -> InMemoryPreferencesStore:
    return InMemoryPreferencesStore()


@pytest.fixture
def store(
    data_source: FakeDataSource, preferences_store: InMemoryPreferencesStore
) -> DashboardStore:
    return DashboardStore(data_source, preferences_store)

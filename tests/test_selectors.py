from conftest import make_activity, make_quest, make_snapshot

from questboard.schemas.preferences import DashboardFilters, Preferences
from questboard.schemas.state import DashboardState
from questboard.services import selectors


def make_state(**overrides) -> DashboardState:
    snapshot = make_snapshot()
    data = dict(snapshot)
    data.update(overrides)
    return DashboardState(**data)


def test_in_progress_daily_and_expiring_quests() -> None:
    state = make_state(
        active_quests=(
            make_quest(id="a", type="daily", status="in_progress", isExpiringSoon=True),
            make_quest(id="b", type="daily", status="completed"),
            make_quest(id="c", type="main", status="in_progress"),
            make_quest(id="d", type="weekly", status="available"),
        )
    )

    assert [q.id for q in selectors.select_in_progress_quests(state)] == ["a", "c"]
    assert [q.id for q in selectors.select_daily_quests(state)] == ["a", "b"]
    assert [q.id for q in selectors.select_expiring_quests(state)] == ["a"]


def test_limited_activities_returns_most_recent_first() -> None:
    # Newest first, as the store keeps them
    activities = tuple(make_activity(i) for i in range(8, 0, -1))
    state = make_state(activities=activities, preferences=Preferences(activity_limit=5))

    limited = selectors.select_limited_activities(state)

    assert len(limited) == 5
    assert [a.id for a in limited] == [f"activity_{i:03d}" for i in (8, 7, 6, 5, 4)]


def test_limited_activities_with_zero_limit() -> None:
    state = make_state(preferences=Preferences(activity_limit=0))

    assert selectors.select_limited_activities(state) == ()


def test_current_user_rank() -> None:
    state = make_state()

    entry = selectors.select_current_user_rank(state)

    assert entry is not None
    assert entry.user_id == "user_001"
    assert entry.rank == 127


def test_current_user_rank_absent_from_window() -> None:
    state = make_state()
    state = state.model_copy(
        update={"leaderboard": tuple(e for e in state.leaderboard if not e.is_current_user)}
    )

    assert selectors.select_current_user_rank(state) is None


def test_visible_quests_apply_filters_and_completed_toggle() -> None:
    quests = (
        make_quest(id="a", type="daily", status="in_progress"),
        make_quest(id="b", type="daily", status="completed"),
        make_quest(id="c", type="main", status="claimed"),
        make_quest(id="d", type="main", status="in_progress"),
    )
    state = make_state(active_quests=quests)

    assert [q.id for q in selectors.select_visible_quests(state)] == ["a", "d"]

    state = make_state(
        active_quests=quests,
        preferences=Preferences(
            show_completed_quests=True, filters=DashboardFilters(quest_type="daily")
        ),
    )
    assert [q.id for q in selectors.select_visible_quests(state)] == ["a", "b"]


def test_user_selectors_on_empty_state() -> None:
    state = DashboardState()

    assert selectors.select_user(state) is None
    assert selectors.select_user_stats(state) is None
    assert selectors.select_level_progress(state) == 0.0
    assert selectors.select_loading_status(state) == (False, False)
    assert selectors.select_current_user_rank(state) is None


def test_level_progress_ratio() -> None:
    state = make_state()

    # 2450 / 3000 in the development data
    assert selectors.select_level_progress(state) == 2450 / 3000


def test_selectors_do_not_modify_state() -> None:
    state = make_state()
    before = state.model_dump()

    selectors.select_dashboard_views(state, hour=9)

    assert state.model_dump() == before


def test_dashboard_views() -> None:
    views = selectors.select_dashboard_views(make_state(), hour=9)

    assert views.greeting == "Good morning"
    assert len(views.in_progress_quests) == 5
    assert [q.id for q in views.daily_quests] == ["quest_004"]
    assert [q.id for q in views.expiring_quests] == ["quest_004"]
    assert len(views.limited_activities) == 5
    assert views.current_user_rank is not None

import operator
from collections.abc import Callable
from typing import Any

from loguru import logger

from questboard.adapters.data_source import DataSource
from questboard.adapters.persistence import PreferencesStore
from questboard.core.enums import LoadKind, StoreAction
from questboard.core.exceptions import DataSourceError
from questboard.models.activity import DashboardActivity
from questboard.models.badge import FeaturedBadge
from questboard.models.leaderboard import LeaderboardEntry
from questboard.models.quest import DashboardQuest
from questboard.models.schedule import UpcomingClass
from questboard.models.user import DashboardUser
from questboard.models.weekly_stats import WeeklyStats
from questboard.schemas.preferences import DashboardFilters, Preferences
from questboard.schemas.state import DashboardState
from questboard.services.quest_progress import apply_quest_progress

type Listener = Callable[[DashboardState, StoreAction], None]

ACTIVITY_HISTORY_SIZE = 20
FETCH_ERROR_MESSAGE = "Failed to fetch dashboard data"
REFRESH_ERROR_MESSAGE = "Failed to refresh dashboard"


class DashboardStore:
    """Owns the dashboard snapshot and every transition applied to it.

    State is an immutable :class:`DashboardState` that is swapped on each
    transition, so consumers may hold on to the objects they were handed.
    Local mutations are synchronous. Loads suspend only while awaiting the
    data source; each load takes a token from a shared sequence and its
    result is dropped if a newer load of the same kind was issued, or if
    newer data of any kind has already been applied.
    """

    def __init__(
        self,
        data_source: DataSource,
        preferences_store: PreferencesStore,
        *,
        activity_history_size: int = ACTIVITY_HISTORY_SIZE,
        default_preferences: Preferences | None = None,
    ) -> None:
        self.data_source = data_source
        self.preferences_store = preferences_store
        self.activity_history_size = activity_history_size
        self.default_preferences = default_preferences or Preferences()

        self._listeners: list[Listener] = []
        self._sequence = 0
        self._latest_token: dict[LoadKind, int] = dict.fromkeys(LoadKind, 0)
        self._applied_token = 0
        self.last_action: StoreAction | None = None

        self._state = DashboardState(preferences=self._load_preferences())

    @property
    def state(self) -> DashboardState:
        return self._state

    # Subscriptions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(state, action)`` after every transition."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def watch[T](
        self,
        selector: Callable[[DashboardState], T],
        listener: Callable[[T], None],
        *,
        equals: Callable[[T, T], bool] = operator.eq,
    ) -> Callable[[], None]:
        """Call ``listener`` with the selected value whenever it changes."""
        last = selector(self._state)

        def on_change(state: DashboardState, _action: StoreAction) -> None:
            nonlocal last
            selected = selector(state)
            if equals(last, selected):
                return
            last = selected
            listener(selected)

        return self.subscribe(on_change)

    def _commit(self, action: StoreAction, **changes: Any) -> DashboardState:
        previous = self._state
        self._state = previous.model_copy(update=changes)
        self.last_action = action
        logger.debug(f"{action}: {', '.join(changes) or 'no changes'}")
        state = self._state

        for listener in tuple(self._listeners):
            try:
                listener(state, action)
            except Exception:
                logger.exception(f"Dashboard listener {listener!r} failed on {action}")

        if "preferences" in changes:
            self._save_preferences(self._state.preferences)
        return state

    # Preferences persistence

    def _load_preferences(self) -> Preferences:
        try:
            preferences = self.preferences_store.load()
        except Exception:
            logger.exception("Failed to load dashboard preferences, using defaults")
            return self.default_preferences
        return preferences or self.default_preferences

    def _save_preferences(self, preferences: Preferences) -> None:
        # Runs after listeners have seen the transition; a failed write never rolls it back
        try:
            self.preferences_store.save(preferences)
        except Exception:
            logger.exception("Failed to persist dashboard preferences")

    # Setters

    def set_user(self, user: DashboardUser | None) -> None:
        self._commit(StoreAction.SET_USER, user=user)

    def set_active_quests(self, quests: tuple[DashboardQuest, ...]) -> None:
        self._commit(StoreAction.SET_ACTIVE_QUESTS, active_quests=tuple(quests))

    def set_activities(self, activities: tuple[DashboardActivity, ...]) -> None:
        self._commit(StoreAction.SET_ACTIVITIES, activities=tuple(activities))

    def set_upcoming_classes(self, classes: tuple[UpcomingClass, ...]) -> None:
        self._commit(StoreAction.SET_UPCOMING_CLASSES, upcoming_classes=tuple(classes))

    def set_leaderboard(self, entries: tuple[LeaderboardEntry, ...]) -> None:
        self._commit(StoreAction.SET_LEADERBOARD, leaderboard=tuple(entries))

    def set_featured_badges(self, badges: tuple[FeaturedBadge, ...]) -> None:
        self._commit(StoreAction.SET_FEATURED_BADGES, featured_badges=tuple(badges))

    def set_weekly_stats(self, stats: WeeklyStats | None) -> None:
        self._commit(StoreAction.SET_WEEKLY_STATS, weekly_stats=stats)

    def set_error(self, error: str | None) -> None:
        self._commit(StoreAction.SET_ERROR, error=error)

    # Loading

    def _issue_token(self, kind: LoadKind) -> int:
        self._sequence += 1
        self._latest_token[kind] = self._sequence
        return self._sequence

    def _is_current(self, kind: LoadKind, token: int) -> bool:
        return self._latest_token[kind] == token

    def _is_fresh(self, kind: LoadKind, token: int) -> bool:
        return self._is_current(kind, token) and token > self._applied_token

    async def fetch_dashboard_data(self) -> None:
        """Load the full snapshot. Failures end up in ``state.error``."""
        token = self._issue_token(LoadKind.FULL)
        self._commit(StoreAction.FETCH_STARTED, is_loading=True, error=None)
        logger.info(f"Fetching dashboard data (token {token})")

        try:
            snapshot = await self.data_source.fetch_all()
        except Exception as e:
            self._settle_failure(LoadKind.FULL, token, e)
            return

        if not self._is_fresh(LoadKind.FULL, token):
            self._settle_stale(LoadKind.FULL, token)
            return

        self._applied_token = token
        self._commit(
            StoreAction.FETCH_SUCCEEDED,
            user=snapshot.user,
            active_quests=snapshot.active_quests,
            activities=snapshot.activities[: self.activity_history_size],
            upcoming_classes=snapshot.upcoming_classes,
            leaderboard=snapshot.leaderboard,
            featured_badges=snapshot.featured_badges,
            weekly_stats=snapshot.weekly_stats,
            is_loading=False,
        )

    async def refresh_dashboard(self) -> None:
        """Reload the fast-changing part of the snapshot, keeping the rest."""
        token = self._issue_token(LoadKind.PARTIAL)
        self._commit(StoreAction.REFRESH_STARTED, is_refreshing=True, error=None)
        logger.info(f"Refreshing dashboard (token {token})")

        try:
            snapshot = await self.data_source.fetch_partial()
        except Exception as e:
            self._settle_failure(LoadKind.PARTIAL, token, e)
            return

        if not self._is_fresh(LoadKind.PARTIAL, token):
            self._settle_stale(LoadKind.PARTIAL, token)
            return

        self._applied_token = token
        self._commit(
            StoreAction.REFRESH_SUCCEEDED,
            user=snapshot.user,
            active_quests=snapshot.active_quests,
            activities=snapshot.activities[: self.activity_history_size],
            upcoming_classes=snapshot.upcoming_classes,
            is_refreshing=False,
        )

    def _settle_failure(self, kind: LoadKind, token: int, error: Exception) -> None:
        # Called from inside the except block of a load
        if not self._is_fresh(kind, token):
            self._settle_stale(kind, token)
            return

        if isinstance(error, DataSourceError):
            logger.warning(f"Dashboard {kind} load failed: {error}")
        else:
            logger.exception(f"Unexpected error during dashboard {kind} load")

        if kind is LoadKind.FULL:
            message = str(error) or FETCH_ERROR_MESSAGE
            self._commit(StoreAction.FETCH_FAILED, error=message, is_loading=False)
        else:
            message = str(error) or REFRESH_ERROR_MESSAGE
            self._commit(StoreAction.REFRESH_FAILED, error=message, is_refreshing=False)

    def _settle_stale(self, kind: LoadKind, token: int) -> None:
        logger.debug(f"Discarding stale {kind} load result (token {token})")
        if not self._is_current(kind, token):
            # A newer load of this kind is still running and owns the flag
            return
        if kind is LoadKind.FULL:
            self._commit(StoreAction.FETCH_SETTLED, is_loading=False)
        else:
            self._commit(StoreAction.REFRESH_SETTLED, is_refreshing=False)

    # Quests and activity

    def update_quest_progress(self, quest_id: str, new_current: int) -> DashboardQuest | None:
        """Move one quest's progress; returns the updated quest or None if unknown."""
        quests = self._state.active_quests
        for index, quest in enumerate(quests):
            if quest.id == quest_id:
                break
        else:
            logger.warning(f"Cannot update progress of unknown quest {quest_id}")
            return None

        updated = apply_quest_progress(quest, new_current)
        self._commit(
            StoreAction.UPDATE_QUEST_PROGRESS,
            active_quests=(*quests[:index], updated, *quests[index + 1 :]),
        )
        return updated

    def add_activity(self, activity: DashboardActivity) -> None:
        activities = (activity, *self._state.activities)[: self.activity_history_size]
        self._commit(StoreAction.ADD_ACTIVITY, activities=activities)

    # Pending rewards

    def add_pending_xp(self, amount: int) -> None:
        self._commit(
            StoreAction.ADD_PENDING_XP, pending_rewards=self._state.pending_rewards.add_xp(amount)
        )

    def add_pending_coins(self, amount: int) -> None:
        self._commit(
            StoreAction.ADD_PENDING_COINS,
            pending_rewards=self._state.pending_rewards.add_coins(amount),
        )

    def clear_pending_rewards(self) -> None:
        self._commit(
            StoreAction.CLEAR_PENDING_REWARDS, pending_rewards=self._state.pending_rewards.cleared()
        )

    # Preferences

    def _update_preferences(self, action: StoreAction, **changes: Any) -> None:
        current = self._state.preferences.model_dump()
        preferences = Preferences.model_validate({**current, **changes})
        self._commit(action, preferences=preferences)

    def set_filters(self, filters: DashboardFilters | dict[str, Any]) -> None:
        """Merge ``filters`` into the current ones; only explicitly given keys change."""
        if not isinstance(filters, DashboardFilters):
            filters = DashboardFilters.model_validate(filters)
        merged = self._state.filters.model_copy(update=filters.model_dump(exclude_unset=True))
        self._update_preferences(StoreAction.SET_FILTERS, filters=merged)

    def toggle_show_completed_quests(self) -> None:
        self._update_preferences(
            StoreAction.TOGGLE_SHOW_COMPLETED_QUESTS,
            show_completed_quests=not self._state.show_completed_quests,
        )

    def set_activity_limit(self, limit: int) -> None:
        self._update_preferences(StoreAction.SET_ACTIVITY_LIMIT, activity_limit=limit)

    def reset_store(self) -> None:
        """Return to the initial state and drop any load still in flight."""
        self._sequence += 1
        self._latest_token = dict.fromkeys(LoadKind, self._sequence)
        self._applied_token = self._sequence

        initial = DashboardState(preferences=self.default_preferences)
        self._commit(StoreAction.RESET_STORE, **dict(initial))

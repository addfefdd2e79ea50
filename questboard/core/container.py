from fastapi import Request

from questboard.adapters.data_source import DataSource, HttpDataSource
from questboard.adapters.mock_data import MockDataSource
from questboard.adapters.persistence import JsonFilePreferencesStore, PreferencesStore
from questboard.core.config import Config
from questboard.schemas.preferences import Preferences
from questboard.services.store import DashboardStore


def build_data_source(config: Config) -> DataSource:
    if config.data_source == "http":
        return HttpDataSource.from_url(
            config.api_base_url, timeout=config.request_timeout_seconds
        )
    return MockDataSource(
        fetch_delay=config.mock_fetch_delay_seconds,
        refresh_delay=config.mock_refresh_delay_seconds,
    )


def build_preferences_store(config: Config) -> PreferencesStore:
    return JsonFilePreferencesStore(config.preferences_path, key=config.preferences_key)


def build_store(config: Config) -> DashboardStore:
    return DashboardStore(
        build_data_source(config),
        build_preferences_store(config),
        activity_history_size=config.activity_history_size,
        default_preferences=Preferences(activity_limit=config.default_activity_limit),
    )


def get_store(request: Request) -> DashboardStore:
    return request.app.state.store

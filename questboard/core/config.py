from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="QUESTBOARD_")

    env: Literal["prod", "dev"] = "prod"
    log_level: str = "INFO"

    # Data source
    data_source: Literal["mock", "http"] = "mock"
    api_base_url: str = "http://localhost:8080/api"
    request_timeout_seconds: float = 10.0
    mock_fetch_delay_seconds: float = 0.8
    mock_refresh_delay_seconds: float = 0.5

    # Preferences blob store
    preferences_path: Path = Path("dashboard-storage.json")
    preferences_key: str = "dashboard-storage"

    # Store limits
    activity_history_size: int = 20
    default_activity_limit: int = 5

    @property
    def is_dev(self) -> bool:
        return self.env == "dev"


load_dotenv()
settings = Config()

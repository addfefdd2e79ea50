import json
from pathlib import Path
from typing import Protocol

import pydantic
from loguru import logger

from questboard.schemas.preferences import Preferences

STORAGE_VERSION = 0


class PreferencesStore(Protocol):
    def load(self) -> Preferences | None: ...

    def save(self, preferences: Preferences) -> None: ...


class InMemoryPreferencesStore:
    def __init__(self, preferences: Preferences | None = None) -> None:
        self.preferences = preferences
        self.save_count = 0

    def load(self) -> Preferences | None:
        return self.preferences

    def save(self, preferences: Preferences) -> None:
        self.preferences = preferences
        self.save_count += 1


class JsonFilePreferencesStore:
    """Keeps preferences in a JSON key/value file.

    Each key holds ``{"state": {...}, "version": 0}`` so several stores can
    share one file.
    """

    def __init__(self, path: Path, key: str = "dashboard-storage") -> None:
        self.path = path
        self.key = key

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read preferences file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> Preferences | None:
        record = self._read_all().get(self.key)
        if not isinstance(record, dict) or "state" not in record:
            return None

        if record.get("version") != STORAGE_VERSION:
            logger.info(f"Ignoring preferences stored with version {record.get('version')}")
            return None

        try:
            return Preferences.model_validate(record["state"])
        except pydantic.ValidationError as e:
            logger.warning(f"Discarding invalid stored preferences: {e}")
            return None

    def save(self, preferences: Preferences) -> None:
        data = self._read_all()
        data[self.key] = {
            "state": preferences.model_dump(mode="json", by_alias=True),
            "version": STORAGE_VERSION,
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Swap the whole file in at once so a failed write leaves the old one intact
        temp_path = self.path.with_name(f"{self.path.name}.tmp")
        temp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        temp_path.replace(self.path)

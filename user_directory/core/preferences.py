"""
Preference persistence.

A narrow key-value string store plus the theme preference that lives in it.
"""
import json
from pathlib import Path
from typing import Dict, Optional, Protocol

from loguru import logger

from user_directory.core.models import ThemeMode


class KeyValueStore(Protocol):
    """Durable string map."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """In-process store; nothing survives the session."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    String map persisted as a JSON object on disk.

    The file is read lazily on first access and rewritten on every set().
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._data: Optional[Dict[str, str]] = None

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def _load(self) -> Dict[str, str]:
        if self._data is None:
            self._data = {}
            if self._path.is_file():
                try:
                    with open(self._path, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                    if isinstance(raw, dict):
                        self._data = {str(k): str(v) for k, v in raw.items()}
                    else:
                        logger.warning(f"Ignoring non-object preferences file {self._path}")
                except (OSError, json.JSONDecodeError) as e:
                    logger.error(f"Failed to read preferences from {self._path}: {e}")
        return self._data


class ThemePreferenceStore:
    """
    Reads/writes the dark-mode flag.

    Stored as "enabled"/"disabled" under the "darkMode" key; anything
    else (including a missing key) reads as light.
    """

    KEY = "darkMode"
    ENABLED = "enabled"
    DISABLED = "disabled"

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load(self) -> ThemeMode:
        try:
            value = self._store.get(self.KEY)
        except OSError as e:
            logger.error(f"Failed to read theme preference: {e}")
            return ThemeMode.LIGHT
        return ThemeMode.DARK if value == self.ENABLED else ThemeMode.LIGHT

    def save(self, mode: ThemeMode) -> None:
        value = self.ENABLED if mode.is_dark else self.DISABLED
        try:
            self._store.set(self.KEY, value)
        except OSError as e:
            logger.error(f"Failed to persist theme preference: {e}")
            return
        logger.debug(f"Theme preference saved: {value}")

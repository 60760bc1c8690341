"""
User Directory Core.

Provides the non-UI building blocks:
- ConfigManager: Configuration with persistence
- setup_logging: Loguru sinks
- UserDirectoryClient: Fetches the user collection
- ThemePreferenceStore: Persisted light/dark flag
"""
from .config import ConfigManager, AppConfig, GeneralSettings, ApiSettings, StorageSettings
from .events import Signal
from .errors import DirectoryError, TransportError, ParseError
from .logging import setup_logging
from .client import UserDirectoryClient
from .preferences import KeyValueStore, MemoryStore, JsonFileStore, ThemePreferenceStore

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "ApiSettings",
    "StorageSettings",
    "Signal",
    "DirectoryError",
    "TransportError",
    "ParseError",
    "setup_logging",
    "UserDirectoryClient",
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "ThemePreferenceStore",
]

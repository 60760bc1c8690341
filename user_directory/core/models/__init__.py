"""
Domain models for the user directory.
"""
from user_directory.core.models.user import (
    Address,
    Company,
    UserCollectionAdapter,
    UserRecord,
)
from user_directory.core.models.preferences import ThemeMode

__all__ = [
    "Address",
    "Company",
    "UserRecord",
    "UserCollectionAdapter",
    "ThemeMode",
]

"""
Directory errors.

Both failures reach the viewer as the same error state with a retry
affordance; the split exists for logging and tests.
"""
from typing import Optional


class DirectoryError(Exception):
    """Base class for user directory retrieval failures."""


class TransportError(DirectoryError):
    """Network unreachable, timed out, or a non-2xx HTTP status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ParseError(DirectoryError):
    """Payload is not a well-formed collection of user records."""

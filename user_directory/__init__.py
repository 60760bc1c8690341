"""
User Directory - Desktop viewer for a remote user directory.

Fetches user records, renders them as cards, and narrows them by search,
city and company, with a persisted light/dark preference.
"""
__version__ = "0.1.0"

"""Core configuration and shared infrastructure."""

from goodfriends.core.config import Settings, get_settings
from goodfriends.core.constants import (
    FRIEND_FILTER_PATTERN,
    LOCATION_EXTRA_CHARS,
    NO_CITY,
)
from goodfriends.core.limiter import limiter

__all__ = [
    "Settings",
    "get_settings",
    "FRIEND_FILTER_PATTERN",
    "LOCATION_EXTRA_CHARS",
    "NO_CITY",
    "limiter",
]

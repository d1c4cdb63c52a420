"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .logging_config import configure_logging, get_logger, LogContext
from .errors import KeepAliveError, PendingCacheError
from .cache import CacheEntry, CacheStore, Stats

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # Errors
    "KeepAliveError",
    "PendingCacheError",
    # Caching
    "CacheEntry",
    "CacheStore",
    "Stats",
]

"""Render-tree node cache: keeps component instances alive across re-renders."""

from .core import (
    CacheEntry,
    CacheStore,
    KeepAliveError,
    PendingCacheError,
    Settings,
    Stats,
    configure_logging,
    get_settings,
)
from .identity import component_name, first_component_child, resolve_key
from .keep_alive import KeepAlive
from .matching import is_cacheable, matches
from .models import (
    ComponentDefinition,
    ComponentInstance,
    ComponentOptions,
    KeepAliveOptions,
    PendingCache,
    VNode,
)

__version__ = "0.1.0"

__all__ = [
    "KeepAlive",
    "KeepAliveOptions",
    # Render tree
    "VNode",
    "ComponentDefinition",
    "ComponentOptions",
    "ComponentInstance",
    # Store
    "CacheEntry",
    "CacheStore",
    "PendingCache",
    "Stats",
    # Identity and filters
    "resolve_key",
    "component_name",
    "first_component_child",
    "matches",
    "is_cacheable",
    # Infrastructure
    "Settings",
    "get_settings",
    "configure_logging",
    "KeepAliveError",
    "PendingCacheError",
]

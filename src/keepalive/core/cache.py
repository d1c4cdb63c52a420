"""LRU store for cached component instances.

Ordered mapping from cache key to entry, oldest-used first. Removal of an
entry destroys its instance unless that instance is the one currently
rendered. Every operation is O(1) except pruning and disposal.
"""

from collections import OrderedDict
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .logging_config import get_logger

if TYPE_CHECKING:
    from ..monitoring.metrics import MetricsCollector

logger = get_logger(__name__)


@dataclass
class CacheEntry:
    """Cached component: declared name, tag and the owned instance."""

    name: str | None
    tag: str | None
    instance: Any


@dataclass
class Stats:
    """Cache statistics."""

    size: int = 0
    max_size: int | None = None
    hits: int = 0
    misses: int = 0
    admissions: int = 0
    evictions: int = 0
    prunes: int = 0
    destroyed: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate hit rate (0.0 to 1.0)."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Export as dictionary."""
        return {
            "size": self.size,
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "admissions": self.admissions,
            "evictions": self.evictions,
            "prunes": self.prunes,
            "destroyed": self.destroyed,
            "hit_rate": self.hit_rate,
        }


class CacheStore:
    """
    Bounded LRU store of component instances.

    Features:
    - Recency refreshed on every read (get) and write (admit)
    - Capacity checked after insertion, trimming back to exactly max_size
    - Never destroys the active (currently rendered) instance
    - Hit/miss/eviction statistics

    Examples:
        >>> store = CacheStore(max_size=2)
        >>> store.admit("a", CacheEntry("A", None, instance_a))
        >>> store.get("a").name
        'A'
    """

    def __init__(
        self,
        max_size: int | None = None,
        name: str = "keep-alive",
        metrics: "MetricsCollector | None" = None,
    ):
        """
        Initialize store.

        Args:
            max_size: Maximum number of live entries (None = unbounded)
            name: Cache name used in logs and metric labels
            metrics: Optional Prometheus collector
        """
        if max_size is not None and max_size <= 0:
            raise ValueError("max_size must be positive")

        self.max_size = max_size
        self.name = name
        self.metrics = metrics

        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._stats = Stats(max_size=max_size)

    def get(self, key: str) -> CacheEntry | None:
        """
        Look up an entry and mark it most recently used.

        Args:
            key: Cache key

        Returns:
            Entry or None if not present
        """
        entry = self._entries.get(key)
        if entry is None:
            self._stats.misses += 1
            if self.metrics:
                self.metrics.record_miss(self.name)
            return None

        self._entries.move_to_end(key)
        self._stats.hits += 1
        if self.metrics:
            self.metrics.record_hit(self.name)
        return entry

    def peek(self, key: str) -> CacheEntry | None:
        """Look up an entry without touching recency or stats."""
        return self._entries.get(key)

    def touch(self, key: str) -> bool:
        """Mark key most recently used. Returns False if absent."""
        if key not in self._entries:
            return False
        self._entries.move_to_end(key)
        return True

    def admit(self, key: str, entry: CacheEntry, active: Any = None) -> str | None:
        """
        Insert or overwrite an entry as most recently used, then enforce max_size.

        Args:
            key: Cache key
            entry: Entry to store
            active: Instance currently rendered (never destroyed)

        Returns:
            Key evicted to make room, or None
        """
        if key in self._entries:
            self._entries.move_to_end(key)
        self._entries[key] = entry
        self._stats.admissions += 1
        if self.metrics:
            self.metrics.record_admission(self.name)
        logger.debug("cache_admitted", cache=self.name, key=key, name=entry.name)

        evicted = None
        if self.max_size is not None and len(self._entries) > self.max_size:
            evicted = next(iter(self._entries))
            self._remove(evicted, active, reason="capacity")
            self._stats.evictions += 1

        self._sync_size()
        return evicted

    def evict(self, key: str, active: Any = None) -> bool:
        """
        Remove an entry, destroying its instance unless it is active.

        Args:
            key: Cache key
            active: Instance currently rendered

        Returns:
            True if removed, False if not present
        """
        if key not in self._entries:
            return False
        self._remove(key, active, reason="evict")
        self._stats.evictions += 1
        self._sync_size()
        return True

    def prune(self, keep: Callable[[str], bool], active: Any = None) -> list[str]:
        """
        Remove every named entry whose name fails the predicate.

        Entries without a declared name are left alone.

        Args:
            keep: Predicate over declared names; False means remove
            active: Instance currently rendered

        Returns:
            Removed keys, oldest first
        """
        victims = [key for key, entry in self._entries.items() if entry.name and not keep(entry.name)]
        for key in victims:
            self._remove(key, active, reason="prune")
            self._stats.prunes += 1

        if victims:
            logger.info("cache_pruned", cache=self.name, keys=victims)
        self._sync_size()
        return victims

    def resize(self, max_size: int | None, active: Any = None) -> list[str]:
        """
        Change the bound, trimming least recently used entries if it shrank.

        Args:
            max_size: New bound (None = unbounded)
            active: Instance currently rendered

        Returns:
            Removed keys, oldest first
        """
        if max_size is not None and max_size <= 0:
            raise ValueError("max_size must be positive")

        self.max_size = max_size
        self._stats.max_size = max_size

        removed: list[str] = []
        while max_size is not None and len(self._entries) > max_size:
            key = next(iter(self._entries))
            self._remove(key, active, reason="resize")
            self._stats.evictions += 1
            removed.append(key)

        self._sync_size()
        return removed

    def dispose(self) -> int:
        """
        Destroy every entry unconditionally and empty the store.

        Returns:
            Number of entries destroyed
        """
        count = 0
        while self._entries:
            key = next(iter(self._entries))
            self._remove(key, None, reason="dispose")
            count += 1

        logger.info("cache_disposed", cache=self.name, count=count)
        self._sync_size()
        return count

    def _remove(self, key: str, active: Any, reason: str) -> CacheEntry:
        """Pop an entry and destroy its instance unless it is active."""
        entry = self._entries.pop(key)
        if self.metrics:
            self.metrics.record_eviction(self.name, reason)

        if active is not None and entry.instance is active:
            logger.debug("cache_evicted", cache=self.name, key=key, reason=reason, destroyed=False)
            return entry

        logger.debug("cache_evicted", cache=self.name, key=key, reason=reason, destroyed=True)
        self._stats.destroyed += 1
        if self.metrics:
            self.metrics.record_destroy(self.name)
        entry.instance.destroy()
        return entry

    def _sync_size(self) -> None:
        self._stats.size = len(self._entries)
        if self.metrics:
            self.metrics.set_size(self.name, len(self._entries))

    def keys(self) -> list[str]:
        """Live keys, least recently used first."""
        return list(self._entries)

    def items(self) -> Iterator[tuple[str, CacheEntry]]:
        """Iterate (key, entry) pairs, least recently used first."""
        return iter(list(self._entries.items()))

    @property
    def stats(self) -> Stats:
        """Get cache statistics."""
        return self._stats

    def __len__(self) -> int:
        """Return number of live entries."""
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        """Check if key exists (doesn't update LRU order)."""
        return key in self._entries


__all__ = ["CacheEntry", "CacheStore", "Stats"]

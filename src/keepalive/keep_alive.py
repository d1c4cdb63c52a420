"""
Keep-Alive - preserves component instances across re-renders
Decides cache hit/miss for one render slot and owns the cached instances
"""

from collections.abc import Sequence
from typing import Any

from .core.cache import CacheEntry, CacheStore, Stats
from .core.config import Settings, get_settings
from .core.errors import PendingCacheError
from .core.logging_config import LogContext, get_logger
from .identity import component_name, first_component_child, resolve_key
from .matching import is_cacheable
from .models import KeepAliveOptions, PendingCache, VNode
from .monitoring.metrics import MetricsCollector, metrics_collector

logger = get_logger(__name__)

_UNSET: Any = object()


class KeepAlive:
    """
    Cache owner for a single render slot.

    Lifecycle:
    - render() picks the slot's component child and either splices in a
      cached instance (hit) or records it as pending (miss)
    - mounted()/updated() admit the pending instance once the host has
      mounted it
    - set_filters()/set_max() prune entries that no longer qualify
    - destroyed() destroys every cached instance

    The instance of the node last returned by render() is the active
    instance; no eviction or prune ever destroys it.
    """

    def __init__(
        self,
        include: Any = None,
        exclude: Any = None,
        max_size: int | str | None = None,
        name: str = "keep-alive",
        settings: Settings | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if max_size is None:
            max_size = self.settings.default_max

        self.options = KeepAliveOptions(include=include, exclude=exclude, max=max_size)
        if metrics is None and self.settings.enable_metrics:
            metrics = metrics_collector

        self.name = name
        self.metrics = metrics
        self._store = CacheStore(max_size=self.options.max, name=name, metrics=metrics)
        self._pending: PendingCache | None = None
        self._vnode: VNode | None = None

        logger.debug("keep_alive_created", cache=name, max=self.options.max)

    # ------------------------------------------------------------------
    # Render
    # ------------------------------------------------------------------

    def render(self, children: Sequence[VNode] | None) -> VNode | None:
        """
        Render the default slot.

        Args:
            children: Slot children produced by the renderer

        Returns:
            The first component child (possibly carrying a cached instance),
            else the first child unchanged, else None
        """
        with LogContext(cache=self.name):
            vnode = first_component_child(children)
            if vnode is not None:
                self.propose_candidate(vnode)
            elif children:
                vnode = children[0]

        self._vnode = vnode
        return vnode

    def propose_candidate(self, vnode: VNode) -> str | None:
        """
        Run the hit/miss decision for one component node.

        On a hit the node's instance is replaced with the cached one. On a
        miss the node becomes the pending slot, admitted by confirm_mounted().

        Args:
            vnode: Candidate component node

        Returns:
            Provisional key on a miss, None on a hit or when not cacheable

        Raises:
            PendingCacheError: If a pending slot is still unconfirmed and
                strict_pending is enabled
        """
        options = vnode.component_options
        if options is None:
            return None

        name = component_name(options)
        if not is_cacheable(name, self.options.include, self.options.exclude):
            logger.debug("candidate_filtered", name=name)
            if self.metrics:
                self.metrics.record_filtered(self.name)
            return None

        key = resolve_key(vnode)
        entry = self._store.get(key)
        provisional = None
        if entry is not None:
            vnode.component_instance = entry.instance
            logger.debug("cache_hit", key=key, name=name)
        else:
            logger.debug("cache_miss", key=key, name=name)
            self._set_pending(PendingCache(key=key, vnode=vnode))
            provisional = key

        vnode.keep_alive = True
        return provisional

    def _set_pending(self, pending: PendingCache) -> None:
        current = self._pending
        if current is not None:
            if self.settings.strict_pending:
                raise PendingCacheError(
                    f"Render of '{pending.key}' would overwrite unconfirmed pending '{current.key}'",
                    pending_key=current.key,
                    key=pending.key,
                )
            logger.warning("pending_overwritten", previous=current.key, key=pending.key)
        self._pending = pending

    def confirm_mounted(self, key: str | None = None) -> str | None:
        """
        Admit the pending instance now that the host has mounted it.

        Args:
            key: Provisional key returned by propose_candidate (optional check)

        Returns:
            Admitted key, or None if nothing was pending or the filters
            changed since render and now reject it

        Raises:
            PendingCacheError: If key does not name the pending slot
        """
        pending = self._pending
        if pending is None:
            return None
        if key is not None and key != pending.key:
            raise PendingCacheError(
                f"Confirmed '{key}' but pending slot is '{pending.key}'",
                pending_key=pending.key,
                key=key,
            )

        self._pending = None
        vnode = pending.vnode
        name = component_name(vnode.component_options)
        if not is_cacheable(name, self.options.include, self.options.exclude):
            logger.debug("pending_dropped", key=pending.key, name=name)
            return None

        entry = CacheEntry(
            name=name,
            tag=vnode.tag,
            instance=vnode.component_instance,
        )
        self._store.admit(pending.key, entry, active=self.active_instance)
        return pending.key

    # ------------------------------------------------------------------
    # Host lifecycle hooks
    # ------------------------------------------------------------------

    def mounted(self) -> None:
        """Host finished the first mount."""
        self.confirm_mounted()

    def updated(self) -> None:
        """Host finished a re-render."""
        self.confirm_mounted()

    def destroyed(self) -> int:
        """Host disposed of the cache owner."""
        return self.dispose()

    def dispose(self) -> int:
        """
        Destroy every cached instance and drop the pending slot.

        Returns:
            Number of instances destroyed
        """
        self._pending = None
        return self._store.dispose()

    # ------------------------------------------------------------------
    # Configuration changes
    # ------------------------------------------------------------------

    def set_filters(self, include: Any = _UNSET, exclude: Any = _UNSET) -> list[str]:
        """
        Replace include and/or exclude, pruning entries that no longer qualify.

        Omitted arguments keep their current value; None removes a filter.

        Returns:
            Pruned keys
        """
        changed = False
        if include is not _UNSET:
            self.options.include = include
            changed = True
        if exclude is not _UNSET:
            self.options.exclude = exclude
            changed = True
        if not changed:
            return []

        include, exclude = self.options.include, self.options.exclude
        return self._store.prune(
            lambda name: is_cacheable(name, include, exclude),
            active=self.active_instance,
        )

    def set_include(self, include: Any) -> list[str]:
        """Replace the include filter."""
        return self.set_filters(include=include)

    def set_exclude(self, exclude: Any) -> list[str]:
        """Replace the exclude filter."""
        return self.set_filters(exclude=exclude)

    def set_max(self, max_size: int | str | None) -> list[str]:
        """Replace the capacity bound, trimming least recently used entries."""
        self.options.max = max_size
        return self._store.resize(self.options.max, active=self.active_instance)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def active_instance(self) -> Any:
        """Instance of the node currently rendered, if any."""
        return self._vnode.component_instance if self._vnode is not None else None

    @property
    def pending(self) -> PendingCache | None:
        return self._pending

    @property
    def cache(self) -> dict[str, CacheEntry]:
        """Snapshot of live entries, least recently used first."""
        return dict(self._store.items())

    @property
    def keys(self) -> list[str]:
        return self._store.keys()

    @property
    def stats(self) -> Stats:
        return self._store.stats

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: str) -> bool:
        return key in self._store


__all__ = ["KeepAlive"]

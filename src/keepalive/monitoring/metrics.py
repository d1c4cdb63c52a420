"""
Metrics Collection
Prometheus metrics for render-tree cache activity
"""

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, generate_latest

from ..core.config import get_settings


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for node caches.

    Every series is labelled by cache name so several cache owners can share
    one collector.
    """

    def __init__(self, namespace: str = "keepalive", registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else REGISTRY

        # Lookup metrics
        self.cache_hits = Counter(
            f"{namespace}_cache_hits_total",
            "Total number of cache hits",
            ["cache"],
            registry=self.registry,
        )
        self.cache_misses = Counter(
            f"{namespace}_cache_misses_total",
            "Total number of cache misses",
            ["cache"],
            registry=self.registry,
        )
        self.filtered_total = Counter(
            f"{namespace}_filtered_total",
            "Candidates passed through uncached by include/exclude",
            ["cache"],
            registry=self.registry,
        )

        # Store metrics
        self.admissions_total = Counter(
            f"{namespace}_admissions_total",
            "Total number of instances admitted into a cache",
            ["cache"],
            registry=self.registry,
        )
        self.evictions_total = Counter(
            f"{namespace}_evictions_total",
            "Total number of entries removed from a cache",
            ["cache", "reason"],
            registry=self.registry,
        )
        self.destroys_total = Counter(
            f"{namespace}_destroys_total",
            "Total number of destroy calls issued to cached instances",
            ["cache"],
            registry=self.registry,
        )
        self.cache_entries = Gauge(
            f"{namespace}_cache_entries",
            "Current number of live cache entries",
            ["cache"],
            registry=self.registry,
        )

    def record_hit(self, cache: str) -> None:
        """Record a cache hit."""
        self.cache_hits.labels(cache=cache).inc()

    def record_miss(self, cache: str) -> None:
        """Record a cache miss."""
        self.cache_misses.labels(cache=cache).inc()

    def record_filtered(self, cache: str) -> None:
        """Record a candidate rejected by include/exclude."""
        self.filtered_total.labels(cache=cache).inc()

    def record_admission(self, cache: str) -> None:
        """Record an admitted instance."""
        self.admissions_total.labels(cache=cache).inc()

    def record_eviction(self, cache: str, reason: str) -> None:
        """Record an entry removal (capacity, prune, resize, dispose)."""
        self.evictions_total.labels(cache=cache, reason=reason).inc()

    def record_destroy(self, cache: str) -> None:
        """Record a destroy call."""
        self.destroys_total.labels(cache=cache).inc()

    def set_size(self, cache: str, size: int) -> None:
        """Set the live entry count."""
        self.cache_entries.labels(cache=cache).set(size)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        return generate_latest(self.registry)


# Global metrics collector instance
metrics_collector = MetricsCollector(namespace=get_settings().metrics_prefix)

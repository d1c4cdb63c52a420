"""
Cache Monitoring
Prometheus-based metrics collection for node caches
"""

from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "metrics_collector",
]

"""plyra-scope observability — guard and resource metrics."""

from plyra_scope.observability.metrics import MetricsCollector, ScopeMetrics

__all__ = [
    "MetricsCollector",
    "ScopeMetrics",
]

"""
Metrics
~~~~~~~

Prometheus-style counters for guard firings and resource disposals.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

__all__ = ["MetricsCollector", "ScopeMetrics"]


@dataclass
class ScopeMetrics:
    """
    Point-in-time copy of the scope counters.

    Attributes:
        guards_fired: Guards whose action ran at teardown.
        guards_skipped: Conditional guards whose trigger did not match.
        guards_released: Guards disarmed through release().
        resources_disposed: Handles passed to their deleter.
        resources_released: Handles let go through release().
        teardown_failures: Actions or deleters that raised while unwinding.
    """

    guards_fired: int = 0
    guards_skipped: int = 0
    guards_released: int = 0
    resources_disposed: int = 0
    resources_released: int = 0
    teardown_failures: int = 0


class MetricsCollector:
    """
    Collects and exposes Prometheus-style counters.

    Thread-safe; one collector is shared by every guard in the process.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {
            "guards_fired": 0,
            "guards_skipped": 0,
            "guards_released": 0,
            "resources_disposed": 0,
            "resources_released": 0,
            "teardown_failures": 0,
        }
        self._lock = threading.RLock()

    def increment(self, name: str, amount: int = 1) -> None:
        """Increment a counter. Unknown names are ignored."""
        with self._lock:
            if name in self._counters:
                self._counters[name] += amount

    def get(self, name: str) -> int:
        """Return the current value of a counter."""
        with self._lock:
            return self._counters.get(name, 0)

    def to_scope_metrics(self) -> ScopeMetrics:
        """Export as a ScopeMetrics dataclass."""
        with self._lock:
            return ScopeMetrics(**self._counters)

    def reset(self) -> None:
        """Reset all metrics."""
        with self._lock:
            for key in self._counters:
                self._counters[key] = 0

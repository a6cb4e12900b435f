"""
Runtime
~~~~~~~

Process-wide state shared by every guard: the active configuration and
the metrics collector.

Guards and resources are single-owner objects and take no locks; only
this shared state is synchronized.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from plyra_scope.config.loader import load_config, load_config_from_dict
from plyra_scope.config.schema import ScopeConfig
from plyra_scope.observability.metrics import MetricsCollector

__all__ = [
    "configure",
    "get_config",
    "get_metrics",
    "record",
    "reset_runtime",
]

logger = logging.getLogger(__name__)

_lock = threading.RLock()
_config: ScopeConfig = load_config_from_dict({})
_metrics = MetricsCollector()


def configure(
    path: str | None = None,
    data: dict[str, Any] | None = None,
) -> ScopeConfig:
    """
    Validate and install the process-wide configuration.

    Args:
        path: Path to a YAML configuration file.
        data: Configuration dictionary, used when no path is given.

    Returns:
        The installed ScopeConfig.

    Raises:
        ConfigFileNotFoundError: If *path* does not exist.
        ConfigValidationError: If the configuration is invalid.
    """
    global _config

    config = load_config(path) if path else load_config_from_dict(data or {})
    with _lock:
        _config = config
    logger.debug(
        "Configured plyra-scope: teardown.on_failure=%s metrics=%s",
        config.teardown.on_failure,
        config.observability.metrics_enabled,
    )
    return config


def get_config() -> ScopeConfig:
    """Return the active configuration."""
    with _lock:
        return _config


def get_metrics() -> MetricsCollector:
    """Return the process-wide metrics collector."""
    return _metrics


def record(counter: str) -> None:
    """Increment *counter* if metrics are enabled."""
    if get_config().observability.metrics_enabled:
        _metrics.increment(counter)


def reset_runtime() -> None:
    """Restore the default configuration and zero all counters."""
    global _config

    with _lock:
        _config = load_config_from_dict({})
    _metrics.reset()

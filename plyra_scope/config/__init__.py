"""plyra-scope configuration — loading, validation, and defaults."""

from plyra_scope.config.defaults import DEFAULT_CONFIG
from plyra_scope.config.loader import load_config, load_config_from_dict
from plyra_scope.config.schema import ScopeConfig

__all__ = [
    "load_config",
    "load_config_from_dict",
    "ScopeConfig",
    "DEFAULT_CONFIG",
]

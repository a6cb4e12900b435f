"""
Default Configuration
~~~~~~~~~~~~~~~~~~~~~

Defaults for plyra-scope when no config file is provided, as plain data.
"""

from __future__ import annotations

from plyra_scope.config.schema import ScopeConfig

__all__ = ["DEFAULT_CONFIG"]

DEFAULT_CONFIG: dict = ScopeConfig().model_dump(mode="json")

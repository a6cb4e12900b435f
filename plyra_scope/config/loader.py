"""
Configuration Loader
~~~~~~~~~~~~~~~~~~~~

Reads scope_config.yaml and validates it. Sections and keys left out of
the file take the schema defaults.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import ValidationError

from plyra_scope.config.schema import ScopeConfig
from plyra_scope.exceptions import (
    ConfigFileNotFoundError,
    ConfigValidationError,
)

__all__ = ["load_config", "load_config_from_dict"]

logger = logging.getLogger(__name__)


def load_config(path: str) -> ScopeConfig:
    """
    Load configuration from a YAML file.

    Raises:
        ConfigFileNotFoundError: If the file doesn't exist.
        ConfigValidationError: If the file is not a YAML mapping or fails
            validation.
    """
    if not os.path.exists(path):
        raise ConfigFileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigValidationError(
            f"Invalid YAML in configuration file: {exc}"
        ) from exc

    logger.debug("Loaded configuration from %s", path)
    return load_config_from_dict(user_config)


def load_config_from_dict(data: Any) -> ScopeConfig:
    """Validate *data*; missing keys fall back to the ScopeConfig defaults."""
    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )
    try:
        return ScopeConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigValidationError(f"Configuration validation failed: {exc}") from exc

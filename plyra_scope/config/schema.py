"""
Configuration Schema
~~~~~~~~~~~~~~~~~~~~

Pydantic models for validating plyra-scope configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from plyra_scope.core.trigger import TeardownFailurePolicy

__all__ = [
    "ScopeConfig",
    "TeardownConfig",
    "ObservabilityConfig",
]


class TeardownConfig(BaseModel):
    """How cleanup failures during exception unwinding are handled."""

    on_failure: TeardownFailurePolicy = TeardownFailurePolicy.ABORT

    @field_validator("on_failure", mode="before")
    @classmethod
    def normalize_policy(cls, v: object) -> object:
        """Accept the policy name in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    metrics_enabled: bool = True
    warn_on_unclosed: bool = True


class ScopeConfig(BaseModel):
    """
    Root configuration model for plyra-scope.

    Validated on load with clear error messages for invalid values.
    """

    version: str = "1.0"
    teardown: TeardownConfig = Field(default_factory=TeardownConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"extra": "forbid"}

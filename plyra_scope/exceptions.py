"""
plyra-scope Custom Exceptions
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

All custom exception classes for plyra-scope, organized by domain.

**Structured Error Messages**

Teardown failures provide three structured fields:
- ``what_happened``: Clear plain-English description
- ``teardown_policy``: The configured teardown failure policy
- ``how_to_fix``: Concrete, actionable steps
"""

__all__ = [
    # Base
    "ScopeError",
    # Config
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigValidationError",
    # Guards
    "GuardError",
    "OwnershipError",
    "TeardownFailureError",
    # Resources
    "ResourceError",
    "InvalidHandleAccessError",
]


# ── Formatting Helper ────────────────────────────────────────────────────────

_SEPARATOR = "─" * 52


def _format_structured_error(
    title: str,
    what_happened: str,
    teardown_policy: str,
    how_to_fix: str,
) -> str:
    """Build a rich, structured error message."""
    lines = [
        f"  {title}",
        f"  {_SEPARATOR}",
        "  What happened:",
        *[f"    {line}" for line in what_happened.strip().splitlines()],
        "",
        "  Teardown policy:",
        f"    {teardown_policy}",
        "",
        "  How to fix:",
        *[f"    {line}" for line in how_to_fix.strip().splitlines()],
    ]
    return "\n".join(lines)


# ── Base Exception ───────────────────────────────────────────────────────────


class ScopeError(Exception):
    """Base exception for all plyra-scope errors."""

    def __init__(self, message: str = "", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


# ── Config Exceptions ────────────────────────────────────────────────────────


class ConfigError(ScopeError):
    """Base exception for configuration-related errors."""


class ConfigFileNotFoundError(ConfigError):
    """Raised when a configuration file cannot be found at the specified path."""


class ConfigValidationError(ConfigError):
    """Raised when configuration values fail validation."""


# ── Guard Exceptions ─────────────────────────────────────────────────────────


class GuardError(ScopeError):
    """Base exception for scope guard errors."""


class OwnershipError(GuardError, TypeError):
    """Raised when a single-owner guard or resource would be duplicated."""


class TeardownFailureError(GuardError):
    """
    Raised when a cleanup action fails while its scope is already unwinding
    because of an earlier exception, and the teardown policy is ``raise``.

    The action's own exception is the ``__cause__``; the exception that was
    already propagating is kept as ``pending_error``.

    Structured fields:
    - ``what_happened``: description of the double failure
    - ``teardown_policy``: the policy that routed the failure here
    - ``how_to_fix``: actionable remediation steps
    """

    def __init__(
        self,
        message: str = "Cleanup action failed during teardown",
        owner: str = "",
        pending_error: BaseException | None = None,
        details: dict | None = None,
        what_happened: str = "",
        teardown_policy: str = "raise",
        how_to_fix: str = "",
    ) -> None:
        self.owner = owner
        self.pending_error = pending_error
        pending = (
            f"{type(pending_error).__name__}: {pending_error}"
            if pending_error is not None
            else "(none)"
        )
        self.what_happened = what_happened or (
            f"{owner} ran its cleanup action while the scope was unwinding\n"
            f"because of {pending}, and the action raised as well."
        )
        self.teardown_policy = teardown_policy
        self.how_to_fix = how_to_fix or (
            "1. Make the action or deleter failure-free; catch and log inside it\n"
            "2. Move fallible cleanup into an explicit reset() call\n"
            "3. Keep teardown.on_failure set to 'abort' in production"
        )
        super().__init__(message, details)

    def __str__(self) -> str:
        return _format_structured_error(
            title=f"TeardownFailureError: {self.args[0]}",
            what_happened=self.what_happened,
            teardown_policy=self.teardown_policy,
            how_to_fix=self.how_to_fix,
        )


# ── Resource Exceptions ──────────────────────────────────────────────────────


class ResourceError(ScopeError):
    """Base exception for unique resource errors."""


class InvalidHandleAccessError(ResourceError, AttributeError):
    """
    Raised when dereferencing a released, disposed, or null resource handle.

    Also an ``AttributeError``, so ``hasattr()`` and ``getattr()`` with a
    default treat forwarded member access on such a wrapper as missing.
    """

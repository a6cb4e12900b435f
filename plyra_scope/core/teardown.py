"""
Teardown Engine
~~~~~~~~~~~~~~~

Runs cleanup actions from scope exit and routes their failures.

An action that raises on a normal exit behaves like any other exception
leaving the ``with`` block. An action that raises while the scope is
already unwinding has nowhere safe to go: by default this is fatal and
the process aborts. Setting ``teardown.on_failure: raise`` turns it into
a TeardownFailureError chained from the action's exception instead.
Either way the failure is logged at CRITICAL and never swallowed.
"""

from __future__ import annotations

import logging
import os
import warnings
from collections.abc import Callable
from typing import Any

from plyra_scope import runtime
from plyra_scope.core.trigger import TeardownFailurePolicy
from plyra_scope.exceptions import TeardownFailureError

__all__ = ["run_teardown_action", "warn_unclosed"]

logger = logging.getLogger(__name__)


def run_teardown_action(
    owner: str,
    action: Callable[[], Any],
    pending_error: BaseException | None,
) -> None:
    """
    Invoke a cleanup action on behalf of a scope exit.

    Args:
        owner: Description of the guard or resource, for diagnostics.
        action: Zero-argument callable to run.
        pending_error: The exception leaving the scope, if any.

    Raises:
        TeardownFailureError: If the action raises while *pending_error*
            is set and the policy is ``raise``.
    """
    if pending_error is None:
        action()
        return

    try:
        action()
    except Exception as exc:
        _handle_teardown_failure(owner, exc, pending_error)


def _handle_teardown_failure(
    owner: str,
    exc: Exception,
    pending_error: BaseException,
) -> None:
    policy = runtime.get_config().teardown.on_failure
    runtime.record("teardown_failures")
    logger.critical(
        "Cleanup for %s raised %r while unwinding from %r (policy=%s)",
        owner,
        exc,
        pending_error,
        policy,
    )

    if policy is TeardownFailurePolicy.ABORT:
        os.abort()

    raise TeardownFailureError(
        owner=owner,
        pending_error=pending_error,
        teardown_policy=str(policy),
        details={"action_error": repr(exc), "pending_error": repr(pending_error)},
    ) from exc


def warn_unclosed(obj: object, what: str) -> None:
    """Emit a ResourceWarning for an armed object that was never torn down."""
    if not runtime.get_config().observability.warn_on_unclosed:
        return
    warnings.warn(
        f"{what} {obj!r} was garbage collected while still armed; "
        "its cleanup did not run",
        ResourceWarning,
        source=obj,
        stacklevel=2,
    )

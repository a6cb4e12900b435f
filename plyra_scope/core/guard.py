"""
ScopeGuard — Conditional Exit Guard
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

One engine for the three exit guards. The trigger decides whether the
bound action runs when the owning ``with`` block ends:

    with make_scope_exit(unlock):        # always
        ...
    with make_scope_fail(rollback):      # only if an exception escapes
        ...
    with make_scope_success(commit):     # only if none does
        ...

A guard fires at most once. ``release()`` disarms it; ``transfer()``
hands ownership to a new guard and disarms the source. Guards cannot be
copied or pickled.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from types import TracebackType
from typing import Any

from plyra_scope import runtime
from plyra_scope.core.exit_state import ExitState, started_new_propagation
from plyra_scope.core.teardown import run_teardown_action, warn_unclosed
from plyra_scope.core.trigger import GuardState, Trigger
from plyra_scope.exceptions import OwnershipError

__all__ = ["ScopeGuard"]

logger = logging.getLogger(__name__)


class ScopeGuard:
    """
    Runs an action at most once when its scope ends.

    Args:
        action: Zero-argument callable to run at teardown.
        trigger: Which exit mode fires the action.

    Conditional triggers snapshot the exit state at construction, so an
    ON_ERROR guard built inside an ``except`` block only fires for a new
    exception, not for the one already being handled.
    """

    def __init__(
        self,
        action: Callable[[], Any],
        trigger: Trigger | str = Trigger.ALWAYS,
    ) -> None:
        if not callable(action):
            raise TypeError(f"Guard action must be callable, got {action!r}")
        self._action = action
        self._trigger = Trigger(trigger)
        self._baseline: ExitState | None = (
            ExitState.snapshot() if self._trigger.is_conditional() else None
        )
        self._state = GuardState.ARMED

    @property
    def action(self) -> Callable[[], Any]:
        """The bound action."""
        return self._action

    @property
    def trigger(self) -> Trigger:
        """The exit mode this guard fires on."""
        return self._trigger

    @property
    def state(self) -> GuardState:
        """Current lifecycle state."""
        return self._state

    @property
    def armed(self) -> bool:
        """True while teardown may still fire the action."""
        return self._state is GuardState.ARMED

    def release(self) -> None:
        """Disarm the guard so its action never runs. Idempotent."""
        if self._state is GuardState.ARMED:
            self._state = GuardState.DISARMED
            runtime.record("guards_released")
            logger.debug("Released %r", self)

    def transfer(self) -> ScopeGuard:
        """
        Move ownership to a new guard.

        The new guard takes the action, trigger, baseline and state of this
        one. If this guard was armed it becomes disarmed.
        """
        moved = object.__new__(type(self))
        moved._action = self._action
        moved._trigger = self._trigger
        moved._baseline = self._baseline
        moved._state = self._state
        if self._state is GuardState.ARMED:
            self._state = GuardState.DISARMED
        return moved

    def close(self) -> None:
        """
        Tear the guard down outside a ``with`` statement.

        Meant for ``finally:`` blocks; the exception being handled there,
        if any, counts as the one leaving the scope.
        """
        self._teardown(sys.exception())

    def _should_fire(self, exc: BaseException | None) -> bool:
        if self._trigger is Trigger.ALWAYS:
            return True
        assert self._baseline is not None
        failed = started_new_propagation(self._baseline, ExitState.from_exception(exc))
        if self._trigger is Trigger.ON_ERROR:
            return failed
        return not failed

    def _teardown(self, exc: BaseException | None) -> None:
        if self._state is not GuardState.ARMED:
            return
        if not self._should_fire(exc):
            self._state = GuardState.SKIPPED
            runtime.record("guards_skipped")
            logger.debug("Skipped %r", self)
            return
        self._state = GuardState.FIRED
        runtime.record("guards_fired")
        logger.debug("Firing %r", self)
        run_teardown_action(repr(self), self._action, exc)

    def __enter__(self) -> ScopeGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self._teardown(exc)
        return False

    def __copy__(self) -> ScopeGuard:
        raise OwnershipError("ScopeGuard cannot be copied; use transfer()")

    def __deepcopy__(self, memo: dict) -> ScopeGuard:
        raise OwnershipError("ScopeGuard cannot be copied; use transfer()")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise OwnershipError("ScopeGuard cannot be pickled")

    def __del__(self) -> None:
        if getattr(self, "_state", None) is GuardState.ARMED:
            warn_unclosed(self, "ScopeGuard")

    def __repr__(self) -> str:
        name = getattr(self._action, "__qualname__", None) or repr(self._action)
        return f"<ScopeGuard trigger={self._trigger} state={self._state} action={name}>"

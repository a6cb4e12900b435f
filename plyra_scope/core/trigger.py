"""
plyra-scope Trigger & State Enums
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Core enums that define when a guard fires and where it is in its
lifecycle.
"""

from enum import StrEnum

__all__ = ["Trigger", "GuardState", "TeardownFailurePolicy"]


class Trigger(StrEnum):
    """
    Exit mode that causes a guard to fire.

    - ALWAYS: Fire on every scope exit.
    - ON_ERROR: Fire only if an exception started propagating inside the scope.
    - ON_SUCCESS: Fire only if no new exception started propagating.
    """

    ALWAYS = "ALWAYS"
    ON_ERROR = "ON_ERROR"
    ON_SUCCESS = "ON_SUCCESS"

    def is_conditional(self) -> bool:
        """Return True if this trigger needs an exit-state baseline."""
        return self is not Trigger.ALWAYS


class GuardState(StrEnum):
    """
    Lifecycle of a scope guard.

    ARMED is the only state in which teardown may fire the action.
    FIRED and SKIPPED are terminal; a guard reaches one of them at most once.
    """

    ARMED = "ARMED"
    DISARMED = "DISARMED"
    FIRED = "FIRED"
    SKIPPED = "SKIPPED"

    def is_inert(self) -> bool:
        """Return True if teardown can no longer fire the action."""
        return self is not GuardState.ARMED


class TeardownFailurePolicy(StrEnum):
    """What to do when cleanup raises while the scope is already unwinding."""

    ABORT = "abort"
    RAISE = "raise"

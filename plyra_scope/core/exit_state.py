"""
Exit-State Detector
~~~~~~~~~~~~~~~~~~~

Observes which exceptions are in flight at a given point so that
conditional guards can tell whether a *new* exception started inside
their scope.

A snapshot holds the ``__context__`` chain of the exception being handled
at the call site. The exception leaving a guarded block counts as a new
failure unless it is one of the exceptions in the baseline chain, so
re-raising the exception that was already being handled is not new, while
any other exception is, whether it is chained to the handled one or raised
after the handler has finished.

Snapshots keep references to the exceptions they saw, so identity checks
stay valid after the handler that produced them has ended.

Best effort: code that rewrites ``__context__`` by hand, or re-raises an
exception object from the baseline chain after it was handled, can make
the detector misjudge.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

__all__ = ["ExitState", "context_chain", "propagation_depth", "started_new_propagation"]


def context_chain(exc: BaseException | None) -> tuple[BaseException, ...]:
    """Return *exc* followed by its ``__context__`` ancestors, cycles cut."""
    chain: list[BaseException] = []
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        chain.append(exc)
        exc = exc.__context__
    return tuple(chain)


def propagation_depth(exc: BaseException | None) -> int:
    """Return the length of the ``__context__`` chain rooted at *exc*."""
    return len(context_chain(exc))


@dataclass(frozen=True)
class ExitState:
    """
    Opaque snapshot of the exceptions in flight.

    Attributes:
        chain: The exception at the snapshot point and its context
            ancestors, innermost first. Empty when nothing is in flight.
    """

    chain: tuple[BaseException, ...] = ()

    @property
    def depth(self) -> int:
        """Number of chained exceptions in flight at the snapshot."""
        return len(self.chain)

    @property
    def leading(self) -> BaseException | None:
        """The innermost exception of the snapshot, if any."""
        return self.chain[0] if self.chain else None

    def holds(self, exc: BaseException) -> bool:
        """Return True if *exc* is one of the snapshot's exceptions."""
        return any(exc is seen for seen in self.chain)

    @classmethod
    def snapshot(cls) -> ExitState:
        """Capture the exceptions in flight at the call site."""
        return cls(context_chain(sys.exception()))

    @classmethod
    def from_exception(cls, exc: BaseException | None) -> ExitState:
        """Build the state for an exception leaving a ``with`` block."""
        return cls(context_chain(exc))


def started_new_propagation(baseline: ExitState, current: ExitState) -> bool:
    """Return True if *current* leads with an exception *baseline* never saw."""
    leading = current.leading
    return leading is not None and not baseline.holds(leading)

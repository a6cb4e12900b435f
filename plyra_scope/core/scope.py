"""
Scope — Explicit Unwind List
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Collects guards and resources created at different points of a block
and tears them down in reverse order of registration when the block
ends, passing the propagating exception (if any) to each one.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from contextlib import ExitStack
from types import TracebackType
from typing import Any, TypeVar

from plyra_scope.core.factories import (
    make_scope_exit,
    make_scope_fail,
    make_scope_success,
    make_unique_resource,
    make_unique_resource_checked,
)
from plyra_scope.core.guard import ScopeGuard
from plyra_scope.core.resource import UniqueResource

__all__ = ["Scope", "scoped"]

logger = logging.getLogger(__name__)

H = TypeVar("H")
T = TypeVar("T", ScopeGuard, UniqueResource)


class Scope:
    """
    Ordered set of guards and resources with a shared lifetime.

    Usage::

        with Scope() as scope:
            conn = scope.resource(connect(), lambda c: c.close())
            scope.on_fail(conn.get().rollback)
            scope.on_success(conn.get().commit)
            ...

    Teardown order is the reverse of registration, so the commit or
    rollback above runs before the connection is closed.
    """

    def __init__(self) -> None:
        self._stack = ExitStack()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def push(self, item: T) -> T:
        """Register an existing guard or resource and return it."""
        self._stack.enter_context(item)
        self._count += 1
        return item

    def on_exit(self, action: Callable[[], Any]) -> ScopeGuard:
        """Register an action that runs whenever the scope ends."""
        return self.push(make_scope_exit(action))

    def on_fail(self, action: Callable[[], Any]) -> ScopeGuard:
        """Register an action that runs only if an exception escapes the scope."""
        return self.push(make_scope_fail(action))

    def on_success(self, action: Callable[[], Any]) -> ScopeGuard:
        """Register an action that runs only if the scope ends cleanly."""
        return self.push(make_scope_success(action))

    def resource(self, handle: H, deleter: Callable[[H], Any]) -> UniqueResource[H]:
        """Take ownership of *handle* for the lifetime of the scope."""
        return self.push(make_unique_resource(handle, deleter))

    def resource_checked(
        self,
        handle: H,
        invalid: H,
        deleter: Callable[[H], Any],
    ) -> UniqueResource[H]:
        """Like resource(), but never disposes *handle* if it equals *invalid*."""
        return self.push(make_unique_resource_checked(handle, invalid, deleter))

    def close(self) -> None:
        """Tear down every registered entry as on a normal exit."""
        logger.debug("Closing scope with %d entries", self._count)
        self._stack.close()
        self._count = 0

    def __enter__(self) -> Scope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        logger.debug("Unwinding scope with %d entries", self._count)
        self._count = 0
        return self._stack.__exit__(exc_type, exc, tb)


def scoped(func: Callable) -> Callable:
    """
    Run *func* inside a fresh Scope passed as the ``scope`` keyword.

    Useful for registering cleanup work from anywhere in the function body.
    """

    @functools.wraps(func)
    def func_wrapper(*args: Any, **kwargs: Any) -> Any:
        with Scope() as scope:
            return func(*args, scope=scope, **kwargs)

    return func_wrapper

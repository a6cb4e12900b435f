"""
Construction Helpers
~~~~~~~~~~~~~~~~~~~~

Thin builders that pick the guard configuration or resource wrapper
from the arguments supplied.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from plyra_scope.core.guard import ScopeGuard
from plyra_scope.core.resource import UniqueResource
from plyra_scope.core.trigger import Trigger

__all__ = [
    "make_scope_exit",
    "make_scope_fail",
    "make_scope_success",
    "make_unique_resource",
    "make_unique_resource_checked",
]

H = TypeVar("H")


def make_scope_exit(action: Callable[[], Any]) -> ScopeGuard:
    """Return a guard that runs *action* whenever its scope ends."""
    return ScopeGuard(action, Trigger.ALWAYS)


def make_scope_fail(action: Callable[[], Any]) -> ScopeGuard:
    """Return a guard that runs *action* only if an exception escapes its scope."""
    return ScopeGuard(action, Trigger.ON_ERROR)


def make_scope_success(action: Callable[[], Any]) -> ScopeGuard:
    """Return a guard that runs *action* only if its scope ends without a new exception."""
    return ScopeGuard(action, Trigger.ON_SUCCESS)


def make_unique_resource(handle: H, deleter: Callable[[H], Any]) -> UniqueResource[H]:
    """Return a wrapper that owns *handle* and disposes of it with *deleter*."""
    return UniqueResource(handle, deleter)


def make_unique_resource_checked(
    handle: H,
    invalid: H,
    deleter: Callable[[H], Any],
) -> UniqueResource[H]:
    """
    Return a wrapper for *handle* that is disarmed if ``handle == invalid``.

    Example::

        with make_unique_resource_checked(open_slot(), -1, close_slot) as slot:
            ...  # close_slot only runs if open_slot() did not return -1
    """
    return UniqueResource.checked(handle, invalid, deleter)

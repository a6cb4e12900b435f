"""plyra-scope core module — exit guards, unique resources, and the unwind list."""

from plyra_scope.core.exit_state import ExitState, started_new_propagation
from plyra_scope.core.factories import (
    make_scope_exit,
    make_scope_fail,
    make_scope_success,
    make_unique_resource,
    make_unique_resource_checked,
)
from plyra_scope.core.guard import ScopeGuard
from plyra_scope.core.resource import UniqueResource
from plyra_scope.core.scope import Scope, scoped
from plyra_scope.core.trigger import GuardState, TeardownFailurePolicy, Trigger

__all__ = [
    "Trigger",
    "GuardState",
    "TeardownFailurePolicy",
    "ExitState",
    "started_new_propagation",
    "ScopeGuard",
    "UniqueResource",
    "Scope",
    "scoped",
    "make_scope_exit",
    "make_scope_fail",
    "make_scope_success",
    "make_unique_resource",
    "make_unique_resource_checked",
]

"""
plyra.scope — namespace bridge for plyra-scope.

Allows importing via:
    from plyra.scope import make_scope_exit

This re-exports everything from the plyra_scope package.
"""

# Re-export the entire public API from plyra_scope
from plyra_scope import *  # noqa: F401, F403
from plyra_scope import (
    Scope,
    ScopeGuard,
    Trigger,
    UniqueResource,
    __version__,
    make_scope_exit,
    make_scope_fail,
    make_scope_success,
    make_unique_resource,
    make_unique_resource_checked,
)

__all__ = [
    "ScopeGuard",
    "UniqueResource",
    "Trigger",
    "Scope",
    "make_scope_exit",
    "make_scope_fail",
    "make_scope_success",
    "make_unique_resource",
    "make_unique_resource_checked",
    "__version__",
]

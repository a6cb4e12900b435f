"""
plyra-scope — Deterministic scope-exit cleanup for Python.

Part of the Plyra infrastructure suite.
https://plyra.dev · https://github.com/plyraAI/plyra-scope

plyra-scope ties cleanup to the end of a ``with`` block, however the
block is left, providing:

- Exit guards that fire always, only on error, or only on success
- Single-owner resource wrappers with exactly-once disposal
- Checked construction for acquisition functions that return a sentinel
- An explicit unwind list for cleanup registered mid-function

Quick Start::

    import os
    from plyra_scope import make_scope_fail, make_unique_resource

    with make_unique_resource(os.open(path, os.O_RDONLY), os.close) as fd:
        with make_scope_fail(lambda: print("read failed")):
            data = os.read(fd.get(), 1024)

:copyright: (c) 2024 Plyra
:license: Apache-2.0
"""

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
from plyra_scope.runtime import configure, get_config, get_metrics

__version__ = "0.1.0"
__author__ = "Plyra"
__license__ = "Apache-2.0"
__url__ = "https://plyra.dev"

__all__ = [
    # Guards and resources
    "ScopeGuard",
    "UniqueResource",
    "Scope",
    "scoped",
    # Factories
    "make_scope_exit",
    "make_scope_fail",
    "make_scope_success",
    "make_unique_resource",
    "make_unique_resource_checked",
    # Enums
    "Trigger",
    "GuardState",
    "TeardownFailurePolicy",
    # Exit-state detector
    "ExitState",
    "started_new_propagation",
    # Runtime
    "configure",
    "get_config",
    "get_metrics",
    # Version
    "__version__",
]

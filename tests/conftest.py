"""Shared fixtures for plyra-scope tests."""

from __future__ import annotations

from collections.abc import Callable, Generator

import pytest

from plyra_scope.runtime import reset_runtime


class ResourceTable:
    """
    Instrumented resource slots.

    open() hands out increasing integer handles and returns the invalid
    handle 0 when acquisition is told to fail; close() marks a slot closed
    and records the order of disposals.
    """

    FREE = "f"
    ACQUIRED = "a"
    CLOSED = "c"
    FAILED = "x"
    INVALID = 0

    def __init__(self) -> None:
        self.state: dict[int, str] = {}
        self.current = 0
        self.closed: list[int] = []

    def open(self, success: bool = True) -> int:
        self.current += 1
        self.state[self.current] = self.ACQUIRED if success else self.FAILED
        return self.current if success else self.INVALID

    def close(self, index: int) -> None:
        self.state[index] = self.CLOSED
        self.closed.append(index)

    def is_acquired(self, index: int | None = None) -> bool:
        return self.state.get(index or self.current, self.FREE) == self.ACQUIRED

    def is_deleted(self, index: int | None = None) -> bool:
        return self.state.get(index or self.current, self.FREE) == self.CLOSED


@pytest.fixture(autouse=True)
def fresh_runtime() -> Generator[None, None, None]:
    """Reset the process-wide config and metrics around every test."""
    reset_runtime()
    yield
    reset_runtime()


@pytest.fixture
def resources() -> ResourceTable:
    """A fresh instrumented resource table."""
    return ResourceTable()


@pytest.fixture
def calls() -> list[str]:
    """Ordered log of fired actions."""
    return []


@pytest.fixture
def action(calls: list[str]) -> Callable[[str], Callable[[], None]]:
    """Factory for actions that append their name to ``calls``."""

    def make(name: str) -> Callable[[], None]:
        def fire() -> None:
            calls.append(name)

        return fire

    return make


@pytest.fixture
def raise_policy() -> None:
    """Route teardown failures to TeardownFailureError instead of aborting."""
    from plyra_scope.runtime import configure

    configure(data={"teardown": {"on_failure": "raise"}})

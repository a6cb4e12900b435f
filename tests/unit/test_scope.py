"""Tests for the explicit unwind list."""

import pytest

from plyra_scope import GuardState, Scope, make_scope_exit, scoped


class TestScope:
    """Scope registration and teardown order."""

    def test_tears_down_in_reverse_order(self, calls, action):
        with Scope() as scope:
            scope.on_exit(action("first"))
            scope.on_exit(action("second"))
            scope.on_exit(action("third"))
            assert len(scope) == 3
        assert calls == ["third", "second", "first"]

    def test_fail_and_success_on_error(self, calls, action):
        with pytest.raises(ValueError):
            with Scope() as scope:
                scope.on_fail(action("rollback"))
                scope.on_success(action("commit"))
                scope.on_exit(action("close"))
                raise ValueError("boom")
        assert calls == ["close", "rollback"]

    def test_fail_and_success_on_clean_exit(self, calls, action):
        with Scope() as scope:
            scope.on_fail(action("rollback"))
            scope.on_success(action("commit"))
        assert calls == ["commit"]

    def test_entries_registered_in_handler_see_later_failure(self, calls, action):
        with pytest.raises(RuntimeError):
            with Scope() as scope:
                try:
                    raise KeyError("lookup miss")
                except KeyError:
                    scope.on_fail(action("rollback"))
                    scope.on_success(action("commit"))
                raise RuntimeError("write failed")
        assert calls == ["rollback"]

    def test_entries_registered_in_handler_commit_on_clean_exit(self, calls, action):
        with Scope() as scope:
            try:
                raise KeyError("lookup miss")
            except KeyError:
                scope.on_fail(action("rollback"))
                scope.on_success(action("commit"))
        assert calls == ["commit"]

    def test_scope_opened_in_handler_sees_new_failure(self, calls, action):
        with pytest.raises(ValueError):
            try:
                raise KeyError("outer")
            except KeyError:
                with Scope() as scope:
                    scope.on_fail(action("rollback"))
                    scope.on_success(action("commit"))
                    raise ValueError("inner")
        assert calls == ["rollback"]

    def test_resources_are_disposed(self, resources):
        with Scope() as scope:
            first = scope.resource(resources.open(True), resources.close)
            scope.resource_checked(resources.open(False), resources.INVALID, resources.close)
            third = scope.resource(resources.open(True), resources.close)
        assert resources.closed == [third.get(), first.get()]

    def test_push_existing_guard(self, calls, action):
        guard = make_scope_exit(action("pushed"))
        with Scope() as scope:
            assert scope.push(guard) is guard
        assert guard.state is GuardState.FIRED
        assert calls == ["pushed"]

    def test_released_entry_is_skipped(self, calls, action):
        with Scope() as scope:
            scope.on_exit(action("kept"))
            scope.on_exit(action("dropped")).release()
        assert calls == ["kept"]

    def test_close_runs_teardown(self, calls, action):
        scope = Scope()
        scope.on_exit(action("exit"))
        scope.on_fail(action("fail"))
        scope.close()
        assert calls == ["exit"]
        assert len(scope) == 0

    def test_exception_is_not_suppressed(self, action):
        with pytest.raises(KeyError):
            with Scope() as scope:
                scope.on_exit(action("exit"))
                raise KeyError("boom")

    def test_cleanup_still_runs_after_failing_entry(self, calls, action):
        def broken() -> None:
            raise RuntimeError("cleanup failed")

        with pytest.raises(RuntimeError):
            with Scope() as scope:
                scope.on_exit(action("outer"))
                scope.on_exit(broken)
        assert calls == ["outer"]


class TestScopedDecorator:
    """The scoped decorator."""

    def test_injects_scope(self, calls, action):
        @scoped
        def work(value: int, scope: Scope) -> int:
            scope.on_exit(action("cleanup"))
            return value * 2

        assert work(21) == 42
        assert calls == ["cleanup"]

    def test_cleanup_runs_on_error(self, calls, action):
        @scoped
        def work(scope: Scope) -> None:
            scope.on_fail(action("undo"))
            raise ValueError("boom")

        with pytest.raises(ValueError):
            work()
        assert calls == ["undo"]

    def test_preserves_metadata(self):
        @scoped
        def documented(scope: Scope) -> None:
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."

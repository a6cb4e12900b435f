"""
UniqueResource — Single-Owner Handle Wrapper
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Binds an opaque handle to the deleter that disposes of it and guarantees
the deleter runs at most once per handle::

    fd = os.open(path, os.O_RDONLY)
    with make_unique_resource(fd, os.close) as res:
        os.read(res.get(), 128)
    # os.close(fd) has run

Acquisition functions that return a sentinel on failure can be wrapped
unconditionally with the checked constructor; the sentinel is stored but
never disposed.

Replacing the owned handle (``reset(new)`` or ``adopt(other)``) always
disposes of the old handle first. If that disposal raises, the new handle
is still installed before the error reaches the caller, so the old handle
is never disposed twice and the new one never leaks.
"""

from __future__ import annotations

import ctypes
import logging
import sys
from collections.abc import Callable
from types import TracebackType
from typing import Any, Generic, TypeVar

from plyra_scope import runtime
from plyra_scope.core.teardown import run_teardown_action, warn_unclosed
from plyra_scope.exceptions import InvalidHandleAccessError, OwnershipError

__all__ = ["UniqueResource"]

logger = logging.getLogger(__name__)

H = TypeVar("H")

_MISSING: Any = object()


class UniqueResource(Generic[H]):
    """
    Owns a resource handle and disposes of it exactly once.

    Args:
        handle: The resource handle.
        deleter: One-argument callable that disposes of the handle.
        armed: Whether the handle is disposed at scope end.
    """

    def __init__(
        self,
        handle: H,
        deleter: Callable[[H], Any],
        *,
        armed: bool = True,
    ) -> None:
        if not callable(deleter):
            raise TypeError(f"Resource deleter must be callable, got {deleter!r}")
        self._handle = handle
        self._deleter = deleter
        self._armed = armed

    @classmethod
    def checked(
        cls,
        handle: H,
        invalid: H,
        deleter: Callable[[H], Any],
    ) -> UniqueResource[H]:
        """
        Wrap *handle*, leaving the wrapper disarmed if it equals *invalid*.

        Args:
            handle: The value returned by the acquisition function.
            invalid: The sentinel that function returns on failure.
            deleter: One-argument callable that disposes of the handle.
        """
        acquired = not bool(handle == invalid)
        if not acquired:
            logger.debug("Handle %r equals the invalid sentinel; not armed", handle)
        return cls(handle, deleter, armed=acquired)

    @property
    def armed(self) -> bool:
        """True while the handle will be disposed at scope end."""
        return self._armed

    def get(self) -> H:
        """Return the current handle."""
        return self._handle

    def get_deleter(self) -> Callable[[H], Any]:
        """Return the deleter bound to this wrapper."""
        return self._deleter

    def deref(self) -> Any:
        """
        Return the object the handle refers to.

        A ctypes pointer yields its ``contents``; any other handle is its
        own referent.

        Raises:
            InvalidHandleAccessError: If the wrapper is not armed or the
                handle is null.
        """
        if not self._armed:
            raise InvalidHandleAccessError(
                f"Cannot dereference {self!r}: the handle is not owned",
                details={"handle": repr(self._handle)},
            )
        handle: Any = self._handle
        if handle is None or (isinstance(handle, ctypes._Pointer) and not handle):
            raise InvalidHandleAccessError(
                f"Cannot dereference {self!r}: the handle is null",
                details={"handle": repr(handle)},
            )
        if isinstance(handle, ctypes._Pointer):
            return handle.contents
        return handle

    def release(self) -> H:
        """
        Give up ownership without disposing.

        The handle stays readable through get() and is returned.
        """
        if self._armed:
            self._armed = False
            runtime.record("resources_released")
            logger.debug("Released %r", self)
        return self._handle

    def reset(self, new_handle: H = _MISSING) -> None:
        """
        Dispose of the current handle now.

        Without an argument the wrapper is left disarmed; a second call
        does nothing. With *new_handle* the wrapper owns and is armed for
        the new handle afterwards, even if disposing the old one raised.

        Raises:
            Exception: Whatever the deleter raises, after the state update.
        """
        if new_handle is _MISSING:
            self._dispose_now()
            return
        try:
            self._dispose_now()
        finally:
            self._handle = new_handle
            self._armed = True

    def adopt(self, other: UniqueResource[H]) -> None:
        """
        Move-assign from *other*.

        Disposes of this wrapper's handle first, then takes over the handle,
        deleter and armed flag of *other*, which is left disarmed. The
        hand-off happens even if disposal raised.
        """
        if other is self:
            return
        try:
            self._dispose_now()
        finally:
            self._handle = other._handle
            self._deleter = other._deleter
            self._armed = other._armed
            other._armed = False

    def transfer(self) -> UniqueResource[H]:
        """Move ownership to a new wrapper and disarm this one."""
        moved = type(self)(self._handle, self._deleter, armed=self._armed)
        self._armed = False
        return moved

    def close(self) -> None:
        """
        Tear the wrapper down outside a ``with`` statement.

        Meant for ``finally:`` blocks; the exception being handled there,
        if any, counts as the one leaving the scope.
        """
        self._teardown(sys.exception())

    def _dispose_now(self) -> None:
        if not self._armed:
            return
        self._armed = False
        runtime.record("resources_disposed")
        logger.debug("Disposing %r", self._handle)
        self._deleter(self._handle)

    def _teardown(self, exc: BaseException | None) -> None:
        if not self._armed:
            return
        self._armed = False
        runtime.record("resources_disposed")
        handle, deleter = self._handle, self._deleter
        logger.debug("Disposing %r at scope exit", handle)
        run_teardown_action(repr(self), lambda: deleter(handle), exc)

    def __enter__(self) -> UniqueResource[H]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self._teardown(exc)
        return False

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.deref(), name)

    def __copy__(self) -> UniqueResource[H]:
        raise OwnershipError("UniqueResource cannot be copied; use transfer()")

    def __deepcopy__(self, memo: dict) -> UniqueResource[H]:
        raise OwnershipError("UniqueResource cannot be copied; use transfer()")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise OwnershipError("UniqueResource cannot be pickled")

    def __del__(self) -> None:
        if self.__dict__.get("_armed"):
            warn_unclosed(self, "UniqueResource")

    def __repr__(self) -> str:
        return f"<UniqueResource handle={self._handle!r} armed={self._armed}>"

from __future__ import annotations

import contextlib
from contextvars import ContextVar, Token
from typing import AsyncIterator

from kv_keystore.kernel.errors import TimeoutError as AppTimeoutError
from kv_keystore.resilience.timeouts.deadline import Deadline

__all__ = [
    "DeadlineContext",
    "DeadlineExceededError",
]


class DeadlineExceededError(AppTimeoutError):
    """Raised when the active deadline has been exceeded."""

    default_code = "deadline_exceeded"

    def __init__(self, message: str = "Deadline exceeded") -> None:
        super().__init__("deadline", message)


_DEADLINE_VAR: ContextVar[Deadline | None] = ContextVar("_deadline", default=None)


class DeadlineContext:
    """Context-variable wrapper for propagating a caller's deadline into store calls.

    Store operations take no explicit timeout; a caller bounds them with::

        async with DeadlineContext.scoped(Deadline.after(2.0)):
            value = await store.get("db-password")
    """

    @staticmethod
    def set(deadline: Deadline) -> Token[Deadline | None]:
        return _DEADLINE_VAR.set(deadline)

    @staticmethod
    def get() -> Deadline | None:
        return _DEADLINE_VAR.get()

    @staticmethod
    def reset(token: Token[Deadline | None]) -> None:
        _DEADLINE_VAR.reset(token)

    @staticmethod
    def remaining_seconds() -> float | None:
        """Seconds left on the active deadline, ``None`` when unbounded.

        Raises :class:`DeadlineExceededError` when the deadline already passed.
        """
        dl = _DEADLINE_VAR.get()
        if dl is None:
            return None
        if dl.is_expired:
            raise DeadlineExceededError("Deadline already exceeded")
        return dl.remaining_seconds

    @staticmethod
    @contextlib.asynccontextmanager
    async def scoped(deadline: Deadline) -> AsyncIterator[Deadline]:
        token = _DEADLINE_VAR.set(deadline)
        try:
            yield deadline
        finally:
            _DEADLINE_VAR.reset(token)

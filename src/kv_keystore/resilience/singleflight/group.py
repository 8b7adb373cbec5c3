from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Generic, TypeVar

from kv_keystore.kernel.errors import TransportError

__all__ = ["SingleFlight"]

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SingleFlight(Generic[T]):
    """Collapse concurrent calls sharing a key into one execution.

    The first caller for a key runs *fn*; callers arriving while it is still
    running await the same future and receive its result or exception. The
    group remembers nothing once an execution finishes, so a later call with
    the same key runs *fn* again.

    If the running caller is cancelled, only that caller sees
    ``CancelledError``; callers that joined it get a :class:`TransportError`.

    A group belongs to the event loop it is first used on.

    Usage::

        group: SingleFlight[bytes] = SingleFlight()
        value, shared = await group.do("/ns/key", lambda: fetch("/ns/key"))
    """

    def __init__(self) -> None:
        self._calls: dict[str, asyncio.Future[T]] = {}

    def in_flight(self, key: str) -> bool:
        return key in self._calls

    def __len__(self) -> int:
        return len(self._calls)

    async def do(self, key: str, fn: Callable[[], Awaitable[T]]) -> tuple[T, bool]:
        """Run *fn* once per in-flight *key*.

        Returns ``(result, shared)`` where *shared* is true when the result
        came from another caller's execution.
        """
        existing = self._calls.get(key)
        if existing is not None:
            logger.debug("singleflight.join key=%r", key)
            # shield: a cancelled joiner must not cancel the leader's future
            return await asyncio.shield(existing), True

        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._calls[key] = future
        try:
            result = await fn()
        except Exception as exc:
            future.set_exception(exc)
            # mark retrieved so an unjoined failure is not reported by the loop
            future.exception()
            raise
        else:
            future.set_result(result)
            return result, False
        finally:
            del self._calls[key]
            if not future.done():
                # leader cancelled; joiners get an ordinary error, not CancelledError
                future.set_exception(TransportError(key, "shared execution was cancelled"))
                future.exception()

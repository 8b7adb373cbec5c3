"""HTTP adapter – RequestExecutor port and HttpxRequestExecutor."""
from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any, AsyncContextManager, AsyncIterator, Protocol

import httpx

from kv_keystore.adapters.http.response import HttpResponse
from kv_keystore.kernel.errors import TimeoutError as AppTimeoutError
from kv_keystore.kernel.errors import TransportError
from kv_keystore.resilience.deadline import DeadlineContext, DeadlineExceededError

if TYPE_CHECKING:
    from kv_keystore.adapters.credhub.config import CredHubConfig

logger = logging.getLogger(__name__)

CONTENT_TYPE = "Content-Type"
APPLICATION_JSON = "application/json"


class RequestExecutor(Protocol):
    """Port: issue one logical HTTP request.

    ``request`` is entered with ``async with``; the yielded response's body is
    released when the block exits, whatever the exit path. Failing to obtain a
    response at all raises :class:`TransportError`.
    """

    def request(
        self, method: str, path: str, body: bytes | None = None
    ) -> AsyncContextManager[HttpResponse]: ...

    async def aclose(self) -> None: ...


class HttpxRequestExecutor:
    """RequestExecutor over a pooled ``httpx.AsyncClient``.

    *path* is appended to the base URL verbatim, query string included.
    The active :class:`DeadlineContext` bounds every request as a whole,
    reading the body included.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        self._base_url = base_url
        self._client = client if client is not None else httpx.AsyncClient(base_url=base_url, **kwargs)

    @classmethod
    def from_config(cls, config: "CredHubConfig", **kwargs: Any) -> "HttpxRequestExecutor":
        return cls(config.base_url, verify=config.ssl_context(), **kwargs)

    async def __aenter__(self) -> "HttpxRequestExecutor":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @contextlib.asynccontextmanager
    async def request(
        self, method: str, path: str, body: bytes | None = None
    ) -> AsyncIterator[HttpResponse]:
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["content"] = body
            kwargs["headers"] = {CONTENT_TYPE: APPLICATION_JSON}
        timeout = DeadlineContext.remaining_seconds()
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug("http.request method=%s path=%s", method, path)
        try:
            # httpx applies its timeout per phase; the deadline bounds the whole exchange
            async with asyncio.timeout(timeout):
                async with self._client.stream(method, path, **kwargs) as response:
                    yield HttpResponse(
                        status_code=response.status_code,
                        reason=response.reason_phrase,
                        stream=response.aiter_bytes(),
                    )
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(
                self._base_url, f"HTTP request timed out: {method} {path}", cause=exc
            ) from exc
        except TimeoutError as exc:
            raise DeadlineExceededError(f"Deadline exceeded during HTTP request: {method} {path}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                self._base_url, f"HTTP request failed: {method} {path}: {exc}", cause=exc
            ) from exc


__all__ = ["APPLICATION_JSON", "CONTENT_TYPE", "HttpxRequestExecutor", "RequestExecutor"]

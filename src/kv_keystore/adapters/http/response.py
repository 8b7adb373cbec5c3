"""HTTP adapter – HttpResponse descriptor."""
from __future__ import annotations

import dataclasses
import json
from typing import Any, AsyncIterator

from kv_keystore.kernel.errors import ProtocolViolationError


@dataclasses.dataclass
class HttpResponse:
    """Status line plus a body stream, valid only inside the request's ``async with``.

    The body is consumed at most once; :meth:`read` caches it so that error
    paths can still embed it after a failed parse.
    """

    status_code: int
    reason: str
    stream: AsyncIterator[bytes]
    _body: bytes | None = dataclasses.field(default=None, init=False, repr=False)

    @property
    def status(self) -> str:
        return f"{self.status_code} {self.reason}".strip()

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    async def read(self) -> bytes:
        if self._body is None:
            self._body = b"".join([chunk async for chunk in self.stream])
        return self._body

    async def text(self) -> str:
        return (await self.read()).decode("utf-8", errors="replace")

    async def json(self) -> Any:
        raw = await self.read()
        try:
            return json.loads(raw)
        except ValueError as exc:
            raise ProtocolViolationError(
                f"failed to parse response: {exc}", payload_type="json", cause=exc
            ) from exc


__all__ = ["HttpResponse"]

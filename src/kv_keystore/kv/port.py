"""Key-value store port – the contract every key store adapter satisfies."""
from __future__ import annotations

import abc
import dataclasses
from datetime import timedelta
from typing import Any

from kv_keystore.kv.iterator import KeysIterator


@dataclasses.dataclass(frozen=True)
class StoreState:
    """Result of a successful :meth:`KeyStore.status` probe."""
    latency: timedelta = timedelta(0)


class KeyStore(abc.ABC):
    """Port: store opaque byte values under string keys.

    Errors are drawn from :mod:`kv_keystore.kernel.errors`:
    ``NotFoundError`` for an absent key, ``AlreadyExistsError`` when
    ``create`` finds the key present, ``NotAllowedError`` when the adapter
    does not support the operation. Anything else is fatal for the call.
    """

    @abc.abstractmethod
    async def status(self) -> StoreState:
        """Probe the backend; raise when it is unreachable or unhealthy."""

    @abc.abstractmethod
    async def create(self, key: str, value: bytes) -> None:
        """Store *value* under *key* only if *key* does not exist yet."""

    @abc.abstractmethod
    async def set(self, key: str, value: bytes) -> None:
        """Store *value* under *key*, overwriting any existing value."""

    @abc.abstractmethod
    async def get(self, key: str) -> bytes: ...

    @abc.abstractmethod
    async def delete(self, key: str) -> None: ...

    @abc.abstractmethod
    async def list(self) -> KeysIterator:
        """Snapshot the stored keys."""

    @abc.abstractmethod
    async def close(self) -> None:
        """Release resources held by the store."""

    async def __aenter__(self) -> "KeyStore":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()


__all__ = ["KeyStore", "StoreState"]

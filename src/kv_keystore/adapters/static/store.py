"""Static adapter – StaticListStore, a read-only KeyStore over a fixed mapping."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from kv_keystore.config.settings.base import Settings
from kv_keystore.kernel.errors import AlreadyExistsError, NotAllowedError, NotFoundError
from kv_keystore.kv.iterator import KeysIterator
from kv_keystore.kv.port import KeyStore, StoreState

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class StaticListConfig(Settings):
    """Fixed ``key -> value`` entries served by :class:`StaticListStore`."""

    _prefix: ClassVar[str] = "STATIC"

    entries: dict[str, str] = dataclasses.field(default_factory=dict)


class StaticListStore(KeyStore):
    """:class:`KeyStore` serving a fixed mapping.

    Reads behave like any other store. Every mutation raises
    :class:`NotAllowedError`, except that ``create`` on a key that is already
    present reports :class:`AlreadyExistsError` and ``delete`` on an absent key
    reports :class:`NotFoundError`, as a writable store would.

    Usage::

        store = StaticListStore(StaticListConfig(entries={"db-password": "s3cr3t"}))
        assert await store.get("db-password") == b"s3cr3t"
    """

    def __init__(self, config: StaticListConfig) -> None:
        self._entries: dict[str, str] = dict(config.entries)
        logger.info("static.store_opened entries=%d", len(self._entries))

    async def status(self) -> StoreState:
        return StoreState()

    async def create(self, key: str, value: bytes) -> None:
        if key in self._entries:
            raise AlreadyExistsError(key)
        raise NotAllowedError(
            f"key '{key}' doesn't exist, create operation is not allowed on static list",
            operation="create",
        )

    async def set(self, key: str, value: bytes) -> None:
        raise NotAllowedError(
            f"set key '{key}' value operation is not allowed on static list",
            operation="set",
        )

    async def get(self, key: str) -> bytes:
        if key not in self._entries:
            raise NotFoundError(key)
        return self._entries[key].encode("utf-8")

    async def delete(self, key: str) -> None:
        if key not in self._entries:
            raise NotFoundError(key)
        raise NotAllowedError(
            f"key '{key}' exists, but delete operation is not allowed on static list",
            operation="delete",
        )

    async def list(self) -> KeysIterator:
        return KeysIterator(self._entries)

    async def close(self) -> None:
        return None


__all__ = ["StaticListConfig", "StaticListStore"]

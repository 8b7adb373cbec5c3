from __future__ import annotations

import logging

from kv_keystore.kernel.errors import BaseError
from kv_keystore.kv.port import KeyStore
from kv_keystore.observability.health.check import HealthCheck, HealthStatus

__all__ = ["KeyStoreHealthCheck"]

logger = logging.getLogger(__name__)


class KeyStoreHealthCheck(HealthCheck):
    """Reports a :class:`KeyStore`'s ``status()`` probe."""

    def __init__(self, store: KeyStore, name_: str = "keystore") -> None:
        self._store = store
        self._name = name_

    @property
    def name(self) -> str:
        return self._name

    async def check(self) -> HealthStatus:
        try:
            state = await self._store.status()
        except BaseError as exc:
            logger.warning("health.keystore_unhealthy name=%s code=%s", self._name, exc.code)
            return HealthStatus(healthy=False, detail=str(exc))
        return HealthStatus(healthy=True, latency_ms=state.latency.total_seconds() * 1000)

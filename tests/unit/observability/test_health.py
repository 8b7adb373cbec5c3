"""Unit tests – KeyStoreHealthCheck."""
from __future__ import annotations

import asyncio
from datetime import timedelta
from unittest.mock import AsyncMock

from kv_keystore.adapters.credhub import CredHubConfig, CredHubStore
from kv_keystore.adapters.static import StaticListConfig, StaticListStore
from kv_keystore.kernel.errors import TransportError
from kv_keystore.kv import KeyStore, StoreState
from kv_keystore.observability.health import HealthCheck, HealthStatus, KeyStoreHealthCheck
from kv_keystore.testing import FakeRequestExecutor


def _credhub(executor: FakeRequestExecutor) -> CredHubStore:
    config = CredHubConfig(base_url="https://credhub.test", namespace="/ns", server_insecure_skip_verify=True)
    return CredHubStore(config, executor=executor)


class TestKeyStoreHealthCheck:
    def test_healthy_when_up(self) -> None:
        check = KeyStoreHealthCheck(_credhub(FakeRequestExecutor().respond("GET", 200, '{"status":"UP"}')))
        status = asyncio.run(check.check())
        assert status.healthy is True
        assert status.detail is None
        assert status.latency_ms >= 0

    def test_unhealthy_when_down(self) -> None:
        check = KeyStoreHealthCheck(_credhub(FakeRequestExecutor().respond("GET", 200, '{"status":"DOWN"}')))
        status = asyncio.run(check.check())
        assert status.healthy is False
        assert "DOWN" in (status.detail or "")

    def test_unhealthy_on_server_error(self) -> None:
        check = KeyStoreHealthCheck(_credhub(FakeRequestExecutor().respond("GET", 500, "boom")))
        status = asyncio.run(check.check())
        assert status.healthy is False
        assert "500" in (status.detail or "")

    def test_name(self) -> None:
        store = StaticListStore(StaticListConfig())
        assert KeyStoreHealthCheck(store).name == "keystore"
        assert KeyStoreHealthCheck(store, name_="secrets").name == "secrets"

    def test_static_store_always_healthy(self) -> None:
        status = asyncio.run(KeyStoreHealthCheck(StaticListStore(StaticListConfig())).check())
        assert status.healthy is True


class TestTimedCheck:
    def test_fills_latency_when_missing(self) -> None:
        class _Slow(HealthCheck):
            @property
            def name(self) -> str:
                return "slow"

            async def check(self) -> HealthStatus:
                await asyncio.sleep(0.01)
                return HealthStatus(healthy=True)

        status = asyncio.run(_Slow().timed_check())
        assert status.latency_ms > 0

    def test_keeps_reported_latency(self) -> None:
        class _Fixed(HealthCheck):
            @property
            def name(self) -> str:
                return "fixed"

            async def check(self) -> HealthStatus:
                return HealthStatus(healthy=True, latency_ms=12.5)

        assert asyncio.run(_Fixed().timed_check()).latency_ms == 12.5


class TestWithMockedStore:
    def test_latency_taken_from_store_state(self) -> None:
        store = AsyncMock(spec=KeyStore)
        store.status.return_value = StoreState(latency=timedelta(milliseconds=250))
        status = asyncio.run(KeyStoreHealthCheck(store).timed_check())
        assert status.latency_ms == 250.0
        store.status.assert_awaited_once()

    def test_transport_failure_reported_unhealthy(self) -> None:
        store = AsyncMock(spec=KeyStore)
        store.status.side_effect = TransportError("https://credhub.test", "connection refused")
        status = asyncio.run(KeyStoreHealthCheck(store).check())
        assert status.healthy is False
        assert status.detail == "connection refused"

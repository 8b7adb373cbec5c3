"""CredHub adapter – CredHubStore."""
from __future__ import annotations

import json
import logging
import time
from datetime import timedelta
from typing import Any

from kv_keystore.adapters.credhub.codec import decode_value, encode_value
from kv_keystore.adapters.credhub.config import CredHubConfig
from kv_keystore.adapters.http import HttpResponse, HttpxRequestExecutor, RequestExecutor
from kv_keystore.kernel.errors import (
    AlreadyExistsError,
    NotFoundError,
    ProtocolViolationError,
    RemoteError,
)
from kv_keystore.kv.iterator import KeysIterator
from kv_keystore.kv.port import KeyStore, StoreState
from kv_keystore.resilience.singleflight import SingleFlight

logger = logging.getLogger(__name__)

SERVICE = "credhub"
HEALTH_PATH = "/health"
DATA_PATH = "/api/v1/data"


class CredHubStore(KeyStore):
    """KeyStore backed by CredHub ``value`` credentials.

    Every key lives under ``{namespace}/{key}``. Values are encoded with
    :func:`~kv_keystore.adapters.credhub.codec.encode_value`.

    CredHub has no create-if-absent call, so :meth:`create` reads and then
    writes. Concurrent creates of one key on this instance share a single
    read/write, but a ``set`` on this instance, or any writer elsewhere, can
    still slip in between the read and the write.

    API reference: https://docs.cloudfoundry.org/api/credhub/version/main/
    """

    def __init__(self, config: CredHubConfig, executor: RequestExecutor | None = None) -> None:
        self._namespace = config.namespace
        self._force_base64 = config.force_base64_values_encoding
        self._executor = executor if executor is not None else HttpxRequestExecutor.from_config(config)
        self._inflight: SingleFlight[None] = SingleFlight()
        logger.info("credhub.store_opened base_url=%s namespace=%s", config.base_url, self._namespace)

    @property
    def namespace(self) -> str:
        return self._namespace

    def _name(self, key: str) -> str:
        return f"{self._namespace}/{key}"

    # ``credhub curl -X=GET -p /health``
    async def status(self) -> StoreState:
        start = time.monotonic()
        async with self._executor.request("GET", HEALTH_PATH) as resp:
            latency = timedelta(seconds=time.monotonic() - start)
            if not resp.is_success:
                raise await _remote_error(resp, f"the CredHub ({HEALTH_PATH}) is not healthy")
            try:
                data = await resp.json()
            except ProtocolViolationError as exc:
                raise ProtocolViolationError(
                    f"failed to parse health response (status: {resp.status}, response: {await resp.text()})",
                    payload_type="json",
                    cause=exc,
                ) from exc
            health = data.get("status") if isinstance(data, dict) else None
            if health != "UP":
                logger.warning("credhub.not_up status=%r", health)
                raise RemoteError(
                    SERVICE,
                    f"CredHub is not UP, status: {health}",
                    status_code=resp.status_code,
                    status=resp.status,
                    body=await resp.text(),
                )
        return StoreState(latency=latency)

    async def create(self, key: str, value: bytes) -> None:
        async def check_then_put() -> None:
            try:
                await self.get(key)
            except NotFoundError:
                await self._put(key, value)
            else:
                raise AlreadyExistsError(key)

        _, shared = await self._inflight.do(self._name(key), check_then_put)
        if shared:
            # another caller's value was written, not ours
            raise AlreadyExistsError(key)

    async def set(self, key: str, value: bytes) -> None:
        await self._put(key, value)

    # ``credhub curl -X=PUT -p "/api/v1/data" -d='{"name":"/ns/key-1","type":"value","value":"1"}'``
    async def _put(self, key: str, value: bytes) -> None:
        payload = json.dumps(
            {
                "name": self._name(key),
                "type": "value",
                "value": encode_value(value, self._force_base64),
            }
        ).encode("utf-8")
        async with self._executor.request("PUT", DATA_PATH, payload) as resp:
            if not resp.is_success:
                raise await _remote_error(resp, "failed to set entry")

    # ``credhub curl -X=GET -p "/api/v1/data?current=true&name=/ns/key-4"``
    async def get(self, key: str) -> bytes:
        path = f"{DATA_PATH}?current=true&name={self._name(key)}"
        async with self._executor.request("GET", path) as resp:
            if resp.status_code == 404:
                raise NotFoundError(key)
            if not resp.is_success:
                raise await _remote_error(resp, "failed to get entry")
            data = await resp.json()

        versions = _list_field(data, "data")
        if not versions:
            raise NotFoundError(key)
        if len(versions) > 1:
            logger.warning("credhub.multiple_current_versions key=%r count=%d", key, len(versions))
            raise ProtocolViolationError(
                f"received multiple entries ({len(versions)}) for the same key '{key}'"
            )
        value = versions[0].get("value") if isinstance(versions[0], dict) else None
        if not isinstance(value, str):
            raise ProtocolViolationError(f"entry for key '{key}' has no string value")
        return decode_value(value)

    # ``credhub curl -X=DELETE -p "/api/v1/data?name=/ns/key-2"``
    async def delete(self, key: str) -> None:
        path = f"{DATA_PATH}?name={self._name(key)}"
        async with self._executor.request("DELETE", path) as resp:
            if resp.status_code == 404:
                raise NotFoundError(key)
            if not resp.is_success:
                raise await _remote_error(resp, "failed to delete entry")

    # ``credhub curl -X=GET -p "/api/v1/data?path=/ns/"``
    async def list(self) -> KeysIterator:
        prefix = f"{self._namespace}/"
        async with self._executor.request("GET", f"{DATA_PATH}?path={prefix}") as resp:
            if not resp.is_success:
                raise await _remote_error(resp, "failed to list entries")
            data = await resp.json()

        keys = []
        for credential in _list_field(data, "credentials"):
            name = credential.get("name") if isinstance(credential, dict) else None
            if not isinstance(name, str):
                raise ProtocolViolationError("credential without a string name in list response")
            keys.append(name.removeprefix(prefix))
        return KeysIterator(keys)

    async def close(self) -> None:
        await self._executor.aclose()
        logger.info("credhub.store_closed namespace=%s", self._namespace)


def _list_field(data: Any, field: str) -> list[Any]:
    """Return ``data[field]`` as a list; absent or ``null`` counts as empty."""
    if not isinstance(data, dict):
        raise ProtocolViolationError(f"expected a JSON object with '{field}'", payload_type="json")
    items = data.get(field)
    if items is None:
        return []
    if not isinstance(items, list):
        raise ProtocolViolationError(f"expected '{field}' to be a JSON array", payload_type="json")
    return items


async def _remote_error(resp: HttpResponse, action: str) -> RemoteError:
    body = await resp.text()
    logger.warning("credhub.remote_error action=%r status=%s", action, resp.status)
    return RemoteError(
        SERVICE,
        f"{action} (status: {resp.status}, response: {body})",
        status_code=resp.status_code,
        status=resp.status,
        body=body,
    )


__all__ = ["CredHubStore"]

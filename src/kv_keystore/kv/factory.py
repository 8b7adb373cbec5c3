"""Key-value store port – create_key_store factory."""
from __future__ import annotations

import logging
from typing import Any, Callable

from kv_keystore.adapters.credhub import CredHubConfig, CredHubStore
from kv_keystore.adapters.static import StaticListConfig, StaticListStore
from kv_keystore.config import ConfigError, EnvSettingsLoader, SettingsFactory
from kv_keystore.kv.port import KeyStore

logger = logging.getLogger(__name__)


def _credhub(**kwargs: Any) -> KeyStore:
    executor = kwargs.pop("executor", None)
    config = SettingsFactory.create(CredHubConfig, loaders=[EnvSettingsLoader()], overrides=kwargs)
    return CredHubStore(config, executor=executor)


def _static(**kwargs: Any) -> KeyStore:
    config = SettingsFactory.create(StaticListConfig, loaders=[EnvSettingsLoader()], overrides=kwargs)
    return StaticListStore(config)


_BUILDERS: dict[str, Callable[..., KeyStore]] = {
    "credhub": _credhub,
    "static": _static,
}


def create_key_store(store_type: str, **kwargs: Any) -> KeyStore:
    """Build a key store by type name.

    Settings come from the environment (``CREDHUB_*`` / ``STATIC_*``) with
    *kwargs* taking precedence.

    Example:
        >>> store = create_key_store("static", entries={"db-password": "s3cr3t"})

    Raises:
        ConfigError: If *store_type* is unknown or its settings are invalid.
    """
    builder = _BUILDERS.get(store_type)
    if builder is None:
        raise ConfigError(
            f"Unknown key store type: {store_type}. Available: {', '.join(_BUILDERS)}"
        )
    logger.debug("keystore.create type=%s", store_type)
    return builder(**kwargs)


__all__ = ["create_key_store"]

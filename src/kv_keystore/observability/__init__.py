"""Observability – logging configuration and health checks."""

from kv_keystore.observability.health import HealthCheck, HealthStatus, KeyStoreHealthCheck
from kv_keystore.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter

__all__ = [
    "HealthCheck",
    "HealthStatus",
    "JsonLoggerFactory",
    "KeyStoreHealthCheck",
    "SensitiveFieldsFilter",
]

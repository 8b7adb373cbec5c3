"""Observability – Health Checks."""
from kv_keystore.observability.health.builtin import KeyStoreHealthCheck
from kv_keystore.observability.health.check import HealthCheck, HealthStatus

__all__ = [
    "HealthCheck",
    "HealthStatus",
    "KeyStoreHealthCheck",
]

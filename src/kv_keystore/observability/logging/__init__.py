"""Observability – structlog JSON output and field redaction."""
from kv_keystore.observability.logging.factory import JsonLoggerFactory
from kv_keystore.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
]

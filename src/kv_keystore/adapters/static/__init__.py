"""Static adapter – read-only KeyStore over configured entries."""
from kv_keystore.adapters.static.store import StaticListConfig, StaticListStore

__all__ = ["StaticListConfig", "StaticListStore"]

"""Key-value store port – KeyStore contract, StoreState and KeysIterator."""
from kv_keystore.kv.iterator import KeysIterator
from kv_keystore.kv.port import KeyStore, StoreState

__all__ = ["KeyStore", "KeysIterator", "StoreState"]

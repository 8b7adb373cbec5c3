"""CredHub adapter – KeyStore over the CredHub credential REST API."""
from kv_keystore.adapters.credhub.codec import BASE64_PREFIX, decode_value, encode_value
from kv_keystore.adapters.credhub.config import CredHubConfig
from kv_keystore.adapters.credhub.store import CredHubStore

__all__ = ["BASE64_PREFIX", "CredHubConfig", "CredHubStore", "decode_value", "encode_value"]

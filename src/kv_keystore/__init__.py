"""
kv_keystore – pluggable key stores behind one async contract.

Import path convention::

    from kv_keystore.kernel.errors import NotFoundError
    from kv_keystore.kv import KeyStore, KeysIterator
    from kv_keystore.adapters.credhub import CredHubConfig, CredHubStore
    from kv_keystore.adapters.static import StaticListConfig, StaticListStore
    from kv_keystore import create_key_store
"""

from kv_keystore.kv.factory import create_key_store

__version__ = "0.1.0"
__all__ = ["__version__", "create_key_store"]

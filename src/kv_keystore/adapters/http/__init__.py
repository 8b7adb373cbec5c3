"""HTTP adapter – request executor and response descriptor."""
from kv_keystore.adapters.http.client import HttpxRequestExecutor, RequestExecutor
from kv_keystore.adapters.http.response import HttpResponse

__all__ = ["HttpResponse", "HttpxRequestExecutor", "RequestExecutor"]

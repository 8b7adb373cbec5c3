"""Testing support – fakes for exercising key stores without a server.

Usage::

    from kv_keystore.testing import FakeRequestExecutor
"""

from kv_keystore.testing.fakes import FakeRequestExecutor, RecordedRequest

__all__ = ["FakeRequestExecutor", "RecordedRequest"]

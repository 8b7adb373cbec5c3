"""Testing fakes – in-memory doubles for the HTTP transport port."""
from kv_keystore.testing.fakes.executor import FakeRequestExecutor, RecordedRequest

__all__ = ["FakeRequestExecutor", "RecordedRequest"]

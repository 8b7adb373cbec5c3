"""Resilience – single-flight deduplication and caller deadlines."""

from kv_keystore.resilience.deadline import DeadlineContext, DeadlineExceededError
from kv_keystore.resilience.singleflight import SingleFlight
from kv_keystore.resilience.timeouts import Deadline

__all__ = [
    "Deadline",
    "DeadlineContext",
    "DeadlineExceededError",
    "SingleFlight",
]

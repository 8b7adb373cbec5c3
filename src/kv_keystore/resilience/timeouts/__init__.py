"""Resilience – deadlines."""
from kv_keystore.resilience.timeouts.deadline import Deadline

__all__ = ["Deadline"]

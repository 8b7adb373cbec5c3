"""Resilience – Deadline propagation via contextvars."""
from kv_keystore.resilience.deadline.context import (
    DeadlineContext,
    DeadlineExceededError,
)

__all__ = ["DeadlineContext", "DeadlineExceededError"]

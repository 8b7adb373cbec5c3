"""Resilience – single-flight execution keyed by string."""
from kv_keystore.resilience.singleflight.group import SingleFlight

__all__ = ["SingleFlight"]

"""Infrastructure errors – transport failures and misbehaving backends."""

from __future__ import annotations

from typing import Any

from kv_keystore.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not about the key's state."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """The request never produced an HTTP response (connect, TLS, reset, ...)."""

    default_code = "transport_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not reach '{resource}'", **kwargs)
        self.resource = resource


class TimeoutError(TransportError):  # noqa: A001
    """The request exceeded the caller's deadline."""

    default_code = "timeout"


class ProtocolViolationError(InfrastructureError):
    """The backend answered with something the protocol does not allow.

    Malformed JSON, an undecodable value, or more than one "current" version
    for a single key.
    """

    default_code = "protocol_violation"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class RemoteError(InfrastructureError):
    """A non-2xx response not otherwise classified.

    ``status`` and ``body`` carry the response verbatim for diagnostics.
    """

    default_code = "remote_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        status: str | None = None,
        body: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Remote service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code
        self.status = status
        self.body = body


__all__ = [
    "InfrastructureError",
    "ProtocolViolationError",
    "RemoteError",
    "TimeoutError",
    "TransportError",
]

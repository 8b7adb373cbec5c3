"""Application-layer errors – capability and configuration concerns."""

from __future__ import annotations

from typing import Any

from kv_keystore.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class NotAllowedError(ApplicationError):
    """The store does not support the requested operation.

    Raised by restricted-capability stores, e.g. a read-only static list
    rejecting ``set``.
    """

    default_code = "not_allowed"

    def __init__(
        self,
        message: str = "Operation not allowed",
        *,
        operation: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.operation = operation


__all__ = [
    "ApplicationError",
    "NotAllowedError",
]

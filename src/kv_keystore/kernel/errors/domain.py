"""Domain errors – outcomes about the state of a key."""

from __future__ import annotations

from typing import Any

from kv_keystore.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an operation cannot proceed because of the key's state."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested key does not exist.

    Raised for a 404 from a remote backend as well as for an empty result set.
    """

    default_code = "not_found"

    def __init__(
        self,
        key: str | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = f"key '{key}' does not exist" if key is not None else "key does not exist"
        super().__init__(message, **kwargs)
        self.key = key


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class AlreadyExistsError(ConflictError):
    """``create`` was called for a key that is already present."""

    default_code = "already_exists"

    def __init__(
        self,
        key: str | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = f"key '{key}' already exists" if key is not None else "key already exists"
        super().__init__(message, **kwargs)
        self.key = key


__all__ = [
    "AlreadyExistsError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
]

"""Kernel – framework-agnostic building blocks shared by every store."""

from kv_keystore.kernel.errors import (
    AlreadyExistsError,
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotAllowedError,
    NotFoundError,
    ProtocolViolationError,
    RemoteError,
    TimeoutError,
    TransportError,
)

__all__ = [
    "AlreadyExistsError",
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "NotAllowedError",
    "NotFoundError",
    "ProtocolViolationError",
    "RemoteError",
    "TimeoutError",
    "TransportError",
]

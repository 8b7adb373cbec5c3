"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── NotFoundError
    │   └── ConflictError
    │       └── AlreadyExistsError
    ├── ApplicationError         (application.py)
    │   └── NotAllowedError
    └── InfrastructureError      (infrastructure.py)
        ├── TransportError
        │   └── TimeoutError
        ├── ProtocolViolationError
        └── RemoteError
"""

from kv_keystore.kernel.errors.application import ApplicationError, NotAllowedError
from kv_keystore.kernel.errors.base import BaseError
from kv_keystore.kernel.errors.domain import (
    AlreadyExistsError,
    ConflictError,
    DomainError,
    NotFoundError,
)
from kv_keystore.kernel.errors.infrastructure import (
    InfrastructureError,
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

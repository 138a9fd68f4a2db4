"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (szuru_client.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── SerializationError
        └── HostRuntimeError (szuru_client.embedding.errors)
"""

from szuru_client.kernel.errors.application import ApplicationError
from szuru_client.kernel.errors.base import BaseError
from szuru_client.kernel.errors.domain import DomainError, ValidationError
from szuru_client.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "ValidationError",
]

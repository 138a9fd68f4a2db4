"""Kernel – framework-agnostic building blocks."""

from szuru_client.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "ValidationError",
]

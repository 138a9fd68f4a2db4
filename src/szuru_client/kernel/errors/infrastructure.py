"""Infrastructure errors – decoding boundaries and the embedding host."""

from __future__ import annotations

from typing import Any

from szuru_client.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure failure that is not a value object rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to interpret a decoded response payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = ["InfrastructureError", "SerializationError"]

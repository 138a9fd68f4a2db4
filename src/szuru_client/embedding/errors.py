"""Embedding – HostRuntimeError hierarchy."""
from __future__ import annotations

from typing import Any

from szuru_client.kernel.errors import InfrastructureError


class HostRuntimeError(InfrastructureError):
    """The embedding host runtime rejected an operation."""

    default_code = "host_runtime_error"


class HostRuntimeUnavailableError(HostRuntimeError):
    """The host could not grant its exclusive-access guard."""

    default_code = "host_runtime_unavailable"

    def __init__(self, runtime: str, reason: str, **kwargs: Any) -> None:
        super().__init__(f"Host runtime '{runtime}' unavailable: {reason}", **kwargs)
        self.runtime = runtime
        self.reason = reason


class HostConversionError(HostRuntimeError):
    """An item could not be mapped into the host runtime."""

    default_code = "host_conversion_failed"


__all__ = ["HostConversionError", "HostRuntimeError", "HostRuntimeUnavailableError"]

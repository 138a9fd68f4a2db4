"""Application-layer errors – cross-cutting concerns such as configuration."""

from __future__ import annotations

from szuru_client.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]

"""Kernel errors – BaseError, root of every error szuru-client raises."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every subclass carries a ``default_code`` slug so callers and log
    processors can branch on ``err.code`` instead of the class. Chaining is
    done with ``raise ... from exc``; the chained exception shows up under
    ``"cause"`` in :meth:`to_dict`.

    Args:
        message: Human-readable description.
        code: Overrides ``default_code`` for this instance.
        detail: Extra context; must be JSON-friendly or ``str()``-able.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form, suitable as structlog event fields."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]

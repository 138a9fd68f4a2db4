"""Config settings – SearchSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from szuru_client.config.settings.base import Settings
from szuru_client.config.validation import InvalidSettingValueError

WAIT_FOREVER = -1.0


def check_guard_timeout(value: float) -> float:
    """Return *value* if it is a usable guard timeout: positive, or ``-1``."""
    if value <= 0 and value != WAIT_FOREVER:
        raise InvalidSettingValueError(
            "guard_timeout", value, "must be > 0 or -1 to wait forever"
        )
    return value


@dataclasses.dataclass
class SearchSettings(Settings):
    """Defaults for building requests and converting results.

    Environment variables use the ``SZURU_`` prefix, e.g.
    ``SZURU_DEFAULT_LIMIT=50``.

    Attributes
    ----------
    default_limit:
        Page size used when a request does not name one.
    guard_timeout:
        Seconds to wait for the embedding host's exclusive-access guard.
        ``-1`` waits forever.
    log_level:
        Level name handed to :class:`JsonLoggerFactory`.
    """

    _prefix: ClassVar[str] = "SZURU"

    default_limit: int = 100
    guard_timeout: float = 5.0
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.default_limit < 1:
            raise InvalidSettingValueError("default_limit", self.default_limit, "must be >= 1")
        check_guard_timeout(self.guard_timeout)
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown level name")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["SearchSettings", "WAIT_FOREVER", "check_guard_timeout"]

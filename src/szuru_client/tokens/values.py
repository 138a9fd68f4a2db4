"""Tokens – type-safe values for post ``type:`` and ``safety:`` filters."""
from __future__ import annotations

from enum import Enum


class PostType(str, Enum):
    """Value for :attr:`PostNamedToken.TYPE`.

    The server also accepts ``animated``/``anim``, ``swf`` and ``webm`` as
    spellings of ``animation``, ``flash`` and ``video``.
    """

    IMAGE = "image"
    ANIMATION = "animation"
    FLASH = "flash"
    VIDEO = "video"

    def __str__(self) -> str:
        return self.value


class PostSafety(str, Enum):
    """Value for :attr:`PostNamedToken.SAFETY`. ``questionable`` is accepted
    by the server as a spelling of ``sketchy``."""

    SAFE = "safe"
    SKETCHY = "sketchy"
    UNSAFE = "unsafe"

    def __str__(self) -> str:
        return self.value


__all__ = ["PostSafety", "PostType"]

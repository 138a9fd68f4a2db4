"""Tokens – QueryToken value object and query string rendering.

A query string is a space separated list of tokens, each either ``key`` or
``key:value``. Literal ``:`` and ``-`` inside values (and anonymous keys) are
escaped with a backslash; a leading ``-`` on the key excludes the match::

    >>> to_query_string([
    ...     QueryToken.token(PostNamedToken.COMMENT_COUNT, "1"),
    ...     QueryToken.sort(PostSortToken.RANDOM),
    ... ])
    'comment-count:1 sort:random'

Percent-encoding is left to the HTTP transport.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable

from szuru_client.tokens.catalogs import NamedToken, SortableToken, SpecialToken

_SORT_KEY = "sort"
_NEGATION = "-"


def _as_str(value: str | Enum) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def escape(text: str) -> str:
    """Escape ``:`` then ``-`` with a backslash.

    The colon pass runs first; the hyphen pass never touches the backslashes
    it introduced.
    """
    return text.replace(":", "\\:").replace("-", "\\-")


@dataclasses.dataclass(frozen=True, slots=True)
class QueryToken:
    """One ``key[:value]`` unit of a search expression.

    Build instances through :meth:`token`, :meth:`sort`, :meth:`anonymous`
    or :meth:`special`; the constructor stores both fields verbatim.
    """

    key: str
    value: str = ""

    def __str__(self) -> str:
        if self.value:
            return f"{self.key}:{self.value}"
        return self.key

    @classmethod
    def token(cls, key: NamedToken | str, value: str | Enum) -> "QueryToken":
        """Named ``key:value`` token; *value* is escaped, *key* is not."""
        return cls(key=_as_str(key), value=escape(_as_str(value)))

    @classmethod
    def sort(cls, value: SortableToken | str) -> "QueryToken":
        """``sort:value`` token. Sort identifiers are used as-is."""
        return cls(key=_SORT_KEY, value=_as_str(value))

    @classmethod
    def anonymous(cls, key: str | Enum) -> "QueryToken":
        """Bare token whose meaning depends on the resource (a tag name for
        posts, for instance). *key* is escaped: ``re:zero`` → ``re\\:zero``."""
        return cls(key=escape(_as_str(key)), value="")

    @classmethod
    def special(cls, key: SpecialToken) -> "QueryToken":
        if not isinstance(key, SpecialToken):
            raise TypeError(f"special() expects a SpecialToken member, got {key!r}")
        return cls.anonymous(key)

    @property
    def negated(self) -> bool:
        return self.key.startswith(_NEGATION)

    def negate(self) -> "QueryToken":
        """Return a copy with include/exclude flipped (``foo`` ↔ ``-foo``)."""
        key = self.key[1:] if self.negated else f"{_NEGATION}{self.key}"
        return dataclasses.replace(self, key=key)


def to_query_string(tokens: Iterable[QueryToken]) -> str:
    """Render *tokens* in order, separated by a single space."""
    return " ".join(str(token) for token in tokens)


__all__ = ["QueryToken", "escape", "to_query_string"]

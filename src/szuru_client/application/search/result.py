"""Application search – PagedSearchResult generic container."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Mapping, TypeVar

from szuru_client.kernel.errors import SerializationError

T = TypeVar("T")
U = TypeVar("U")

_SCALAR_FIELDS = ("offset", "limit", "total")


@dataclasses.dataclass(frozen=True, slots=True)
class PagedSearchResult(Generic[T]):
    """One page of search results plus the request parameters the server echoed.

    A snapshot, not a cursor: moving to another page means building a new
    request (see :meth:`SearchRequest.next_page`) and reissuing it.
    ``total`` is the server's full match count and is unrelated to
    ``len(results)``.
    """

    query: str
    offset: int
    limit: int
    total: int
    results: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))

    @property
    def next_offset(self) -> int:
        return self.offset + len(self.results)

    @property
    def has_next(self) -> bool:
        """False on an empty page, even when ``total`` claims more matches."""
        return bool(self.results) and self.next_offset < self.total

    @property
    def has_previous(self) -> bool:
        return self.offset > 0

    def map(self, fn: Callable[[T], U]) -> "PagedSearchResult[U]":
        """Return a new container with each item transformed by *fn*."""
        return PagedSearchResult(
            query=self.query,
            offset=self.offset,
            limit=self.limit,
            total=self.total,
            results=[fn(item) for item in self.results],
        )

    @classmethod
    def from_mapping(
        cls,
        payload: Mapping[str, Any],
        item_factory: Callable[[Any], T],
    ) -> "PagedSearchResult[T]":
        """Wrap an already JSON-decoded page, building items with *item_factory*.

        Raises :class:`SerializationError` when the envelope is malformed.
        Errors raised by *item_factory* propagate unchanged.
        """
        if not isinstance(payload, Mapping):
            raise SerializationError(
                f"Expected a mapping, got {type(payload).__name__}",
                payload_type=type(payload).__name__,
            )
        query = payload.get("query")
        if not isinstance(query, str):
            raise SerializationError(
                f"Field 'query' must be a string, got {query!r}",
                payload_type="PagedSearchResult",
            )
        scalars: dict[str, int] = {}
        for name in _SCALAR_FIELDS:
            value = payload.get(name)
            # bool is an int subclass but never a valid count
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise SerializationError(
                    f"Field {name!r} must be a non-negative integer, got {value!r}",
                    payload_type="PagedSearchResult",
                )
            scalars[name] = value
        raw_results = payload.get("results")
        if not isinstance(raw_results, list):
            raise SerializationError("Field 'results' must be a list", payload_type="PagedSearchResult")
        return cls(
            query=query,
            results=[item_factory(raw) for raw in raw_results],
            **scalars,
        )


__all__ = ["PagedSearchResult"]

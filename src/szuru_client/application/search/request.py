"""Application search – SearchRequest value object."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from szuru_client.application.search.result import PagedSearchResult
from szuru_client.config.settings import SearchSettings
from szuru_client.kernel.errors import ValidationError
from szuru_client.observability.logging import get_logger
from szuru_client.tokens import QueryToken, Resource, to_query_string

log = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class SearchRequest:
    """Tokens plus the paging parameters sent with a list call.

    ``to_params()`` yields raw strings; percent-encoding belongs to whatever
    transport issues the request.
    """

    resource: Resource
    tokens: tuple[QueryToken, ...] = ()
    offset: int = 0
    limit: int = 100
    fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))
        object.__setattr__(self, "fields", tuple(self.fields))
        if self.offset < 0:
            raise ValidationError(
                "offset must be >= 0",
                errors=[{"field": "offset", "value": self.offset}],
            )
        if self.limit < 1:
            raise ValidationError(
                "limit must be >= 1",
                errors=[{"field": "limit", "value": self.limit}],
            )

    @classmethod
    def create(
        cls,
        resource: Resource,
        tokens: Iterable[QueryToken] = (),
        settings: SearchSettings | None = None,
        *,
        offset: int = 0,
        limit: int | None = None,
        fields: Iterable[str] = (),
    ) -> "SearchRequest":
        """Build a request, taking the page size from *settings* unless given."""
        settings = settings or SearchSettings()
        return cls(
            resource=resource,
            tokens=tuple(tokens),
            offset=offset,
            limit=limit if limit is not None else settings.default_limit,
            fields=tuple(fields),
        )

    @property
    def query_string(self) -> str:
        return to_query_string(self.tokens)

    def to_params(self) -> dict[str, str]:
        params = {
            "query": self.query_string,
            "offset": str(self.offset),
            "limit": str(self.limit),
        }
        if self.fields:
            params["fields"] = ",".join(self.fields)
        return params

    def next_page(self, result: PagedSearchResult[Any]) -> "SearchRequest":
        """Request for the page following *result*. Nothing is fetched.

        Callers loop while ``result.has_next``; an empty page ends the loop
        even if ``total`` is larger than what was returned.
        """
        log.debug(
            "search_request.next_page",
            resource=str(self.resource),
            offset=result.next_offset,
            total=result.total,
        )
        return dataclasses.replace(self, offset=result.next_offset)


__all__ = ["SearchRequest"]

"""Application – request and result building blocks around the search API."""

from szuru_client.application.search import PagedSearchResult, SearchRequest

__all__ = ["PagedSearchResult", "SearchRequest"]

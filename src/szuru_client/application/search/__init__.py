"""Application search – search requests and paginated results."""
from szuru_client.application.search.request import SearchRequest
from szuru_client.application.search.result import PagedSearchResult

__all__ = ["PagedSearchResult", "SearchRequest"]

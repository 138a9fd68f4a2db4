"""
szuru_client – query tokens and paginated results for the Szurubooru API.

Import path convention::

    from szuru_client.tokens import PostNamedToken, QueryToken, to_query_string
    from szuru_client.application.search import PagedSearchResult, SearchRequest
    from szuru_client.embedding import LocalHostRuntime, to_host_result
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

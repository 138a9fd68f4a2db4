"""Embedding – expose paginated results to a second host runtime."""
from szuru_client.embedding.conversion import HostPagedSearchResult, to_host_result
from szuru_client.embedding.errors import HostConversionError, HostRuntimeError, HostRuntimeUnavailableError
from szuru_client.embedding.runtime import HostRuntime, LocalHostRuntime

__all__ = [
    "HostConversionError",
    "HostPagedSearchResult",
    "HostRuntime",
    "HostRuntimeError",
    "HostRuntimeUnavailableError",
    "LocalHostRuntime",
    "to_host_result",
]

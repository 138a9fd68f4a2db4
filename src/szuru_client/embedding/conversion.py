"""Embedding – convert a PagedSearchResult into a host-owned record.

The host guard is acquired once and held while the host sequence is
populated and the record assembled. A failure at any point leaves nothing
behind in the host: the caller gets either a complete record or an error.
Converters run under the guard and must not block.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, TypeVar

from szuru_client.application.search import PagedSearchResult
from szuru_client.embedding.errors import HostConversionError, HostRuntimeError, HostRuntimeUnavailableError
from szuru_client.embedding.runtime import HostRuntime
from szuru_client.observability.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class HostPagedSearchResult:
    """Host-visible counterpart of :class:`PagedSearchResult`.

    ``results`` is whatever sequence object the host allocated.
    """

    query: str
    offset: int
    limit: int
    total: int
    results: Any

    @classmethod
    def from_result(
        cls,
        result: PagedSearchResult[T],
        runtime: HostRuntime,
        convert: Callable[[T], Any] | None = None,
    ) -> "HostPagedSearchResult":
        return to_host_result(result, runtime, convert)


def to_host_result(
    result: PagedSearchResult[T],
    runtime: HostRuntime,
    convert: Callable[[T], Any] | None = None,
) -> HostPagedSearchResult:
    """Build a :class:`HostPagedSearchResult` inside *runtime*.

    Parameters
    ----------
    result:
        The native page to expose.
    runtime:
        Host that will own the converted objects.
    convert:
        Per-item mapping; defaults to ``runtime.to_host``.

    Raises
    ------
    HostRuntimeUnavailableError
        The host refused its guard. Not retried.
    HostConversionError
        *convert* raised for some item.
    """
    mapper = convert or runtime.to_host
    try:
        with runtime.guard():
            try:
                items = runtime.new_list(mapper(item) for item in result.results)
            except HostRuntimeError:
                raise
            except Exception as exc:
                raise HostConversionError(
                    f"Failed to convert results of query {result.query!r}",
                    detail={"runtime": runtime.name, "offset": result.offset},
                ) from exc
            record = HostPagedSearchResult(
                query=result.query,
                offset=result.offset,
                limit=result.limit,
                total=result.total,
                results=items,
            )
    except HostRuntimeUnavailableError as exc:
        log.warning("host_conversion.guard_unavailable", runtime=runtime.name, reason=exc.reason)
        raise
    log.debug(
        "host_conversion.completed",
        runtime=runtime.name,
        query=result.query,
        count=len(result.results),
    )
    return record


__all__ = ["HostPagedSearchResult", "to_host_result"]

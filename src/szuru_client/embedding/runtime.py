"""Embedding – HostRuntime port and the in-process LocalHostRuntime."""
from __future__ import annotations

import abc
import contextlib
import dataclasses
import threading
from enum import Enum
from typing import Any, Iterable, Iterator

from szuru_client.config.settings import SearchSettings
from szuru_client.config.settings.search import check_guard_timeout
from szuru_client.embedding.errors import HostRuntimeError, HostRuntimeUnavailableError


class HostRuntime(abc.ABC):
    """Port: a second runtime that owns the objects handed to it.

    Objects may only be allocated in the host while :meth:`guard` is held.
    """

    name: str = "host"

    @abc.abstractmethod
    @contextlib.contextmanager
    def guard(self) -> Iterator[None]:
        """Hold exclusive access to the host for the duration of the block.

        Raises :class:`HostRuntimeUnavailableError` when access cannot be
        granted. Implementations must not retry.
        """

    @abc.abstractmethod
    def new_list(self, items: Iterable[Any]) -> Any:
        """Allocate a host sequence holding *items*, in order."""

    @abc.abstractmethod
    def to_host(self, value: Any) -> Any:
        """Default mapping of one native value into the host."""


class LocalHostRuntime(HostRuntime):
    """Host runtime living in this interpreter, guarded by a single lock.

    The guard is reentrant for the thread holding it, so a converter may
    convert a nested page on the same runtime. Once :meth:`close` has been
    called every further outermost :meth:`guard` fails immediately.

    Parameters
    ----------
    name:
        Label used in errors and log events.
    guard_timeout:
        Seconds to wait for the guard; ``-1`` waits forever.
    """

    def __init__(self, name: str = "local", guard_timeout: float = 5.0) -> None:
        self.name = name
        self._guard_timeout = check_guard_timeout(guard_timeout)
        self._lock = threading.Lock()
        self._owner: int | None = None
        self._closed = False

    @classmethod
    def from_settings(cls, settings: SearchSettings, name: str = "local") -> "LocalHostRuntime":
        return cls(name=name, guard_timeout=settings.guard_timeout)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def held(self) -> bool:
        """``True`` when the calling thread holds the guard."""
        return self._owner == threading.get_ident()

    def close(self) -> None:
        self._closed = True

    @contextlib.contextmanager
    def guard(self) -> Iterator[None]:
        if self.held:
            yield
            return
        if self._closed:
            raise HostRuntimeUnavailableError(self.name, "runtime is shut down")
        if not self._lock.acquire(timeout=self._guard_timeout):
            raise HostRuntimeUnavailableError(
                self.name, f"guard not granted within {self._guard_timeout}s"
            )
        self._owner = threading.get_ident()
        try:
            yield
        finally:
            self._owner = None
            self._lock.release()

    def new_list(self, items: Iterable[Any]) -> list[Any]:
        if not self.held:
            raise HostRuntimeError(f"Host runtime '{self.name}': new_list() requires the guard")
        return list(items)

    def to_host(self, value: Any) -> Any:
        hook = getattr(value, "to_host", None)
        if callable(hook):
            return hook()
        if isinstance(value, Enum):
            return value.value
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return dataclasses.asdict(value)
        return value


__all__ = ["HostRuntime", "LocalHostRuntime"]

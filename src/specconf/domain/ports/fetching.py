"""Ports for fetching remote group details."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FetchResponse(Protocol):
    """The parts of an HTTP response the resolver relies on (``httpx.Response`` fits)."""

    @property
    def status_code(self) -> int: ...

    @property
    def is_success(self) -> bool: ...

    def json(self) -> object: ...


@runtime_checkable
class CachedFetch(Protocol):
    """Callable port issuing a cache-aware GET for an absolute URL."""

    async def __call__(self, url: str) -> FetchResponse: ...


__all__ = ["CachedFetch", "FetchResponse"]

from __future__ import annotations

from .fetching import CachedFetch, FetchResponse

__all__ = ["CachedFetch", "FetchResponse"]

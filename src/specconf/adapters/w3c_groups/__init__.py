"""Adapter for the W3C groups lookup service."""

from __future__ import annotations

from .fetcher import ClientFactory, build_cached_fetch, default_client_factory
from .schema import GroupPayload, is_group_payload

__all__ = [
    "ClientFactory",
    "GroupPayload",
    "build_cached_fetch",
    "default_client_factory",
    "is_group_payload",
]

"""Cache-aware fetch against the groups lookup service."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias

from specconf.adapters.http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from specconf.config.http_resilience import ResilienceConfig
    from specconf.domain.ports.fetching import CachedFetch

log = getLogger(__name__)

ClientFactory: TypeAlias = "Callable[[ResilienceConfig], ResilientClient]"


def build_cached_fetch(client: ResilientClient) -> CachedFetch:
    """Adapt a shared client to the ``CachedFetch`` port used by the resolver."""

    async def fetch(url: str) -> httpx.Response:
        response = await client.get(url)
        log.debug("GET %s -> %s", url, response.status_code)
        return response

    return fetch


def default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)

"""Working-group lookup service configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var, optional_float_env_var
from .errors import InvalidConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, ShouldCacheHook

W3C_GROUPS_API: Final[str] = "https://respec.org/w3c/groups/"
GROUPS_TIMEOUT_SECONDS: Final[float] = 10.0
GROUPS_CACHE_TTL_SECONDS: Final[float] = 24 * 60 * 60

_CACHE_MODES = ("memory", "sqlite", "off")


@dataclass(frozen=True, slots=True)
class GroupsApiConfig:
    """Where and how group details are looked up."""

    base_url: str
    resilience: ResilienceConfig


def _build_cache_config(mode: str, cache_predicate: ShouldCacheHook | None) -> CacheConfig | None:
    if mode not in _CACHE_MODES:
        allowed = ", ".join(_CACHE_MODES)
        raise InvalidConfigurationError("SPECCONF_HTTP_CACHE", mode, f"must be one of {allowed}")
    if mode == "off":
        return None
    return CacheConfig(
        backend="sqlite" if mode == "sqlite" else "memory",
        default_ttl_seconds=GROUPS_CACHE_TTL_SECONDS,
        should_cache=cache_predicate,
    )


def get_groups_config(
    *,
    base_url: str | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> GroupsApiConfig:
    """Build the lookup configuration, honouring ``SPECCONF_*`` overrides."""

    effective_base_url = base_url or optional_env_var("SPECCONF_GROUPS_API_URL") or W3C_GROUPS_API
    if not effective_base_url.endswith("/"):
        # group ids resolve relative to the base, so it has to name a directory
        effective_base_url = f"{effective_base_url}/"
    timeout = optional_float_env_var("SPECCONF_HTTP_TIMEOUT", default=GROUPS_TIMEOUT_SECONDS)
    cache_mode = (optional_env_var("SPECCONF_HTTP_CACHE") or "memory").lower()

    return GroupsApiConfig(
        base_url=effective_base_url,
        resilience=ResilienceConfig(
            name="w3c-groups",
            timeout_seconds=timeout,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            cache=_build_cache_config(cache_mode, cache_predicate),
            default_headers={"Accept": "application/json"},
        ),
    )

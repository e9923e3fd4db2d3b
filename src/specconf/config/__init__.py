"""Application configuration helpers."""

from __future__ import annotations

from specconf.common.logging import configure_logging

from .env import optional_env_var, optional_float_env_var
from .errors import ConfigurationError, InvalidConfigurationError
from .groups import W3C_GROUPS_API, GroupsApiConfig, get_groups_config
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig

__all__ = [
    "W3C_GROUPS_API",
    "CacheConfig",
    "ConfigurationError",
    "GroupsApiConfig",
    "InvalidConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "configure_logging",
    "get_groups_config",
    "optional_env_var",
    "optional_float_env_var",
]

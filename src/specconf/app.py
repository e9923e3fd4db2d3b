"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from specconf.adapters.w3c_groups import (
    build_cached_fetch,
    default_client_factory,
    is_group_payload,
)
from specconf.config.groups import get_groups_config
from specconf.domain.diagnostics import DiagnosticCollector, DiagnosticLevel
from specconf.plugins import w3c_group

if TYPE_CHECKING:
    from specconf.adapters.w3c_groups import ClientFactory
    from specconf.config.groups import GroupsApiConfig
    from specconf.domain.diagnostics import Diagnostic
    from specconf.domain.model import ConfigObject

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GroupConfigResult:
    """The (mutated) configuration plus everything the plugin reported."""

    conf: ConfigObject
    diagnostics: tuple[Diagnostic, ...]

    @property
    def has_errors(self) -> bool:
        return any(item.level is DiagnosticLevel.ERROR for item in self.diagnostics)


async def resolve_group_config_async(
    conf: ConfigObject,
    *,
    config: GroupsApiConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> GroupConfigResult:
    effective_config = config or get_groups_config(cache_predicate=is_group_payload)
    factory = client_factory or default_client_factory
    collector = DiagnosticCollector()

    log.info("Resolving group configuration against %s", effective_config.base_url)
    async with factory(effective_config.resilience) as client:
        await w3c_group.run(
            conf,
            fetch=build_cached_fetch(client),
            sink=collector,
            base_url=effective_config.base_url,
        )

    return GroupConfigResult(conf=conf, diagnostics=tuple(collector.diagnostics))


def resolve_group_config(
    conf: ConfigObject,
    *,
    config: GroupsApiConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> GroupConfigResult:
    """Resolve ``conf["group"]`` in place using the configured lookup service."""

    return asyncio.run(
        resolve_group_config_async(conf, config=config, client_factory=client_factory)
    )

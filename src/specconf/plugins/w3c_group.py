"""Resolve the ``group`` configuration option.

``group`` is a shorthand for the ``wg``, ``wgId``, ``wgURI`` and ``wgPatentURI``
options. Each group id is looked up against the groups service and the details
are merged into the document configuration. A list of ids produces parallel
lists of details, in request order, without entries for groups that failed.
"""

from __future__ import annotations

import asyncio
import sqlite3
from collections.abc import Sequence
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from specconf.adapters.w3c_groups.schema import GroupPayload
from specconf.common.text import join_and
from specconf.config.groups import W3C_GROUPS_API
from specconf.domain.diagnostics import Diagnostic, DiagnosticLevel
from specconf.domain.model import (
    GROUP_KEY,
    SUPERSEDED_OPTIONS,
    AggregatedGroupDetails,
    GroupDetails,
)

if TYPE_CHECKING:
    from specconf.domain.diagnostics import DiagnosticSink
    from specconf.domain.model import ConfigObject
    from specconf.domain.ports.fetching import CachedFetch

log = getLogger(__name__)

name = "w3c/group"

SUPPORTED_GROUPS_HINT = (
    "See [supported group names](https://respec.org/w3c/groups/) to use with the "
    "[`group`](https://respec.org/docs/#group) configuration option."
)


def _warn(sink: DiagnosticSink, message: str, hint: str | None = None) -> None:
    sink.publish(Diagnostic(DiagnosticLevel.WARN, message, name, hint))


def _error(sink: DiagnosticSink, message: str, hint: str | None = None) -> None:
    sink.publish(Diagnostic(DiagnosticLevel.ERROR, message, name, hint))


async def run(
    conf: ConfigObject,
    *,
    fetch: CachedFetch,
    sink: DiagnosticSink,
    base_url: str = W3C_GROUPS_API,
) -> None:
    """Merge details for ``conf["group"]`` into ``conf``; a no-op without a group."""

    group = conf.get(GROUP_KEY)
    if not group and not isinstance(group, (list, tuple)):
        return

    check_superseded_options(conf, sink)

    details: GroupDetails | AggregatedGroupDetails | None
    if isinstance(group, Sequence) and not isinstance(group, str):
        details = await get_multiple_group_details(
            [str(item) for item in group], fetch=fetch, sink=sink, base_url=base_url
        )
    else:
        details = await get_group_details(str(group), fetch=fetch, sink=sink, base_url=base_url)

    if details is not None:
        conf.update(details.as_config())


def check_superseded_options(conf: ConfigObject, sink: DiagnosticSink) -> list[str]:
    """Warn once about legacy options that ``group`` overrides."""

    used = [option for option in SUPERSEDED_OPTIONS if conf.get(option)]
    if used:
        options = join_and(used, lambda option: f"`{option}`")
        _warn(
            sink,
            f"Configuration options {options} are superseded by `group` and will be overridden.",
            "Please remove them from the document configuration.",
        )
    return used


async def get_multiple_group_details(
    groups: Sequence[str],
    *,
    fetch: CachedFetch,
    sink: DiagnosticSink,
    base_url: str = W3C_GROUPS_API,
) -> AggregatedGroupDetails:
    results = await asyncio.gather(
        *(get_group_details(group, fetch=fetch, sink=sink, base_url=base_url) for group in groups)
    )
    aggregated = AggregatedGroupDetails.from_details(results)
    log.info("Resolved %d of %d groups", len(aggregated), len(groups))
    return aggregated


async def get_group_details(
    group: str,
    *,
    fetch: CachedFetch,
    sink: DiagnosticSink,
    base_url: str = W3C_GROUPS_API,
) -> GroupDetails | None:
    try:
        url = str(httpx.URL(base_url).join(group))
        response = await fetch(url)
    except (httpx.HTTPError, httpx.InvalidURL, sqlite3.Error) as exc:
        _error(sink, f"Failed to fetch group details ({exc.__class__.__name__}: {exc})")
        return None

    if response.is_success:
        try:
            payload = GroupPayload.model_validate(response.json())
        except ValueError:
            # malformed JSON or a pydantic ValidationError
            _error(sink, f'Received invalid group details for `"{group}"`.')
            return None
        log.debug("Resolved group %s from %s", group, url)
        return payload.to_details()

    if response.status_code == httpx.codes.NOT_FOUND:
        _error(sink, f'No group with name `"{group}"` found.', SUPPORTED_GROUPS_HINT)
    else:
        _error(sink, f"Failed to fetch group details (HTTP: {response.status_code})")
    return None

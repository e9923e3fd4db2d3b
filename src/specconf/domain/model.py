"""Working-group metadata merged into document configuration."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable

ConfigObject: TypeAlias = MutableMapping[str, Any]

GROUP_KEY = "group"
SUPERSEDED_OPTIONS: tuple[str, ...] = ("wg", "wgURI", "wgId", "wgPatentURI")


@dataclass(frozen=True, slots=True)
class GroupDetails:
    """Values exactly as the lookup service sent them (usually str, int, str, str)."""

    wg: Any
    wg_id: Any
    wg_uri: Any
    wg_patent_uri: Any

    def as_config(self) -> dict[str, Any]:
        return {
            "wg": self.wg,
            "wgId": self.wg_id,
            "wgURI": self.wg_uri,
            "wgPatentURI": self.wg_patent_uri,
        }


@dataclass(slots=True)
class AggregatedGroupDetails:
    """Parallel lists of details, one entry per resolved group."""

    wg: list[Any] = field(default_factory=list)
    wg_id: list[Any] = field(default_factory=list)
    wg_uri: list[Any] = field(default_factory=list)
    wg_patent_uri: list[Any] = field(default_factory=list)

    @classmethod
    def from_details(cls, details: Iterable[GroupDetails | None]) -> AggregatedGroupDetails:
        aggregated = cls()
        for item in details:
            if item is not None:
                aggregated.append(item)
        return aggregated

    def append(self, details: GroupDetails) -> None:
        self.wg.append(details.wg)
        self.wg_id.append(details.wg_id)
        self.wg_uri.append(details.wg_uri)
        self.wg_patent_uri.append(details.wg_patent_uri)

    def __len__(self) -> int:
        return len(self.wg)

    def as_config(self) -> dict[str, Any]:
        return {
            "wg": list(self.wg),
            "wgId": list(self.wg_id),
            "wgURI": list(self.wg_uri),
            "wgPatentURI": list(self.wg_patent_uri),
        }

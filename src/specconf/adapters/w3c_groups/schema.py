"""Response schema of the W3C groups lookup service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from specconf.domain.model import GroupDetails


class GroupPayload(BaseModel):
    """JSON body returned for ``GET {base}/{group}``.

    Only presence is checked: every field may be missing, and values are passed
    through exactly as the service sent them.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = None
    name: Any = None
    uri: Any = Field(default=None, alias="URI")
    patent_uri: Any = Field(default=None, alias="patentURI")

    def to_details(self) -> GroupDetails:
        return GroupDetails(
            wg=self.name,
            wg_id=self.id,
            wg_uri=self.uri,
            wg_patent_uri=self.patent_uri,
        )


def is_group_payload(payload: object) -> bool:
    """Cache predicate: only successful group bodies carry an ``id``."""

    return isinstance(payload, dict) and "id" in payload

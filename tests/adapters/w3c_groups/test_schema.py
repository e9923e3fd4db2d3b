from __future__ import annotations

import pytest
from pydantic import ValidationError

from specconf.adapters.w3c_groups.schema import GroupPayload, is_group_payload
from specconf.domain.model import GroupDetails


def test_payload_projects_to_group_details(group_payloads: dict[str, dict[str, object]]) -> None:
    payload = GroupPayload.model_validate(group_payloads["webapps"])

    assert payload.to_details() == GroupDetails(
        wg="Web Applications Working Group",
        wg_id=12,
        wg_uri="https://www.w3.org/groups/wg/webapps/",
        wg_patent_uri="https://www.w3.org/groups/wg/webapps/ipr",
    )


def test_payload_allows_extra_and_missing_keys() -> None:
    payload = GroupPayload.model_validate({"id": 7, "shortname": "tag", "type": "other"})

    details = payload.to_details()
    assert details.wg_id == 7
    assert details.wg is None
    assert details.wg_uri is None
    assert details.wg_patent_uri is None


def test_payload_rejects_non_object_bodies() -> None:
    with pytest.raises(ValidationError):
        GroupPayload.model_validate(["webapps"])


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"id": 12, "name": "Web Applications Working Group"}, True),
        ({"error": "not found"}, False),
        ([{"id": 12}], False),
        ("webapps", False),
    ],
)
def test_is_group_payload(payload: object, expected: bool) -> None:  # noqa: FBT001
    assert is_group_payload(payload) is expected


def test_payload_values_are_not_coerced() -> None:
    payload = GroupPayload.model_validate({"id": "12", "name": 5, "URI": ["a", "b"]})

    details = payload.to_details()
    assert details.wg_id == "12"
    assert details.wg == 5
    assert details.wg_uri == ["a", "b"]

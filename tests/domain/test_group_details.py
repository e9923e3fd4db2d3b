from __future__ import annotations

from specconf.domain.model import AggregatedGroupDetails, GroupDetails

WEBAPPS = GroupDetails(
    wg="Web Applications Working Group",
    wg_id=12,
    wg_uri="https://www.w3.org/groups/wg/webapps/",
    wg_patent_uri="https://www.w3.org/groups/wg/webapps/ipr",
)
CSS = GroupDetails(
    wg="Cascading Style Sheets (CSS) Working Group",
    wg_id=32061,
    wg_uri="https://www.w3.org/groups/wg/css/",
    wg_patent_uri=None,
)


def test_group_details_use_configuration_keys() -> None:
    assert WEBAPPS.as_config() == {
        "wg": "Web Applications Working Group",
        "wgId": 12,
        "wgURI": "https://www.w3.org/groups/wg/webapps/",
        "wgPatentURI": "https://www.w3.org/groups/wg/webapps/ipr",
    }


def test_aggregation_skips_missing_entries_and_keeps_order() -> None:
    aggregated = AggregatedGroupDetails.from_details([CSS, None, WEBAPPS, None])

    assert len(aggregated) == 2
    assert aggregated.as_config() == {
        "wg": ["Cascading Style Sheets (CSS) Working Group", "Web Applications Working Group"],
        "wgId": [32061, 12],
        "wgURI": ["https://www.w3.org/groups/wg/css/", "https://www.w3.org/groups/wg/webapps/"],
        "wgPatentURI": [None, "https://www.w3.org/groups/wg/webapps/ipr"],
    }


def test_aggregation_of_nothing_is_empty() -> None:
    aggregated = AggregatedGroupDetails.from_details([None, None])

    assert len(aggregated) == 0
    assert aggregated.as_config() == {"wg": [], "wgId": [], "wgURI": [], "wgPatentURI": []}

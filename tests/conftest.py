from __future__ import annotations

import pytest

from specconf.config.groups import GroupsApiConfig
from specconf.config.http_resilience import ResilienceConfig
from tests.support.groups import TEST_BASE_URL, FakeGroupsService

GroupPayloads = dict[str, dict[str, object]]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SPECCONF_GROUPS_API_URL",
        "SPECCONF_HTTP_TIMEOUT",
        "SPECCONF_HTTP_CACHE",
        "SPECCONF_DATA_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def group_payloads() -> GroupPayloads:
    return {
        "webapps": {
            "id": 12,
            "name": "Web Applications Working Group",
            "URI": "https://www.w3.org/groups/wg/webapps/",
            "patentURI": "https://www.w3.org/groups/wg/webapps/ipr",
        },
        "css": {
            "id": 32061,
            "name": "Cascading Style Sheets (CSS) Working Group",
            "URI": "https://www.w3.org/groups/wg/css/",
            "patentURI": "https://www.w3.org/groups/wg/css/ipr",
        },
        "i18n": {
            "id": 32113,
            "name": "Internationalization Working Group",
            "URI": "https://www.w3.org/groups/wg/i18n-core/",
            "patentURI": "https://www.w3.org/groups/wg/i18n-core/ipr",
        },
    }


@pytest.fixture
def groups_service(group_payloads: GroupPayloads) -> FakeGroupsService:
    return FakeGroupsService(group_payloads)


@pytest.fixture
def groups_config() -> GroupsApiConfig:
    return GroupsApiConfig(
        base_url=TEST_BASE_URL,
        resilience=ResilienceConfig(name="w3c-groups-test", cache=None),
    )

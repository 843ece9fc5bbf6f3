from __future__ import annotations

from datetime import UTC, datetime

import httpx
import pytest

from sports_data.domain.enums import ErrorCode, InjuryStatus, ProviderEnum, Sport
from sports_data.providers.api_sports.adapters.basketball import BasketballAdapter
from sports_data.providers.base.client import BaseHttpClient
from sports_data.providers.base.errors import ProviderCapabilityError
from sports_data.providers.espn.client import EspnClient, espn_league_path
from sports_data.providers.espn.injuries import (
    EspnInjuryProvider,
    extract_injury_type,
    map_injury_status,
)

NBA_INJURIES = {
    "injuries": [
        {
            "displayName": "LA Clippers",
            "injuries": [
                {
                    "id": "4001",
                    "status": "Out",
                    "shortComment": "Leonard (knee) will not play Sunday.",
                    "athlete": {"displayName": "Kawhi Leonard"},
                    "details": {"type": "Knee", "returnDate": "2025-12-01"},
                },
                {
                    "status": "Day-To-Day",
                    "shortComment": "Harden is dealing with a sore groin.",
                    "athlete": {"displayName": "James Harden"},
                },
            ],
        },
        {
            "displayName": "Boston Celtics",
            "injuries": [
                {
                    "id": "4002",
                    "status": "Questionable",
                    "shortComment": "Tatum (Achilles) is ramping up.",
                    "athlete": {"displayName": "Jayson Tatum"},
                    "details": {},
                }
            ],
        },
    ]
}


def make_provider(payload=NBA_INJURIES) -> tuple[EspnInjuryProvider, list[httpx.Request]]:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=payload)

    http = BaseHttpClient(base_url="https://espn.test", transport=httpx.MockTransport(handler))
    return EspnInjuryProvider(client=EspnClient(http=http)), calls


def test_injuries_matched_by_nickname_and_report_cached() -> None:
    provider, calls = make_provider()

    injuries = provider.injuries_for_team(
        team_id="12", team_name="Los Angeles Clippers", sport=Sport.BASKETBALL
    )
    again = provider.injuries_for_team(team_id="12", team_name="Clippers", sport=Sport.BASKETBALL)

    assert len(calls) == 1
    assert calls[0].url.path == "/basketball/nba/injuries"
    assert len(injuries) == len(again) == 2

    kawhi, harden = injuries
    assert kawhi.player_id == "4001"
    assert kawhi.status is InjuryStatus.OUT
    assert kawhi.injury_type == "Knee"
    assert kawhi.expected_return == datetime(2025, 12, 1, tzinfo=UTC)
    assert kawhi.team_name == "LA Clippers"
    assert kawhi.provider is ProviderEnum.ESPN

    assert harden.player_id == "espn_James_Harden"
    assert harden.status is InjuryStatus.DAY_TO_DAY
    assert harden.injury_type == "groin"
    assert harden.expected_return is None


def test_team_without_injuries_is_empty_not_error() -> None:
    provider, _ = make_provider()

    assert provider.injuries_for_team(team_id="2", team_name="Lakers", sport=Sport.BASKETBALL) == []


def test_status_and_type_fallbacks() -> None:
    assert map_injury_status("Doubtful") is InjuryStatus.DOUBTFUL
    assert map_injury_status("suspension") is InjuryStatus.DAY_TO_DAY
    assert map_injury_status(None) is InjuryStatus.DAY_TO_DAY
    assert extract_injury_type("Torn ACL, out for season") == "ACL"
    assert extract_injury_type("Coach's decision") == "Unspecified"


def test_soccer_has_no_espn_feed() -> None:
    with pytest.raises(ProviderCapabilityError):
        espn_league_path(Sport.SOCCER)


def test_adapter_wraps_injuries_with_espn_provider() -> None:
    provider, _ = make_provider()
    adapter = BasketballAdapter(client=None, injury_provider=provider)

    result = adapter.get_injuries("basketball-12", "LA Clippers")

    assert result.success
    assert result.metadata.provider is ProviderEnum.ESPN
    assert result.data is not None
    assert {i.team_id for i in result.data} == {"12"}


def test_adapter_reports_bad_payload_as_fetch_error() -> None:
    provider, _ = make_provider(payload={"unexpected": True})
    adapter = BasketballAdapter(client=None, injury_provider=provider)

    result = adapter.get_injuries("12", "Clippers")

    assert result.error is not None
    assert result.error.code is ErrorCode.FETCH_ERROR

from __future__ import annotations

from typing import Any

import pytest

from sports_data.domain.enums import MatchStatus
from sports_data.providers.api_sports.adapters.american_football import AmericanFootballAdapter
from sports_data.providers.api_sports.adapters.base import ApiSportsAdapter
from sports_data.providers.api_sports.adapters.basketball import BasketballAdapter
from sports_data.providers.api_sports.adapters.hockey import HockeyAdapter
from sports_data.providers.api_sports.adapters.soccer import SoccerAdapter

ADAPTERS = [
    SoccerAdapter(client=None),
    BasketballAdapter(client=None),
    HockeyAdapter(client=None),
    AmericanFootballAdapter(client=None),
]


@pytest.mark.parametrize("adapter", ADAPTERS, ids=lambda a: a.sport.value)
def test_every_defined_code_maps_to_a_known_state(adapter: ApiSportsAdapter) -> None:
    for code in adapter.status_map:
        status = adapter.map_status(code)
        assert status in MatchStatus
        assert status is not MatchStatus.UNKNOWN


@pytest.mark.parametrize("adapter", ADAPTERS, ids=lambda a: a.sport.value)
@pytest.mark.parametrize("code", ["XYZ", "", None, 42, {"short": "FT"}])
def test_unrecognized_codes_map_to_unknown(adapter: ApiSportsAdapter, code: Any) -> None:
    assert adapter.map_status(code) is MatchStatus.UNKNOWN


def test_codes_are_case_and_space_insensitive() -> None:
    assert BasketballAdapter(client=None).map_status(" ft ") is MatchStatus.FINISHED


@pytest.mark.parametrize(
    ("adapter", "code", "expected"),
    [
        (SoccerAdapter(client=None), "PEN", MatchStatus.FINISHED),
        (SoccerAdapter(client=None), "HT", MatchStatus.HALFTIME),
        (SoccerAdapter(client=None), "SUSP", MatchStatus.SUSPENDED),
        (BasketballAdapter(client=None), "AOT", MatchStatus.FINISHED),
        (BasketballAdapter(client=None), "POST", MatchStatus.POSTPONED),
        (HockeyAdapter(client=None), "AP", MatchStatus.FINISHED),
        (HockeyAdapter(client=None), "P2", MatchStatus.LIVE),
        (AmericanFootballAdapter(client=None), "PST", MatchStatus.POSTPONED),
        (AmericanFootballAdapter(client=None), "CANC", MatchStatus.CANCELLED),
    ],
)
def test_sport_specific_codes(adapter: ApiSportsAdapter, code: str, expected: MatchStatus) -> None:
    assert adapter.map_status(code) is expected


def test_adapters_without_client_are_unavailable() -> None:
    assert not SoccerAdapter(client=None).is_available()

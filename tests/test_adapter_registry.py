from __future__ import annotations

from sports_data.domain.enums import Sport
from sports_data.providers.api_sports.adapters.basketball import BasketballAdapter
from sports_data.providers.api_sports.adapters.hockey import HockeyAdapter
from sports_data.providers.api_sports.adapters.soccer import SoccerAdapter
from sports_data.providers.api_sports.client import ApiSportsClient
from sports_data.providers.api_sports.provider import build_api_sports_adapters
from sports_data.providers.base.adapter import SportAdapter
from sports_data.providers.base.client import BaseHttpClient
from sports_data.providers.base.registry import AdapterRegistry


def _client() -> ApiSportsClient:
    return ApiSportsClient(http=BaseHttpClient(base_url="https://api-sports.test"), api_key="k")


def test_registry_get_and_missing_sport() -> None:
    registry = AdapterRegistry()
    registry.register(HockeyAdapter(client=_client()))

    assert isinstance(registry.get(Sport.HOCKEY), HockeyAdapter)
    assert registry.get(Sport.SOCCER) is None


def test_available_sports_keep_registration_order_and_skip_unconfigured() -> None:
    registry = AdapterRegistry()
    registry.register(SoccerAdapter(client=_client()))
    registry.register(BasketballAdapter(client=None))
    registry.register(HockeyAdapter(client=_client()))

    assert registry.registered_sports() == [Sport.SOCCER, Sport.BASKETBALL, Sport.HOCKEY]
    assert registry.available_sports() == [Sport.SOCCER, Sport.HOCKEY]


def test_duplicate_registration_overwrites() -> None:
    registry = AdapterRegistry()
    registry.register(BasketballAdapter(client=None))
    replacement = BasketballAdapter(client=_client())
    registry.register(replacement)

    assert registry.get(Sport.BASKETBALL) is replacement
    assert registry.registered_sports() == [Sport.BASKETBALL]


def test_built_adapters_follow_startup_order_and_key() -> None:
    without_key = build_api_sports_adapters(api_key=None)
    with_key = build_api_sports_adapters(api_key="k")

    assert [a.sport for a in with_key] == [
        Sport.SOCCER,
        Sport.BASKETBALL,
        Sport.HOCKEY,
        Sport.AMERICAN_FOOTBALL,
    ]
    assert all(a.is_available() for a in with_key)
    assert all(isinstance(a, SportAdapter) for a in with_key)
    # api_key=None falls back to settings, which tests leave unset.
    assert len(without_key) == 4

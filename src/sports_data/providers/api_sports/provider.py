from __future__ import annotations

import httpx

from sports_data.cache import TTLCache
from sports_data.core.config import Settings, settings
from sports_data.domain.enums import Sport
from sports_data.providers.api_sports.adapters.american_football import AmericanFootballAdapter
from sports_data.providers.api_sports.adapters.base import ApiSportsAdapter
from sports_data.providers.api_sports.adapters.basketball import BasketballAdapter
from sports_data.providers.api_sports.adapters.hockey import HockeyAdapter
from sports_data.providers.api_sports.adapters.soccer import SoccerAdapter
from sports_data.providers.api_sports.client import ApiSportsClient
from sports_data.providers.base.client import BaseHttpClient
from sports_data.providers.base.registry import AdapterRegistry
from sports_data.providers.espn.client import EspnClient
from sports_data.providers.espn.injuries import EspnInjuryProvider

# Startup registration order.
ADAPTER_TYPES: tuple[type[ApiSportsAdapter], ...] = (
    SoccerAdapter,
    BasketballAdapter,
    HockeyAdapter,
    AmericanFootballAdapter,
)


def _base_url(cfg: Settings, sport: Sport) -> str:
    return {
        Sport.SOCCER: cfg.api_sports_football_base_url,
        Sport.BASKETBALL: cfg.api_sports_basketball_base_url,
        Sport.HOCKEY: cfg.api_sports_hockey_base_url,
        Sport.AMERICAN_FOOTBALL: cfg.api_sports_american_football_base_url,
    }[sport]


def _http(cfg: Settings, base_url: str, transport: httpx.BaseTransport | None) -> BaseHttpClient:
    return BaseHttpClient(
        base_url=base_url,
        timeout_s=cfg.http_timeout_s,
        connect_timeout_s=cfg.http_connect_timeout_s,
        transport=transport,
    )


def build_espn_injury_provider(
    *, cfg: Settings = settings, transport: httpx.BaseTransport | None = None
) -> EspnInjuryProvider:
    client = EspnClient(http=_http(cfg, cfg.espn_base_url, transport))
    return EspnInjuryProvider(client=client, cache=TTLCache(ttl_s=float(cfg.injury_cache_ttl_s)))


def build_api_sports_adapters(
    *,
    cfg: Settings = settings,
    api_key: str | None = None,
    injury_provider: EspnInjuryProvider | None = None,
    transport: httpx.BaseTransport | None = None,
) -> list[ApiSportsAdapter]:
    """
    One adapter per sport. Without a key the adapters are still built, but
    report is_available() == False.
    """

    key = api_key or cfg.api_sports_key

    adapters: list[ApiSportsAdapter] = []
    for adapter_type in ADAPTER_TYPES:
        sport = adapter_type.sport
        client = None
        if key:
            client = ApiSportsClient(http=_http(cfg, _base_url(cfg, sport), transport), api_key=key)
        # ESPN only covers the north-american leagues.
        injuries = injury_provider if sport is not Sport.SOCCER else None
        adapters.append(adapter_type(client=client, injury_provider=injuries))
    return adapters


def register_api_sports_adapters(
    registry: AdapterRegistry,
    *,
    cfg: Settings = settings,
    api_key: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> None:
    injury_provider = build_espn_injury_provider(cfg=cfg, transport=transport)
    for adapter in build_api_sports_adapters(
        cfg=cfg, api_key=api_key, injury_provider=injury_provider, transport=transport
    ):
        registry.register(adapter)

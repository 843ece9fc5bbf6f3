from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import httpx

from sports_data.cache import TTLCache, make_cache_key
from sports_data.core.config import settings
from sports_data.domain.entities import (
    EnrichedMatchData,
    HeadToHead,
    Injury,
    Match,
    Odds,
    Player,
    RecentGames,
    Team,
    TeamStats,
    UpcomingEvent,
)
from sports_data.domain.enums import ErrorCode, ProviderEnum, Sport
from sports_data.domain.queries import (
    EnrichmentOptions,
    H2HQuery,
    MatchQuery,
    StatsQuery,
    TeamQuery,
)
from sports_data.domain.response import DataLayerResponse
from sports_data.providers.api_sports.leagues import odds_sport_key
from sports_data.providers.api_sports.provider import register_api_sports_adapters
from sports_data.providers.base.adapter import SportAdapter
from sports_data.providers.base.client import BaseHttpClient
from sports_data.providers.base.errors import ProviderCapabilityError, ProviderError
from sports_data.providers.base.registry import AdapterRegistry
from sports_data.providers.odds_api.client import OddsApiClient
from sports_data.providers.odds_api.parser import (
    find_event,
    parse_event_odds,
    parse_upcoming_event,
)
from sports_data.resolution.resolver import resolve_team_name

from .config import DataLayerConfig
from .enrichment import MAX_WORKERS, enrich_match

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ODDS_REGIONS = ("eu", "us")
DEFAULT_ODDS_MARKETS = ("h2h", "spreads", "totals")


def _as_sport(value: Sport | str) -> Sport | None:
    try:
        return Sport(value)
    except ValueError:
        return None


def _odds_names(name: str, sport: Sport) -> list[str]:
    """The caller's spelling plus the canonical full name the odds feed uses."""

    names = [name]
    canonical = resolve_team_name(name, sport)
    if canonical.lower() != name.strip().lower():
        names.append(canonical)
    return names


class DataLayer:
    """
    Single entry point for sports data.

    Every public method returns a DataLayerResponse and never raises for
    expected absence. Successful envelopes are cached; a hit comes back
    with metadata.cached set.
    """

    def __init__(
        self,
        *,
        registry: AdapterRegistry,
        odds_client: OddsApiClient | None = None,
        config: DataLayerConfig | None = None,
        cache: TTLCache | None = None,
        max_workers: int = MAX_WORKERS,
    ) -> None:
        self.config = config or DataLayerConfig()
        self.registry = registry
        self.odds_client = odds_client
        self.cache = cache or TTLCache(
            ttl_s=float(self.config.cache_ttl_s), enabled=self.config.enable_caching
        )
        self.max_workers = max_workers

    # -----------------------------
    # Plumbing
    # -----------------------------

    def _log(self, method: str, params: Any) -> None:
        if self.config.log_requests:
            logger.info("%s %s", method, params)

    def _cached_call(
        self, method: str, params: Any, fetch: Callable[[], DataLayerResponse[T]]
    ) -> DataLayerResponse[T]:
        key = make_cache_key(method, params)
        cached = self.cache.get(key)
        if cached is not None:
            if self.config.log_requests:
                logger.info("cache hit %s", key)
            return cached.as_cached()

        self._log(method, params)
        result = fetch()
        if result.success:
            self.cache.set(key, result)
        return result

    def _adapter(self, sport: Sport | str) -> SportAdapter | None:
        s = _as_sport(sport)
        if s is None:
            return None
        adapter = self.registry.get(s)
        if adapter is None or not adapter.is_available():
            return None
        return adapter

    def _adapter_call(
        self,
        method: str,
        sport: Sport | str,
        params: Any,
        call: Callable[[SportAdapter], DataLayerResponse[T]],
    ) -> DataLayerResponse[T]:
        def fetch() -> DataLayerResponse[T]:
            adapter = self._adapter(sport)
            if adapter is None:
                return DataLayerResponse.fail(
                    ErrorCode.SPORT_NOT_SUPPORTED,
                    f"Sport '{sport}' is not supported or not configured",
                    provider=ProviderEnum.NONE,
                )
            try:
                return call(adapter)
            except ProviderCapabilityError as e:
                return DataLayerResponse.fail(
                    ErrorCode.NOT_SUPPORTED, str(e), provider=adapter.provider
                )
            except Exception as e:
                logger.exception("%s failed for sport=%s", method, sport)
                return DataLayerResponse.fail(
                    ErrorCode.API_ERROR, str(e) or type(e).__name__, provider=adapter.provider
                )

        return self._cached_call(method, params, fetch)

    # -----------------------------
    # Adapter-backed reads
    # -----------------------------

    def find_team(self, query: TeamQuery) -> DataLayerResponse[Team]:
        return self._adapter_call("find_team", query.sport, query, lambda a: a.find_team(query))

    def get_matches(self, query: MatchQuery) -> DataLayerResponse[list[Match]]:
        return self._adapter_call(
            "get_matches", query.sport, query, lambda a: a.get_matches(query)
        )

    def get_team_stats(self, query: StatsQuery) -> DataLayerResponse[TeamStats]:
        return self._adapter_call(
            "get_team_stats", query.sport, query, lambda a: a.get_team_stats(query)
        )

    def get_recent_games(
        self,
        sport: Sport | str,
        team_id: str,
        limit: int = 5,
        league_id: int | None = None,
    ) -> DataLayerResponse[RecentGames]:
        params = {"sport": sport, "team_id": team_id, "limit": limit, "league_id": league_id}
        return self._adapter_call(
            "get_recent_games",
            sport,
            params,
            lambda a: a.get_recent_games(team_id, limit=limit, league_id=league_id),
        )

    def get_h2h(self, query: H2HQuery) -> DataLayerResponse[HeadToHead]:
        return self._adapter_call("get_h2h", query.sport, query, lambda a: a.get_h2h(query))

    def get_injuries(
        self, sport: Sport | str, team_id: str, team_name: str | None = None
    ) -> DataLayerResponse[list[Injury]]:
        params = {"sport": sport, "team_id": team_id, "team_name": team_name}
        return self._adapter_call(
            "get_injuries", sport, params, lambda a: a.get_injuries(team_id, team_name)
        )

    def get_team_roster(self, sport: Sport | str, team_id: str) -> DataLayerResponse[list[Player]]:
        params = {"sport": sport, "team_id": team_id}
        return self._adapter_call(
            "get_team_roster", sport, params, lambda a: a.get_team_roster(team_id)
        )

    # -----------------------------
    # Odds (not adapter based)
    # -----------------------------

    def get_odds(
        self,
        sport: Sport | str,
        home_team: str,
        away_team: str,
        *,
        regions: Sequence[str] = DEFAULT_ODDS_REGIONS,
        markets: Sequence[str] = DEFAULT_ODDS_MARKETS,
        sport_key: str | None = None,
        league_id: int | None = None,
    ) -> DataLayerResponse[list[Odds]]:
        s = _as_sport(sport)
        if s is None:
            return DataLayerResponse.fail(
                ErrorCode.SPORT_NOT_SUPPORTED,
                f"Sport '{sport}' is not supported",
                provider=ProviderEnum.ODDS_API,
            )

        key = sport_key or odds_sport_key(s, league_id)
        params = {
            "sport_key": key,
            "home_team": home_team,
            "away_team": away_team,
            "regions": list(regions),
            "markets": list(markets),
        }

        def fetch() -> DataLayerResponse[list[Odds]]:
            if self.odds_client is None:
                return DataLayerResponse.fail(
                    ErrorCode.API_NOT_CONFIGURED,
                    "The Odds API key is not configured",
                    provider=ProviderEnum.ODDS_API,
                )
            try:
                result = self.odds_client.get_odds(sport_key=key, regions=regions, markets=markets)
            except ProviderError as e:
                logger.warning("Odds fetch failed for %s: %s", key, e)
                return DataLayerResponse.fail(
                    ErrorCode.API_ERROR, str(e), provider=ProviderEnum.ODDS_API
                )

            if not result.items:
                return DataLayerResponse.fail(
                    ErrorCode.NO_ODDS_FOUND,
                    f"No odds available for {key}",
                    provider=ProviderEnum.ODDS_API,
                )

            # The caller's spelling first; the canonical name only when it finds nothing.
            home_names, away_names = [home_team], [away_team]
            event = find_event(result.items, home_names=home_names, away_names=away_names)
            if event is None:
                home_names = _odds_names(home_team, s)
                away_names = _odds_names(away_team, s)
                event = find_event(result.items, home_names=home_names, away_names=away_names)
            if event is None or not event.get("bookmakers"):
                return DataLayerResponse.fail(
                    ErrorCode.MATCH_NOT_FOUND,
                    f"Could not find odds for {home_team} vs {away_team}",
                    provider=ProviderEnum.ODDS_API,
                )

            odds = parse_event_odds(event, sport=s, home_names=home_names, away_names=away_names)
            return DataLayerResponse.ok(
                odds,
                provider=ProviderEnum.ODDS_API,
                quota_used=result.requests_used,
                quota_remaining=result.requests_remaining,
            )

        return self._cached_call("get_odds", params, fetch)

    def get_upcoming_events(self, sport_key: str) -> DataLayerResponse[list[UpcomingEvent]]:
        def fetch() -> DataLayerResponse[list[UpcomingEvent]]:
            if self.odds_client is None:
                return DataLayerResponse.fail(
                    ErrorCode.API_NOT_CONFIGURED,
                    "The Odds API key is not configured",
                    provider=ProviderEnum.ODDS_API,
                )
            try:
                result = self.odds_client.get_events(sport_key=sport_key)
            except ProviderError as e:
                logger.warning("Event fetch failed for %s: %s", sport_key, e)
                return DataLayerResponse.fail(
                    ErrorCode.API_ERROR, str(e), provider=ProviderEnum.ODDS_API
                )

            events = [parse_upcoming_event(i, sport_key=sport_key) for i in result.items]
            # The events endpoint is free.
            return DataLayerResponse.ok(
                events,
                provider=ProviderEnum.ODDS_API,
                quota_used=0,
                quota_remaining=result.requests_remaining,
            )

        return self._cached_call("get_upcoming_events", {"sport_key": sport_key}, fetch)

    # -----------------------------
    # Composite
    # -----------------------------

    def get_enriched_match_data(
        self,
        sport: Sport | str,
        home_team: str,
        away_team: str,
        options: EnrichmentOptions | None = None,
    ) -> DataLayerResponse[EnrichedMatchData]:
        s = _as_sport(sport)
        if s is None or self._adapter(s) is None:
            return DataLayerResponse.fail(
                ErrorCode.SPORT_NOT_SUPPORTED,
                f"Sport '{sport}' is not supported or not configured",
                provider=ProviderEnum.NONE,
            )
        self._log("get_enriched_match_data", {"sport": s, "home": home_team, "away": away_team})
        return enrich_match(self, s, home_team, away_team, options, max_workers=self.max_workers)

    # -----------------------------
    # Introspection & cache control
    # -----------------------------

    def get_available_sports(self) -> list[Sport]:
        return self.registry.available_sports()

    def is_sport_available(self, sport: Sport | str) -> bool:
        return self._adapter(sport) is not None

    def clear_cache(self) -> None:
        self.cache.clear()
        self._log("clear_cache", {})

    def cache_stats(self) -> dict[str, Any]:
        return self.cache.stats()

    def invalidate(self, method: str, params: Any) -> bool:
        return self.cache.invalidate(make_cache_key(method, params))


def create_data_layer(
    config: DataLayerConfig | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> DataLayer:
    """A fresh DataLayer wired to the configured providers."""

    registry = AdapterRegistry()
    register_api_sports_adapters(registry, transport=transport)

    odds_client = None
    if settings.odds_api_key:
        odds_client = OddsApiClient(
            http=BaseHttpClient(
                base_url=settings.odds_api_base_url,
                timeout_s=settings.http_timeout_s,
                connect_timeout_s=settings.http_connect_timeout_s,
                transport=transport,
            ),
            api_key=settings.odds_api_key,
        )

    return DataLayer(
        registry=registry,
        odds_client=odds_client,
        config=config or DataLayerConfig.from_settings(),
    )


_instance: DataLayer | None = None
_instance_lock = threading.Lock()


def get_data_layer(config: DataLayerConfig | None = None) -> DataLayer:
    """Process-wide DataLayer; `config` only applies to the first call."""

    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = create_data_layer(config)
        return _instance

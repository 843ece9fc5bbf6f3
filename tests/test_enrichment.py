from __future__ import annotations

import threading
from typing import Any

from sports_data.data_layer.enrichment import enrich_match, placeholder_team
from sports_data.domain.entities import Team
from sports_data.domain.enums import ErrorCode, ProviderEnum, Sport
from sports_data.domain.queries import EnrichmentOptions, H2HQuery, StatsQuery, TeamQuery
from sports_data.domain.response import DataLayerResponse

KNOWN = {"Lakers": "145", "Celtics": "133"}


def ok(data: Any) -> DataLayerResponse[Any]:
    return DataLayerResponse.ok(data, provider=ProviderEnum.API_SPORTS)


def fail(code: ErrorCode = ErrorCode.FETCH_ERROR) -> DataLayerResponse[Any]:
    return DataLayerResponse.fail(code, "nope", provider=ProviderEnum.API_SPORTS)


class RecordingLayer:
    """Stands in for DataLayer; records every sub-fetch made by enrichment."""

    def __init__(self, *, failing: set[str] = frozenset(), raising: set[str] = frozenset()) -> None:
        self.failing = failing
        self.raising = raising
        self.calls: list[tuple[str, Any]] = []
        self._lock = threading.Lock()

    def _record(self, name: str, arg: Any) -> DataLayerResponse[Any]:
        with self._lock:
            self.calls.append((name, arg))
        if name in self.raising:
            raise RuntimeError(f"{name} exploded")
        if name in self.failing:
            return fail()
        return ok(f"{name}:{arg}")

    def find_team(self, query: TeamQuery) -> DataLayerResponse[Team]:
        ext = KNOWN.get(str(query.name))
        if ext is None:
            return fail(ErrorCode.TEAM_NOT_FOUND)
        return ok(
            Team(
                id=f"basketball-{ext}",
                external_id=ext,
                name=f"{query.name} FC",
                short_name=str(query.name),
                sport=query.sport,
                league="NBA",
            )
        )

    def get_team_stats(self, query: StatsQuery) -> DataLayerResponse[Any]:
        return self._record("stats", query.team_id)

    def get_recent_games(self, sport: Sport, team_id: str, limit: int = 5) -> DataLayerResponse[Any]:
        return self._record("games", team_id)

    def get_injuries(self, sport: Sport, team_id: str, team_name: str | None = None) -> DataLayerResponse[Any]:
        with self._lock:
            self.calls.append(("injuries", team_id))
        return ok([f"injury:{team_id}"])

    def get_h2h(self, query: H2HQuery) -> DataLayerResponse[Any]:
        return self._record("h2h", query)


def test_full_enrichment() -> None:
    layer = RecordingLayer()

    result = enrich_match(layer, Sport.BASKETBALL, "Lakers", "Celtics")  # type: ignore[arg-type]

    assert result.success
    data = result.data
    assert data is not None
    assert data.match.id == "basketball-145-133"
    assert data.match.league == "NBA"
    assert data.home.stats == "stats:145"
    assert data.away.recent_games == "games:133"
    assert data.home.injuries == ("injury:145",)
    assert not data.home.is_placeholder

    (h2h_query,) = [arg for name, arg in layer.calls if name == "h2h"]
    # Resolved ids go straight to H2H so names are not looked up twice.
    assert (h2h_query.team1_id, h2h_query.team2_id) == ("145", "133")
    assert h2h_query.limit == 5


def test_neither_team_found() -> None:
    layer = RecordingLayer()

    result = enrich_match(layer, Sport.BASKETBALL, "Isotopes", "Shelbyville")  # type: ignore[arg-type]

    assert result.error is not None
    assert result.error.code is ErrorCode.TEAMS_NOT_FOUND
    assert layer.calls == []


def test_unresolved_side_gets_placeholder_and_no_fetches() -> None:
    layer = RecordingLayer()

    result = enrich_match(layer, Sport.BASKETBALL, "Lakers", "Springfield Isotopes")  # type: ignore[arg-type]

    assert result.data is not None
    away = result.data.away
    assert away.is_placeholder
    assert away.team.id == "placeholder-springfield-isotopes"
    assert away.team.external_id == "0"
    assert away.team.short_name == "Isotopes"
    assert away.stats is None and away.recent_games is None and away.injuries is None
    assert result.data.h2h is None

    fetched_ids = {arg for name, arg in layer.calls if name != "h2h"}
    assert fetched_ids == {"145"}


def test_failed_or_raising_sub_fetch_leaves_field_empty() -> None:
    layer = RecordingLayer(failing={"stats"}, raising={"h2h"})

    result = enrich_match(layer, Sport.BASKETBALL, "Lakers", "Celtics")  # type: ignore[arg-type]

    assert result.success
    assert result.data is not None
    assert result.data.home.stats is None
    assert result.data.away.stats is None
    assert result.data.h2h is None
    assert result.data.home.recent_games == "games:145"


def test_options_switch_sub_fetches_off() -> None:
    layer = RecordingLayer()
    options = EnrichmentOptions(include_stats=False, include_injuries=False, include_h2h=False)

    result = enrich_match(layer, Sport.BASKETBALL, "Lakers", "Celtics", options)  # type: ignore[arg-type]

    assert result.success
    assert {name for name, _ in layer.calls} == {"games"}
    assert result.data is not None
    assert result.data.home.injuries is None


def test_placeholder_team_slug() -> None:
    team = placeholder_team("  Real  Sociedad ", Sport.SOCCER)

    assert team.id == "placeholder-real-sociedad"
    assert team.sport is Sport.SOCCER

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, ClassVar

from sports_data.domain.entities import (
    Match,
    PeriodScore,
    Score,
    Scoring,
    TeamRecord,
    TeamStats,
)
from sports_data.domain.enums import MatchStatus, Sport
from sports_data.domain.queries import StatsQuery
from sports_data.domain.response import DataLayerResponse
from sports_data.providers.api_sports.client import ApiItem
from sports_data.providers.api_sports.leagues import LeagueInfo

from .base import ApiSportsAdapter, as_float, as_int, dig, form_of, win_rate

BASKETBALL_STATUS_MAP: dict[str, MatchStatus] = {
    "NS": MatchStatus.SCHEDULED,
    "Q1": MatchStatus.LIVE,
    "Q2": MatchStatus.LIVE,
    "Q3": MatchStatus.LIVE,
    "Q4": MatchStatus.LIVE,
    "OT": MatchStatus.LIVE,
    "BT": MatchStatus.LIVE,
    "LIVE": MatchStatus.LIVE,
    "HT": MatchStatus.HALFTIME,
    "FT": MatchStatus.FINISHED,
    "AOT": MatchStatus.FINISHED,
    "POST": MatchStatus.POSTPONED,
    "CANC": MatchStatus.CANCELLED,
    "SUSP": MatchStatus.SUSPENDED,
}

_QUARTERS = ("quarter_1", "quarter_2", "quarter_3", "quarter_4", "over_time")


def quarter_scores(home: Any, away: Any) -> tuple[PeriodScore, ...]:
    periods: list[PeriodScore] = []
    for key in _QUARTERS:
        h = as_int(dig(home, key))
        a = as_int(dig(away, key))
        if h is None or a is None:
            continue
        periods.append(PeriodScore(home=h, away=a))
    return tuple(periods)


@dataclass(frozen=True)
class BasketballAdapter(ApiSportsAdapter):
    """API-Basketball (v1). Injuries come from ESPN."""

    sport: ClassVar[Sport] = Sport.BASKETBALL
    status_map: ClassVar[dict[str, MatchStatus]] = BASKETBALL_STATUS_MAP
    roster_path: ClassVar[str | None] = "/players"

    def _status_code(self, game: ApiItem) -> Any:
        return dig(game, "status", "short")

    def _timestamp(self, game: ApiItem) -> int:
        return as_int(game.get("timestamp")) or 0

    def _transform_match(self, game: ApiItem, league: LeagueInfo) -> Match:
        ext = str(game.get("id"))
        home = dig(game, "scores", "home") or {}
        away = dig(game, "scores", "away") or {}
        home_total = as_int(dig(home, "total"))
        away_total = as_int(dig(away, "total"))

        score = None
        if home_total is not None and away_total is not None:
            score = Score(home=home_total, away=away_total, periods=quarter_scores(home, away))

        game_league = game.get("league") or {}
        venue = game.get("venue")
        return Match(
            id=f"{self.sport.value}-{ext}",
            external_id=ext,
            sport=self.sport,
            league=str(game_league.get("name") or league.name),
            league_id=str(game_league.get("id") or league.provider_league_id),
            season=str(game_league.get("season") or ""),
            home_team=self._transform_team(dig(game, "teams", "home") or {}),
            away_team=self._transform_team(dig(game, "teams", "away") or {}),
            status=self.map_status(self._status_code(game)),
            date=datetime.fromtimestamp(self._timestamp(game), tz=UTC),
            score=score,
            venue=venue if isinstance(venue, str) else dig(venue, "name"),
            provider=self.provider,
        )

    def get_team_stats(self, query: StatsQuery) -> DataLayerResponse[TeamStats]:
        return self._stats_from(query, self._season_statistics, self._standings)

    def _season_statistics(
        self, team_id: str, league: LeagueInfo, season: str
    ) -> tuple[TeamStats | None, int | None]:
        page = self._api().get_page(
            "/statistics",
            {"league": league.provider_league_id, "season": season, "team": team_id},
        )
        raw = page.items[0] if page.items and isinstance(page.items[0], dict) else None
        played = as_int(dig(raw, "games", "played", "all")) if raw else None
        if not raw or not played:
            return None, page.requests_remaining

        wins = as_int(dig(raw, "games", "wins", "all", "total")) or 0
        losses = as_int(dig(raw, "games", "loses", "all", "total")) or 0
        points_for = dig(raw, "points", "for") or {}
        points_against = dig(raw, "points", "against") or {}

        stats = TeamStats(
            team_id=team_id,
            season=season,
            league=league.name,
            sport=self.sport,
            record=TeamRecord(wins=wins, losses=losses, win_percentage=win_rate(wins, played)),
            scoring=Scoring(
                total_for=as_int(dig(points_for, "total", "all")) or 0,
                total_against=as_int(dig(points_against, "total", "all")) or 0,
                average_for=as_float(dig(points_for, "average", "all")),
                average_against=as_float(dig(points_against, "average", "all")),
                home_for=as_int(dig(points_for, "total", "home")),
                home_against=as_int(dig(points_against, "total", "home")),
                away_for=as_int(dig(points_for, "total", "away")),
                away_against=as_int(dig(points_against, "total", "away")),
            ),
            provider=self.provider,
        )
        return stats, page.requests_remaining

    def _standings(
        self, team_id: str, league: LeagueInfo, season: str
    ) -> tuple[TeamStats | None, int | None]:
        row, remaining = self._standings_row(team_id, league, season)
        if row is None:
            return None, remaining

        wins = as_int(dig(row, "games", "win", "total")) or 0
        losses = as_int(dig(row, "games", "lose", "total")) or 0
        played = as_int(dig(row, "games", "played")) or wins + losses
        points_for = as_int(dig(row, "points", "for")) or 0
        points_against = as_int(dig(row, "points", "against")) or 0

        stats = TeamStats(
            team_id=team_id,
            season=season,
            league=league.name,
            sport=self.sport,
            record=TeamRecord(wins=wins, losses=losses, win_percentage=win_rate(wins, played)),
            scoring=Scoring(
                total_for=points_for,
                total_against=points_against,
                average_for=points_for / played if played else 0.0,
                average_against=points_against / played if played else 0.0,
            ),
            form=form_of(row.get("form")),
            provider=self.provider,
        )
        return stats, remaining

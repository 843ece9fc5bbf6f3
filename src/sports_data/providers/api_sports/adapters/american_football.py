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

from .base import ApiSportsAdapter, as_int, dig, win_rate

AMERICAN_FOOTBALL_STATUS_MAP: dict[str, MatchStatus] = {
    "NS": MatchStatus.SCHEDULED,
    "Q1": MatchStatus.LIVE,
    "Q2": MatchStatus.LIVE,
    "Q3": MatchStatus.LIVE,
    "Q4": MatchStatus.LIVE,
    "OT": MatchStatus.LIVE,
    "LIVE": MatchStatus.LIVE,
    "HT": MatchStatus.HALFTIME,
    "FT": MatchStatus.FINISHED,
    "AOT": MatchStatus.FINISHED,
    "PST": MatchStatus.POSTPONED,
    "CANC": MatchStatus.CANCELLED,
}

_QUARTERS = ("quarter_1", "quarter_2", "quarter_3", "quarter_4", "overtime")


@dataclass(frozen=True)
class AmericanFootballAdapter(ApiSportsAdapter):
    """API-American-Football (v1). Stats come from standings; injuries from ESPN."""

    sport: ClassVar[Sport] = Sport.AMERICAN_FOOTBALL
    status_map: ClassVar[dict[str, MatchStatus]] = AMERICAN_FOOTBALL_STATUS_MAP
    roster_path: ClassVar[str | None] = "/players"

    def _status_code(self, game: ApiItem) -> Any:
        return dig(game, "game", "status", "short")

    def _timestamp(self, game: ApiItem) -> int:
        return as_int(dig(game, "game", "date", "timestamp")) or 0

    def _transform_match(self, game: ApiItem, league: LeagueInfo) -> Match:
        ext = str(dig(game, "game", "id"))
        home = dig(game, "scores", "home") or {}
        away = dig(game, "scores", "away") or {}
        home_total = as_int(dig(home, "total"))
        away_total = as_int(dig(away, "total"))

        score = None
        if home_total is not None and away_total is not None:
            periods = []
            for key in _QUARTERS:
                h, a = as_int(dig(home, key)), as_int(dig(away, key))
                if h is not None and a is not None:
                    periods.append(PeriodScore(home=h, away=a))
            score = Score(home=home_total, away=away_total, periods=tuple(periods))

        game_league = game.get("league") or {}
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
            venue=dig(game, "game", "venue", "name"),
            provider=self.provider,
        )

    def get_team_stats(self, query: StatsQuery) -> DataLayerResponse[TeamStats]:
        return self._stats_from(query, self._standings)

    def _standings(
        self, team_id: str, league: LeagueInfo, season: str
    ) -> tuple[TeamStats | None, int | None]:
        row, remaining = self._standings_row(team_id, league, season)
        if row is None:
            return None, remaining

        wins = as_int(row.get("won")) or 0
        losses = as_int(row.get("lost")) or 0
        ties = as_int(row.get("ties")) or 0
        played = wins + losses + ties
        points_for = as_int(dig(row, "points", "for")) or 0
        points_against = as_int(dig(row, "points", "against")) or 0

        stats = TeamStats(
            team_id=team_id,
            season=season,
            league=league.name,
            sport=self.sport,
            record=TeamRecord(
                wins=wins, losses=losses, draws=ties, win_percentage=win_rate(wins, played)
            ),
            scoring=Scoring(
                total_for=points_for,
                total_against=points_against,
                average_for=points_for / played if played else 0.0,
                average_against=points_against / played if played else 0.0,
            ),
            provider=self.provider,
        )
        return stats, remaining

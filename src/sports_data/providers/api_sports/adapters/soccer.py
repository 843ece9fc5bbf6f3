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


SOCCER_STATUS_MAP: dict[str, MatchStatus] = {
    "TBD": MatchStatus.SCHEDULED,
    "NS": MatchStatus.SCHEDULED,
    "1H": MatchStatus.LIVE,
    "2H": MatchStatus.LIVE,
    "ET": MatchStatus.LIVE,
    "BT": MatchStatus.LIVE,
    "P": MatchStatus.LIVE,
    "LIVE": MatchStatus.LIVE,
    "INT": MatchStatus.LIVE,
    "HT": MatchStatus.HALFTIME,
    "FT": MatchStatus.FINISHED,
    "AET": MatchStatus.FINISHED,
    "PEN": MatchStatus.FINISHED,
    "AWD": MatchStatus.FINISHED,
    "WO": MatchStatus.FINISHED,
    "PST": MatchStatus.POSTPONED,
    "CANC": MatchStatus.CANCELLED,
    "ABD": MatchStatus.CANCELLED,
    "SUSP": MatchStatus.SUSPENDED,
}


@dataclass(frozen=True)
class SoccerAdapter(ApiSportsAdapter):
    """API-Football (v3). No injury source; squads come from /players/squads."""

    sport: ClassVar[Sport] = Sport.SOCCER
    status_map: ClassVar[dict[str, MatchStatus]] = SOCCER_STATUS_MAP

    games_path: ClassVar[str] = "/fixtures"
    h2h_path: ClassVar[str] = "/fixtures/headtohead"
    roster_path: ClassVar[str | None] = "/players/squads"
    h2h_uses_season: ClassVar[bool] = False

    def _team_payload(self, item: ApiItem) -> ApiItem | None:
        team = item.get("team") if isinstance(item, dict) else None
        return team if isinstance(team, dict) else None

    def _h2h_params(
        self, team1_id: str, team2_id: str, league: LeagueInfo, season: str, limit: int
    ) -> dict[str, Any]:
        # Head-to-head spans competitions; `last` returns played fixtures only.
        return {"h2h": f"{team1_id}-{team2_id}", "last": limit}

    def _roster_params(self, team_id: str, league: LeagueInfo) -> dict[str, Any]:
        return {"team": team_id}

    def _roster_items(self, items: list[ApiItem]) -> list[ApiItem]:
        players: list[ApiItem] = []
        for squad in items:
            if isinstance(squad, dict):
                players.extend(p for p in squad.get("players") or [] if isinstance(p, dict))
        return players

    def _status_code(self, game: ApiItem) -> Any:
        return dig(game, "fixture", "status", "short")

    def _timestamp(self, game: ApiItem) -> int:
        return as_int(dig(game, "fixture", "timestamp")) or 0

    def _transform_match(self, game: ApiItem, league: LeagueInfo) -> Match:
        fixture = game.get("fixture") or {}
        ext = str(fixture.get("id"))
        home_goals = as_int(dig(game, "goals", "home"))
        away_goals = as_int(dig(game, "goals", "away"))

        score = None
        if home_goals is not None and away_goals is not None:
            periods: tuple[PeriodScore, ...] = ()
            ht_home = as_int(dig(game, "score", "halftime", "home"))
            ht_away = as_int(dig(game, "score", "halftime", "away"))
            if ht_home is not None and ht_away is not None:
                periods = (
                    PeriodScore(home=ht_home, away=ht_away),
                    PeriodScore(home=home_goals - ht_home, away=away_goals - ht_away),
                )
            score = Score(home=home_goals, away=away_goals, periods=periods)

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
            venue=dig(fixture, "venue", "name"),
            provider=self.provider,
        )

    def get_team_stats(self, query: StatsQuery) -> DataLayerResponse[TeamStats]:
        return self._stats_from(query, self._season_statistics)

    def _season_statistics(
        self, team_id: str, league: LeagueInfo, season: str
    ) -> tuple[TeamStats | None, int | None]:
        page = self._api().get_page(
            "/teams/statistics",
            {"league": league.provider_league_id, "season": season, "team": team_id},
        )
        if not page.items or not isinstance(page.items[0], dict):
            return None, page.requests_remaining
        raw = page.items[0]

        played = as_int(dig(raw, "fixtures", "played", "total")) or 0
        wins = as_int(dig(raw, "fixtures", "wins", "total")) or 0
        draws = as_int(dig(raw, "fixtures", "draws", "total")) or 0
        losses = as_int(dig(raw, "fixtures", "loses", "total")) or 0
        goals_for = dig(raw, "goals", "for") or {}
        goals_against = dig(raw, "goals", "against") or {}

        stats = TeamStats(
            team_id=team_id,
            season=season,
            league=league.name,
            sport=self.sport,
            record=TeamRecord(
                wins=wins, losses=losses, draws=draws, win_percentage=win_rate(wins, played)
            ),
            scoring=Scoring(
                total_for=as_int(dig(goals_for, "total", "total")) or 0,
                total_against=as_int(dig(goals_against, "total", "total")) or 0,
                average_for=as_float(dig(goals_for, "average", "total")),
                average_against=as_float(dig(goals_against, "average", "total")),
                home_for=as_int(dig(goals_for, "total", "home")),
                home_against=as_int(dig(goals_against, "total", "home")),
                away_for=as_int(dig(goals_for, "total", "away")),
                away_against=as_int(dig(goals_against, "total", "away")),
            ),
            form=form_of(raw.get("form")),
            provider=self.provider,
        )
        return stats, page.requests_remaining

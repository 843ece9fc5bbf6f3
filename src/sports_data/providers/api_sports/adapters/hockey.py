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

HOCKEY_STATUS_MAP: dict[str, MatchStatus] = {
    "NS": MatchStatus.SCHEDULED,
    "P1": MatchStatus.LIVE,
    "P2": MatchStatus.LIVE,
    "P3": MatchStatus.LIVE,
    "OT": MatchStatus.LIVE,
    "PT": MatchStatus.LIVE,
    "BT": MatchStatus.LIVE,
    "LIVE": MatchStatus.LIVE,
    "INTR": MatchStatus.LIVE,
    "FT": MatchStatus.FINISHED,
    "AOT": MatchStatus.FINISHED,
    "AP": MatchStatus.FINISHED,
    "POST": MatchStatus.POSTPONED,
    "CANC": MatchStatus.CANCELLED,
    "ABD": MatchStatus.CANCELLED,
}

_PERIODS = ("first", "second", "third", "overtime")


def parse_period(value: Any) -> PeriodScore | None:
    """Periods come as "1-0" strings, or {"home": 1, "away": 0} on some feeds."""
    if isinstance(value, dict):
        h, a = as_int(value.get("home")), as_int(value.get("away"))
    elif isinstance(value, str) and "-" in value:
        left, _, right = value.partition("-")
        h, a = as_int(left), as_int(right)
    else:
        return None
    if h is None or a is None:
        return None
    return PeriodScore(home=h, away=a)


@dataclass(frozen=True)
class HockeyAdapter(ApiSportsAdapter):
    """API-Hockey (v1). Injuries come from ESPN; no roster source."""

    sport: ClassVar[Sport] = Sport.HOCKEY
    status_map: ClassVar[dict[str, MatchStatus]] = HOCKEY_STATUS_MAP

    def _status_code(self, game: ApiItem) -> Any:
        return dig(game, "status", "short")

    def _timestamp(self, game: ApiItem) -> int:
        return as_int(game.get("timestamp")) or 0

    def _transform_match(self, game: ApiItem, league: LeagueInfo) -> Match:
        ext = str(game.get("id"))
        home_goals = as_int(dig(game, "scores", "home"))
        away_goals = as_int(dig(game, "scores", "away"))

        score = None
        if home_goals is not None and away_goals is not None:
            raw_periods = game.get("periods") or {}
            periods = tuple(
                p for p in (parse_period(raw_periods.get(k)) for k in _PERIODS) if p is not None
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
            provider=self.provider,
        )

    def get_team_stats(self, query: StatsQuery) -> DataLayerResponse[TeamStats]:
        return self._stats_from(query, self._season_statistics, self._standings)

    def _season_statistics(
        self, team_id: str, league: LeagueInfo, season: str
    ) -> tuple[TeamStats | None, int | None]:
        page = self._api().get_page(
            "/teams/statistics",
            {"league": league.provider_league_id, "season": season, "team": team_id},
        )
        raw = page.items[0] if page.items and isinstance(page.items[0], dict) else None
        played = as_int(dig(raw, "games", "played", "all")) if raw else None
        if not raw or not played:
            return None, page.requests_remaining

        wins = as_int(dig(raw, "games", "wins", "all", "total")) or 0
        losses = as_int(dig(raw, "games", "loses", "all", "total")) or 0
        goals_for = dig(raw, "goals", "for") or {}
        goals_against = dig(raw, "goals", "against") or {}

        stats = TeamStats(
            team_id=team_id,
            season=season,
            league=league.name,
            sport=self.sport,
            record=TeamRecord(wins=wins, losses=losses, win_percentage=win_rate(wins, played)),
            scoring=Scoring(
                total_for=as_int(dig(goals_for, "total", "all")) or 0,
                total_against=as_int(dig(goals_against, "total", "all")) or 0,
                average_for=as_float(dig(goals_for, "average", "all")),
                average_against=as_float(dig(goals_against, "average", "all")),
                home_for=as_int(dig(goals_for, "total", "home")),
                home_against=as_int(dig(goals_against, "total", "home")),
                away_for=as_int(dig(goals_for, "total", "away")),
                away_against=as_int(dig(goals_against, "total", "away")),
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

        wins = (as_int(dig(row, "games", "win", "total")) or 0) + (
            as_int(dig(row, "games", "win_overtime", "total")) or 0
        )
        # Overtime losses count as losses in the normalized record.
        losses = (as_int(dig(row, "games", "lose", "total")) or 0) + (
            as_int(dig(row, "games", "lose_overtime", "total")) or 0
        )
        played = as_int(dig(row, "games", "played")) or wins + losses
        goals_for = as_int(dig(row, "goals", "for")) or 0
        goals_against = as_int(dig(row, "goals", "against")) or 0

        stats = TeamStats(
            team_id=team_id,
            season=season,
            league=league.name,
            sport=self.sport,
            record=TeamRecord(wins=wins, losses=losses, win_percentage=win_rate(wins, played)),
            scoring=Scoring(
                total_for=goals_for,
                total_against=goals_against,
                average_for=goals_for / played if played else 0.0,
                average_against=goals_against / played if played else 0.0,
            ),
            form=form_of(row.get("form")),
            provider=self.provider,
        )
        return stats, remaining

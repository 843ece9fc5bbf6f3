from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .enums import Sport


@dataclass(frozen=True)
class TeamQuery:
    """
    Find a team by provider id or by any user spelling of its name.
    `league_id` targets a non-default league of the sport (e.g. Euroleague).
    """

    sport: Sport
    name: str | None = None
    team_id: str | None = None
    league_id: int | None = None


@dataclass(frozen=True)
class MatchQuery:
    sport: Sport
    team: str | None = None
    date: date | None = None
    league_id: int | None = None
    season: str | None = None
    limit: int = 20


@dataclass(frozen=True)
class StatsQuery:
    sport: Sport
    team_id: str
    season: str | None = None
    league_id: int | None = None


@dataclass(frozen=True)
class H2HQuery:
    """
    Head-to-head between two teams.

    Names are resolved through find_team; already-resolved provider ids
    (`team1_id` / `team2_id`) skip that lookup.
    """

    sport: Sport
    team1: str | None = None
    team2: str | None = None
    team1_id: str | None = None
    team2_id: str | None = None
    limit: int = 10
    league_id: int | None = None


@dataclass(frozen=True)
class EnrichmentOptions:
    include_stats: bool = True
    include_recent_games: bool = True
    include_h2h: bool = True
    include_injuries: bool = True
    recent_games_limit: int = 5
    h2h_limit: int = 5

"""
Normalized, provider-agnostic entities.

Every entity is a frozen value object built fresh per data-layer call (or
served from the cache). Provenance travels on the entity itself as
`provider` + `fetched_at`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from .enums import InjuryStatus, MatchStatus, ProviderEnum, Sport


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class Team:
    id: str
    external_id: str
    name: str
    short_name: str
    sport: Sport
    logo: str | None = None
    country: str | None = None
    league: str | None = None


@dataclass(frozen=True)
class PeriodScore:
    home: int
    away: int


@dataclass(frozen=True)
class Score:
    home: int
    away: int
    periods: tuple[PeriodScore, ...] = ()


@dataclass(frozen=True)
class Match:
    id: str
    external_id: str
    sport: Sport
    league: str
    league_id: str
    season: str
    home_team: Team
    away_team: Team
    status: MatchStatus
    date: datetime
    score: Score | None = None
    venue: str | None = None
    provider: ProviderEnum = ProviderEnum.API_SPORTS
    fetched_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class TeamRecord:
    wins: int
    losses: int
    win_percentage: float
    draws: int = 0


@dataclass(frozen=True)
class Scoring:
    total_for: int
    total_against: int
    average_for: float
    average_against: float
    home_for: int | None = None
    home_against: int | None = None
    away_for: int | None = None
    away_against: int | None = None


@dataclass(frozen=True)
class Form:
    last5: str
    last10: str


@dataclass(frozen=True)
class TeamStats:
    team_id: str
    season: str
    league: str
    sport: Sport
    record: TeamRecord
    scoring: Scoring
    form: Form | None = None
    provider: ProviderEnum = ProviderEnum.API_SPORTS
    fetched_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class RecentGamesSummary:
    wins: int
    losses: int
    draws: int
    goals_for: int
    goals_against: int


@dataclass(frozen=True)
class RecentGames:
    team_id: str
    sport: Sport
    games: tuple[Match, ...]
    summary: RecentGamesSummary
    provider: ProviderEnum = ProviderEnum.API_SPORTS
    fetched_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class H2HSummary:
    total_games: int
    team1_wins: int
    team2_wins: int
    draws: int
    team1_goals: int
    team2_goals: int


@dataclass(frozen=True)
class HeadToHead:
    team1_id: str
    team2_id: str
    sport: Sport
    summary: H2HSummary
    matches: tuple[Match, ...]
    provider: ProviderEnum = ProviderEnum.API_SPORTS
    fetched_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class Injury:
    team_id: str
    sport: Sport
    status: InjuryStatus
    description: str
    player_id: str | None = None
    player_name: str | None = None
    team_name: str | None = None
    injury_type: str | None = None
    expected_return: datetime | None = None
    provider: ProviderEnum = ProviderEnum.ESPN
    fetched_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class Player:
    id: str
    external_id: str
    name: str
    position: str
    first_name: str | None = None
    last_name: str | None = None
    number: str | None = None
    nationality: str | None = None


@dataclass(frozen=True)
class Moneyline:
    home: float
    away: float
    draw: float | None = None


@dataclass(frozen=True)
class PricedLine:
    line: float
    odds: float


@dataclass(frozen=True)
class Spread:
    home: PricedLine
    away: PricedLine


@dataclass(frozen=True)
class Totals:
    over: PricedLine
    under: PricedLine


@dataclass(frozen=True)
class Odds:
    match_id: str
    sport: Sport
    bookmaker: str
    last_update: datetime
    moneyline: Moneyline | None = None
    spread: Spread | None = None
    total: Totals | None = None
    provider: ProviderEnum = ProviderEnum.ODDS_API
    fetched_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True)
class UpcomingEvent:
    id: str
    sport: str
    sport_key: str
    home_team: str
    away_team: str
    commence_time: datetime | None


@dataclass(frozen=True)
class TeamBundle:
    """One side of an enriched match. Absent fields mean the sub-fetch was skipped or failed."""

    team: Team
    stats: TeamStats | None = None
    recent_games: RecentGames | None = None
    injuries: tuple[Injury, ...] | None = None
    is_placeholder: bool = False


@dataclass(frozen=True)
class EnrichedMatchData:
    match: Match
    home: TeamBundle
    away: TeamBundle
    h2h: HeadToHead | None = None
    fetched_at: datetime = field(default_factory=utcnow)

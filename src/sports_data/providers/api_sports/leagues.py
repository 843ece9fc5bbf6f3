from __future__ import annotations

from dataclasses import dataclass

from sports_data.domain.enums import Sport
from sports_data.seasons import SeasonRule, SeasonStyle


@dataclass(frozen=True)
class LeagueInfo:
    key: str
    name: str
    sport: Sport
    provider_league_id: int
    season_rule: SeasonRule
    odds_sport_key: str | None = None


_JULY_START = SeasonRule(cutover_month=7)
_OCTOBER_START = SeasonRule(cutover_month=10)

LEAGUES: tuple[LeagueInfo, ...] = (
    # soccer (API-Football)
    LeagueInfo("EPL", "Premier League", Sport.SOCCER, 39, _JULY_START, "soccer_epl"),
    LeagueInfo("LALIGA", "La Liga", Sport.SOCCER, 140, _JULY_START, "soccer_spain_la_liga"),
    LeagueInfo("SERIEA", "Serie A", Sport.SOCCER, 135, _JULY_START, "soccer_italy_serie_a"),
    LeagueInfo(
        "BUNDESLIGA", "Bundesliga", Sport.SOCCER, 78, _JULY_START, "soccer_germany_bundesliga"
    ),
    LeagueInfo("LIGUE1", "Ligue 1", Sport.SOCCER, 61, _JULY_START, "soccer_france_ligue_one"),
    LeagueInfo(
        "UCL", "UEFA Champions League", Sport.SOCCER, 2, _JULY_START, "soccer_uefa_champs_league"
    ),
    # basketball
    LeagueInfo(
        "NBA",
        "NBA",
        Sport.BASKETBALL,
        12,
        SeasonRule(cutover_month=10, style=SeasonStyle.SPLIT_YEARS),
        "basketball_nba",
    ),
    LeagueInfo(
        "EUROLEAGUE", "Euroleague", Sport.BASKETBALL, 120, _OCTOBER_START, "basketball_euroleague"
    ),
    # hockey
    LeagueInfo("NHL", "NHL", Sport.HOCKEY, 57, _OCTOBER_START, "icehockey_nhl"),
    # american football
    LeagueInfo(
        "NFL", "NFL", Sport.AMERICAN_FOOTBALL, 1, SeasonRule(cutover_month=9), "americanfootball_nfl"
    ),
    LeagueInfo(
        "NCAAF",
        "NCAA",
        Sport.AMERICAN_FOOTBALL,
        2,
        SeasonRule(cutover_month=8),
        "americanfootball_ncaaf",
    ),
)

DEFAULT_LEAGUE_KEYS: dict[Sport, str] = {
    Sport.SOCCER: "EPL",
    Sport.BASKETBALL: "NBA",
    Sport.HOCKEY: "NHL",
    Sport.AMERICAN_FOOTBALL: "NFL",
}


def league_by_key(key: str) -> LeagueInfo:
    for league in LEAGUES:
        if league.key == key.upper():
            return league
    raise KeyError(f"Unknown league key: {key!r}")


def default_league(sport: Sport) -> LeagueInfo:
    return league_by_key(DEFAULT_LEAGUE_KEYS[sport])


def resolve_league(sport: Sport, league_id: int | None) -> LeagueInfo:
    """Catalogue entry for `league_id`, or the sport's default league."""

    if league_id is None:
        return default_league(sport)
    for league in LEAGUES:
        if league.sport == sport and league.provider_league_id == league_id:
            return league
    # Unlisted leagues borrow the default league's calendar.
    base = default_league(sport)
    return LeagueInfo(
        key=f"{sport.value.upper()}-{league_id}",
        name=base.name if league_id == base.provider_league_id else f"League {league_id}",
        sport=sport,
        provider_league_id=league_id,
        season_rule=base.season_rule,
    )


def odds_sport_key(sport: Sport, league_id: int | None = None) -> str:
    league = resolve_league(sport, league_id)
    return league.odds_sport_key or default_league(sport).odds_sport_key or sport.value

from __future__ import annotations

import json
import logging
from datetime import datetime

import typer

from sports_data.cli.common import data_layer, emit
from sports_data.core.config import settings
from sports_data.domain.enums import Sport
from sports_data.domain.queries import (
    EnrichmentOptions,
    H2HQuery,
    MatchQuery,
    StatsQuery,
    TeamQuery,
)

app = typer.Typer(no_args_is_help=True, help="Inspect the sports data layer.")


@app.callback()
def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("sports")
def sports_cmd() -> None:
    """List registered sports and whether their provider is configured."""

    layer = data_layer()
    available = set(layer.get_available_sports())
    typer.echo(
        json.dumps(
            {s.value: s in available for s in layer.registry.registered_sports()}, indent=2
        )
    )


@app.command("find-team")
def find_team_cmd(
    name: str = typer.Argument(..., help="Any spelling of the team name (e.g. Mavs)."),
    sport: Sport = typer.Option(..., "--sport", case_sensitive=False),
    league_id: int | None = typer.Option(None, "--league-id", help="Provider league id."),
) -> None:
    """Resolve a team name to a provider team."""

    emit(data_layer().find_team(TeamQuery(sport=sport, name=name, league_id=league_id)))


@app.command("matches")
def matches_cmd(
    sport: Sport = typer.Option(..., "--sport", case_sensitive=False),
    team: str | None = typer.Option(None, "--team", help="Only games of this team."),
    date: datetime | None = typer.Option(None, "--date", formats=["%Y-%m-%d"]),
    season: str | None = typer.Option(None, "--season", help="Season (e.g. 2025 or 2025-2026)."),
    league_id: int | None = typer.Option(None, "--league-id"),
    limit: int = typer.Option(20, "--limit"),
) -> None:
    """Games of a league season, optionally for one team or date."""

    query = MatchQuery(
        sport=sport,
        team=team,
        date=date.date() if date else None,
        league_id=league_id,
        season=season,
        limit=limit,
    )
    emit(data_layer().get_matches(query))


@app.command("stats")
def stats_cmd(
    team_id: str = typer.Argument(..., help="Provider team id."),
    sport: Sport = typer.Option(..., "--sport", case_sensitive=False),
    season: str | None = typer.Option(None, "--season"),
    league_id: int | None = typer.Option(None, "--league-id"),
) -> None:
    """Season statistics for a team."""

    query = StatsQuery(sport=sport, team_id=team_id, season=season, league_id=league_id)
    emit(data_layer().get_team_stats(query))


@app.command("recent-games")
def recent_games_cmd(
    team_id: str = typer.Argument(..., help="Provider team id."),
    sport: Sport = typer.Option(..., "--sport", case_sensitive=False),
    limit: int = typer.Option(5, "--limit"),
    league_id: int | None = typer.Option(None, "--league-id"),
) -> None:
    """Latest finished games of a team with a win/loss summary."""

    emit(data_layer().get_recent_games(sport, team_id, limit=limit, league_id=league_id))


@app.command("h2h")
def h2h_cmd(
    team1: str = typer.Argument(...),
    team2: str = typer.Argument(...),
    sport: Sport = typer.Option(..., "--sport", case_sensitive=False),
    limit: int = typer.Option(10, "--limit"),
    league_id: int | None = typer.Option(None, "--league-id"),
) -> None:
    """Head-to-head history between two teams (names)."""

    query = H2HQuery(sport=sport, team1=team1, team2=team2, limit=limit, league_id=league_id)
    emit(data_layer().get_h2h(query))


@app.command("injuries")
def injuries_cmd(
    team_id: str = typer.Argument(..., help="Provider team id."),
    sport: Sport = typer.Option(..., "--sport", case_sensitive=False),
    team_name: str | None = typer.Option(None, "--team-name", help="Skips the id lookup."),
) -> None:
    """Current injury report for a team."""

    emit(data_layer().get_injuries(sport, team_id, team_name))


@app.command("roster")
def roster_cmd(
    team_id: str = typer.Argument(..., help="Provider team id."),
    sport: Sport = typer.Option(..., "--sport", case_sensitive=False),
) -> None:
    """Current-season roster of a team."""

    emit(data_layer().get_team_roster(sport, team_id))


@app.command("odds")
def odds_cmd(
    home_team: str = typer.Argument(...),
    away_team: str = typer.Argument(...),
    sport: Sport = typer.Option(..., "--sport", case_sensitive=False),
    sport_key: str | None = typer.Option(
        None, "--sport-key", help="Exact odds sport key (e.g. soccer_spain_la_liga)."
    ),
    regions: list[str] = typer.Option(["eu", "us"], "--region"),
    markets: list[str] = typer.Option(["h2h", "spreads", "totals"], "--market"),
) -> None:
    """Bookmaker odds for an upcoming match."""

    emit(
        data_layer().get_odds(
            sport, home_team, away_team, regions=regions, markets=markets, sport_key=sport_key
        )
    )


@app.command("events")
def events_cmd(
    sport_key: str = typer.Argument(..., help="Odds sport key (e.g. basketball_nba)."),
) -> None:
    """Upcoming events listed by the odds provider."""

    emit(data_layer().get_upcoming_events(sport_key))


@app.command("enrich")
def enrich_cmd(
    home_team: str = typer.Argument(...),
    away_team: str = typer.Argument(...),
    sport: Sport = typer.Option(..., "--sport", case_sensitive=False),
    stats: bool = typer.Option(True, "--stats/--no-stats"),
    recent_games: bool = typer.Option(True, "--recent-games/--no-recent-games"),
    h2h: bool = typer.Option(True, "--h2h/--no-h2h"),
    injuries: bool = typer.Option(True, "--injuries/--no-injuries"),
    recent_games_limit: int = typer.Option(5, "--recent-games-limit"),
    h2h_limit: int = typer.Option(5, "--h2h-limit"),
) -> None:
    """Everything known about a prospective match."""

    options = EnrichmentOptions(
        include_stats=stats,
        include_recent_games=recent_games,
        include_h2h=h2h,
        include_injuries=injuries,
        recent_games_limit=recent_games_limit,
        h2h_limit=h2h_limit,
    )
    emit(data_layer().get_enriched_match_data(sport, home_team, away_team, options))

"""
Match enrichment: everything known about a prospective match in one call.

Team lookups run first (concurrently), then stats / recent games / injuries
per resolved side plus head-to-head. A failed sub-fetch leaves its field
empty; the call only fails when neither team can be identified.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import TYPE_CHECKING, Any

from sports_data.core.text import last_word
from sports_data.domain.entities import EnrichedMatchData, Match, Team, TeamBundle, utcnow
from sports_data.domain.enums import ErrorCode, MatchStatus, ProviderEnum, Sport
from sports_data.domain.queries import EnrichmentOptions, H2HQuery, StatsQuery, TeamQuery
from sports_data.domain.response import DataLayerResponse

if TYPE_CHECKING:
    from .facade import DataLayer

logger = logging.getLogger(__name__)

MAX_WORKERS = 7


def placeholder_team(name: str, sport: Sport) -> Team:
    """Stand-in for a side that could not be resolved; its id is never sent upstream."""

    slug = "-".join(name.strip().lower().split())
    return Team(
        id=f"placeholder-{slug}",
        external_id="0",
        name=name,
        short_name=last_word(name) or name,
        sport=sport,
    )


def _data_or_none(label: str, future: Future[DataLayerResponse[Any]] | None) -> Any:
    if future is None:
        return None
    try:
        response = future.result()
    except Exception:
        logger.exception("Enrichment sub-fetch %s raised", label)
        return None
    if not response.success:
        assert response.error is not None
        logger.info("Enrichment sub-fetch %s failed: %s", label, response.error.message)
        return None
    return response.data


def enrich_match(
    layer: DataLayer,
    sport: Sport,
    home_team: str,
    away_team: str,
    options: EnrichmentOptions | None = None,
    *,
    max_workers: int = MAX_WORKERS,
) -> DataLayerResponse[EnrichedMatchData]:
    opts = options or EnrichmentOptions()

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="enrich") as pool:
        home_lookup = pool.submit(layer.find_team, TeamQuery(sport=sport, name=home_team))
        away_lookup = pool.submit(layer.find_team, TeamQuery(sport=sport, name=away_team))
        home_result = home_lookup.result()
        away_result = away_lookup.result()

        home_found = home_result.success and home_result.data is not None
        away_found = away_result.success and away_result.data is not None
        logger.info(
            "Team lookup %r: %s, %r: %s",
            home_team,
            home_result.data.name if home_found and home_result.data else "not found",
            away_team,
            away_result.data.name if away_found and away_result.data else "not found",
        )

        if not home_found and not away_found:
            return DataLayerResponse.fail(
                ErrorCode.TEAMS_NOT_FOUND,
                f"Could not find either team: {home_team} or {away_team}",
                provider=home_result.metadata.provider,
            )

        home = home_result.data if home_found and home_result.data else placeholder_team(home_team, sport)
        away = away_result.data if away_found and away_result.data else placeholder_team(away_team, sport)

        futures: dict[str, Future[DataLayerResponse[Any]]] = {}
        for side, team, found in (("home", home, home_found), ("away", away, away_found)):
            # Placeholder sides are skipped, not queried with a dummy id.
            if not found:
                continue
            if opts.include_stats:
                futures[f"{side}_stats"] = pool.submit(
                    layer.get_team_stats, StatsQuery(sport=sport, team_id=team.external_id)
                )
            if opts.include_recent_games:
                futures[f"{side}_games"] = pool.submit(
                    layer.get_recent_games, sport, team.external_id, opts.recent_games_limit
                )
            if opts.include_injuries:
                futures[f"{side}_injuries"] = pool.submit(
                    layer.get_injuries, sport, team.external_id, team.name
                )

        if opts.include_h2h and home_found and away_found:
            futures["h2h"] = pool.submit(
                layer.get_h2h,
                H2HQuery(
                    sport=sport,
                    team1=home.name,
                    team2=away.name,
                    team1_id=home.external_id,
                    team2_id=away.external_id,
                    limit=opts.h2h_limit,
                ),
            )

        wait(futures.values())

    results = {label: _data_or_none(label, f) for label, f in futures.items()}

    def bundle(side: str, team: Team, found: bool) -> TeamBundle:
        injuries = results.get(f"{side}_injuries")
        return TeamBundle(
            team=team,
            stats=results.get(f"{side}_stats"),
            recent_games=results.get(f"{side}_games"),
            injuries=tuple(injuries) if injuries is not None else None,
            is_placeholder=not found,
        )

    provider = (home_result if home_found else away_result).metadata.provider
    match = Match(
        id=f"{sport.value}-{home.external_id}-{away.external_id}",
        external_id="",
        sport=sport,
        league=home.league or away.league or "",
        league_id="",
        season="",
        home_team=home,
        away_team=away,
        status=MatchStatus.SCHEDULED,
        date=utcnow(),
        provider=provider if provider is not ProviderEnum.NONE else ProviderEnum.API_SPORTS,
    )

    return DataLayerResponse.ok(
        EnrichedMatchData(
            match=match,
            home=bundle("home", home, home_found),
            away=bundle("away", away, away_found),
            h2h=results.get("h2h"),
        ),
        provider=match.provider,
    )

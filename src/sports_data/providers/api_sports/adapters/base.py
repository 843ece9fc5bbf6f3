from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any, ClassVar

from sports_data.core.text import last_word
from sports_data.domain.entities import (
    Form,
    H2HSummary,
    HeadToHead,
    Injury,
    Match,
    Player,
    RecentGames,
    RecentGamesSummary,
    Team,
    TeamStats,
)
from sports_data.domain.enums import ErrorCode, MatchStatus, ProviderEnum, Sport
from sports_data.domain.queries import H2HQuery, MatchQuery, StatsQuery, TeamQuery
from sports_data.domain.response import DataLayerResponse
from sports_data.providers.api_sports.client import ApiItem, ApiSportsClient, ApiSportsPage
from sports_data.providers.api_sports.leagues import LeagueInfo, resolve_league
from sports_data.providers.base.errors import (
    ProviderCapabilityError,
    ProviderError,
    ProviderRequestError,
)
from sports_data.providers.espn.injuries import EspnInjuryProvider
from sports_data.resolution.matching import match_team
from sports_data.resolution.resolver import resolve
from sports_data.seasons import current_season, previous_season

logger = logging.getLogger(__name__)


def as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def as_float(value: Any, default: float = 0.0) -> float:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip().rstrip("%"))
        except ValueError:
            return default
    return default


def dig(obj: Any, *path: str) -> Any:
    """obj[path[0]][path[1]]... or None as soon as a level is missing."""
    for key in path:
        if not isinstance(obj, Mapping):
            return None
        obj = obj.get(key)
    return obj


def standings_rows(items: Iterable[Any]) -> list[ApiItem]:
    """Standings arrive as one list per group/conference; flatten them."""
    rows: list[ApiItem] = []
    for item in items:
        if isinstance(item, list):
            rows.extend(r for r in item if isinstance(r, dict))
        elif isinstance(item, dict):
            rows.append(item)
    return rows


def win_rate(wins: int, played: int) -> float:
    return wins / played if played else 0.0


def form_of(value: Any) -> Form | None:
    """Provider form strings are chronological, oldest result first."""
    if not isinstance(value, str) or not value:
        return None
    return Form(last5=value[-5:], last10=value[-10:])


StatsSource = Callable[[str, LeagueInfo, str], tuple[TeamStats | None, int | None]]


def summarize_recent(matches: Iterable[Match], team_id: str) -> RecentGamesSummary:
    wins = losses = draws = goals_for = goals_against = 0
    for m in matches:
        if m.score is None:
            continue
        if m.home_team.external_id == team_id:
            ours, theirs = m.score.home, m.score.away
        else:
            ours, theirs = m.score.away, m.score.home
        goals_for += ours
        goals_against += theirs
        if ours > theirs:
            wins += 1
        elif ours < theirs:
            losses += 1
        else:
            draws += 1
    return RecentGamesSummary(
        wins=wins, losses=losses, draws=draws, goals_for=goals_for, goals_against=goals_against
    )


def summarize_h2h(matches: tuple[Match, ...], team1_id: str) -> H2HSummary:
    team1_wins = team2_wins = draws = team1_goals = team2_goals = 0
    for m in matches:
        if m.score is None:
            continue
        if m.home_team.external_id == team1_id:
            t1, t2 = m.score.home, m.score.away
        else:
            t1, t2 = m.score.away, m.score.home
        team1_goals += t1
        team2_goals += t2
        if t1 > t2:
            team1_wins += 1
        elif t2 > t1:
            team2_wins += 1
        else:
            draws += 1
    return H2HSummary(
        total_games=len(matches),
        team1_wins=team1_wins,
        team2_wins=team2_wins,
        draws=draws,
        team1_goals=team1_goals,
        team2_goals=team2_goals,
    )


@dataclass(frozen=True)
class ApiSportsAdapter(ABC):
    """
    Shared behaviour of the API-Sports sport adapters.

    Subclasses describe their endpoints and payload shapes; team identity
    resolution, season fallback and summaries live here. League context is
    per call (`league_id` on the query), never adapter state.
    """

    client: ApiSportsClient | None
    injury_provider: EspnInjuryProvider | None = None
    today: Callable[[], date] | None = None

    sport: ClassVar[Sport]
    provider: ClassVar[ProviderEnum] = ProviderEnum.API_SPORTS
    status_map: ClassVar[Mapping[str, MatchStatus]] = {}

    teams_path: ClassVar[str] = "/teams"
    games_path: ClassVar[str] = "/games"
    h2h_path: ClassVar[str] = "/games"
    roster_path: ClassVar[str | None] = None

    # -----------------------------
    # Plumbing
    # -----------------------------

    def is_available(self) -> bool:
        return self.client is not None

    def _api(self) -> ApiSportsClient:
        if self.client is None:
            raise ProviderRequestError("API-Sports key is not configured")
        return self.client

    def _league(self, league_id: int | None) -> LeagueInfo:
        return resolve_league(self.sport, league_id)

    def _today(self) -> date:
        return self.today() if self.today is not None else datetime.now(tz=UTC).date()

    def current_season(self, league: LeagueInfo) -> str:
        return current_season(league.season_rule, self._today())

    def previous_season(self, league: LeagueInfo) -> str:
        return previous_season(league.season_rule, self._today())

    def external_id(self, team_id: str) -> str:
        """Accept both provider ids ("145") and internal ids ("basketball-145")."""
        prefix = f"{self.sport.value}-"
        return team_id[len(prefix) :] if team_id.startswith(prefix) else team_id

    def map_status(self, code: Any) -> MatchStatus:
        if not isinstance(code, str):
            return MatchStatus.UNKNOWN
        return self.status_map.get(code.strip().upper(), MatchStatus.UNKNOWN)

    def _ok(self, data: Any, quota_remaining: int | None = None) -> DataLayerResponse[Any]:
        return DataLayerResponse.ok(data, provider=self.provider, quota_remaining=quota_remaining)

    def _error(self, code: ErrorCode, message: str) -> DataLayerResponse[Any]:
        return DataLayerResponse.fail(code, message, provider=self.provider)

    # -----------------------------
    # Payload shape hooks
    # -----------------------------

    def _team_payload(self, item: ApiItem) -> ApiItem | None:
        return item if isinstance(item, dict) else None

    def _team_by_id_params(self, team_id: str, league: LeagueInfo, season: str) -> dict[str, Any]:
        return {"id": team_id}

    def _h2h_params(
        self, team1_id: str, team2_id: str, league: LeagueInfo, season: str, limit: int
    ) -> dict[str, Any]:
        return {
            "h2h": f"{team1_id}-{team2_id}",
            "league": league.provider_league_id,
            "season": season,
        }

    h2h_uses_season: ClassVar[bool] = True

    @abstractmethod
    def _status_code(self, game: ApiItem) -> Any: ...

    @abstractmethod
    def _timestamp(self, game: ApiItem) -> int: ...

    @abstractmethod
    def _transform_match(self, game: ApiItem, league: LeagueInfo) -> Match: ...

    def _roster_params(self, team_id: str, league: LeagueInfo) -> dict[str, Any]:
        return {"team": team_id, "season": self.current_season(league)}

    def _roster_items(self, items: list[ApiItem]) -> list[ApiItem]:
        return items

    def _transform_player(self, raw: ApiItem) -> Player:
        first = raw.get("firstname")
        last = raw.get("lastname")
        name = raw.get("name") or " ".join(p for p in (first, last) if p).strip()
        ext = str(raw.get("id"))
        number = raw.get("number")
        return Player(
            id=f"{self.sport.value}-player-{ext}",
            external_id=ext,
            name=str(name or ext),
            position=str(raw.get("position") or "Unknown"),
            first_name=first,
            last_name=last,
            number=str(number) if number is not None else None,
            nationality=raw.get("nationality") or dig(raw, "country", "name") or None,
        )

    # -----------------------------
    # Transforms
    # -----------------------------

    def _transform_team(self, raw: ApiItem, league: LeagueInfo | None = None) -> Team:
        ext = str(raw.get("id"))
        name = str(raw.get("name") or ext)
        country = raw.get("country")
        if isinstance(country, dict):
            country = country.get("name")
        return Team(
            id=f"{self.sport.value}-{ext}",
            external_id=ext,
            name=name,
            short_name=last_word(name),
            sport=self.sport,
            logo=raw.get("logo"),
            country=country if isinstance(country, str) else None,
            league=league.name if league is not None else None,
        )

    def _finished_sorted(self, games: Iterable[ApiItem]) -> list[ApiItem]:
        finished = [
            g
            for g in games
            if isinstance(g, dict) and self.map_status(self._status_code(g)) is MatchStatus.FINISHED
        ]
        return sorted(finished, key=self._timestamp, reverse=True)

    # -----------------------------
    # Contract
    # -----------------------------

    def find_team(self, query: TeamQuery) -> DataLayerResponse[Team]:
        if not query.name and not query.team_id:
            return self._error(ErrorCode.INVALID_QUERY, "Team name or ID required")

        league = self._league(query.league_id)
        season = self.current_season(league)

        if query.team_id:
            try:
                page = self._api().get_page(
                    self.teams_path,
                    self._team_by_id_params(self.external_id(query.team_id), league, season),
                )
            except ProviderError as e:
                if not query.name:
                    logger.warning("Team lookup failed for id %s: %s", query.team_id, e)
                    return self._error(
                        ErrorCode.FETCH_ERROR, f"Could not fetch {self.sport.value} team: {e}"
                    )
                logger.info("Id lookup for %s failed, searching by name: %s", query.team_id, e)
            else:
                teams = [t for t in map(self._team_payload, page.items) if t]
                if teams:
                    return self._ok(self._transform_team(teams[0], league), page.requests_remaining)
                if not query.name:
                    return self._error(
                        ErrorCode.TEAM_NOT_FOUND,
                        f"Could not find {self.sport.value} team: {query.team_id}",
                    )

        assert query.name is not None
        resolved = resolve(query.name, self.sport)
        logger.debug(
            "Searching %s for %r with candidates %s", league.name, query.name, resolved.candidates
        )

        try:
            # One roster fetch for every candidate.
            page = self._api().get_page(
                self.teams_path, {"league": league.provider_league_id, "season": season}
            )
        except ProviderError as e:
            logger.warning("Team lookup failed for %s (%s): %s", query.name, league.name, e)
            return self._error(ErrorCode.FETCH_ERROR, f"Could not fetch {league.name} teams: {e}")

        teams = [t for t in map(self._team_payload, page.items) if t]
        if not teams:
            return self._error(ErrorCode.FETCH_ERROR, f"Could not fetch {league.name} teams")

        match = match_team(
            resolved.candidates,
            teams,
            name_of=lambda t: str(t.get("name") or ""),
            resolved_name=resolved.canonical,
        )
        if match is None:
            logger.info("Could not find %s team %r", self.sport.value, query.name)
            return self._error(
                ErrorCode.TEAM_NOT_FOUND, f"Could not find {self.sport.value} team: {query.name}"
            )

        logger.debug(
            "%s match: %r -> %r (score %.2f)", match.kind, query.name, match.item.get("name"), match.score
        )
        return self._ok(self._transform_team(match.item, league), page.requests_remaining)

    def get_matches(self, query: MatchQuery) -> DataLayerResponse[list[Match]]:
        league = self._league(query.league_id)
        params: dict[str, Any] = {
            "league": league.provider_league_id,
            "season": query.season or self.current_season(league),
        }

        if query.team:
            found = self.find_team(
                TeamQuery(sport=self.sport, name=query.team, league_id=query.league_id)
            )
            if not found.success or found.data is None:
                assert found.error is not None
                return self._error(found.error.code, found.error.message)
            params["team"] = found.data.external_id

        if query.date:
            params["date"] = query.date.isoformat()

        try:
            page = self._api().get_page(self.games_path, params)
        except ProviderError as e:
            logger.warning("Match fetch failed for %s: %s", league.name, e)
            return self._error(ErrorCode.FETCH_ERROR, f"Failed to fetch {self.sport.value} games: {e}")

        games = [g for g in page.items if isinstance(g, dict)][: query.limit]
        return self._ok([self._transform_match(g, league) for g in games], page.requests_remaining)

    def _team_games(self, team_id: str, league: LeagueInfo, season: str) -> ApiSportsPage:
        return self._api().get_page(
            self.games_path,
            {"team": team_id, "league": league.provider_league_id, "season": season},
        )

    def get_recent_games(
        self, team_id: str, limit: int = 5, league_id: int | None = None
    ) -> DataLayerResponse[RecentGames]:
        team_id = self.external_id(team_id)
        league = self._league(league_id)
        season = self.current_season(league)

        try:
            page = self._team_games(team_id, league, season)
        except ProviderError as e:
            logger.warning("Recent games fetch failed for team %s: %s", team_id, e)
            return self._error(ErrorCode.FETCH_ERROR, f"Failed to fetch games: {e}")

        quota = page.requests_remaining
        finished = self._finished_sorted(page.items)

        # Early in a season there is no history yet; look one season back.
        if not finished:
            prior = self.previous_season(league)
            logger.info("No finished games for team %s in %s, trying %s", team_id, season, prior)
            try:
                page = self._team_games(team_id, league, prior)
                quota = page.requests_remaining
                finished = self._finished_sorted(page.items)
            except ProviderError as e:
                logger.warning("Previous-season fetch failed for team %s: %s", team_id, e)

        matches = tuple(self._transform_match(g, league) for g in finished[:limit])
        return self._ok(
            RecentGames(
                team_id=team_id,
                sport=self.sport,
                games=matches,
                summary=summarize_recent(matches, team_id),
                provider=self.provider,
            ),
            quota,
        )

    def _h2h_team_id(self, team_id: str | None, name: str | None, league_id: int | None) -> str:
        if team_id:
            return self.external_id(team_id)
        found = self.find_team(TeamQuery(sport=self.sport, name=name, league_id=league_id))
        if not found.success or found.data is None:
            raise LookupError(name or "")
        return found.data.external_id

    def get_h2h(self, query: H2HQuery) -> DataLayerResponse[HeadToHead]:
        if not (query.team1_id or query.team1) or not (query.team2_id or query.team2):
            return self._error(ErrorCode.INVALID_QUERY, "Two teams (name or ID) required")

        try:
            team1_id = self._h2h_team_id(query.team1_id, query.team1, query.league_id)
            team2_id = self._h2h_team_id(query.team2_id, query.team2, query.league_id)
        except LookupError as e:
            return self._error(ErrorCode.TEAM_NOT_FOUND, f"Could not find team: {e}")

        league = self._league(query.league_id)
        season = self.current_season(league)
        try:
            page = self._api().get_page(
                self.h2h_path, self._h2h_params(team1_id, team2_id, league, season, query.limit)
            )
        except ProviderError as e:
            logger.warning("H2H fetch failed for %s-%s: %s", team1_id, team2_id, e)
            return self._error(ErrorCode.FETCH_ERROR, f"Failed to fetch H2H: {e}")

        quota = page.requests_remaining
        finished = self._finished_sorted(page.items)

        if self.h2h_uses_season and len(finished) < query.limit:
            prior = self.previous_season(league)
            try:
                older = self._api().get_page(
                    self.h2h_path, self._h2h_params(team1_id, team2_id, league, prior, query.limit)
                )
                quota = older.requests_remaining
                finished = self._finished_sorted([*finished, *older.items])
            except ProviderError as e:
                logger.warning("Previous-season H2H fetch failed: %s", e)

        matches = tuple(self._transform_match(g, league) for g in finished[: query.limit])
        return self._ok(
            HeadToHead(
                team1_id=team1_id,
                team2_id=team2_id,
                sport=self.sport,
                summary=summarize_h2h(matches, team1_id),
                matches=matches,
                provider=self.provider,
            ),
            quota,
        )

    @abstractmethod
    def get_team_stats(self, query: StatsQuery) -> DataLayerResponse[TeamStats]: ...

    def _stats_from(self, query: StatsQuery, *sources: StatsSource) -> DataLayerResponse[TeamStats]:
        """Try each source in order; the first one that yields stats wins."""
        team_id = self.external_id(query.team_id)
        league = self._league(query.league_id)
        season = query.season or self.current_season(league)

        last_error: ProviderError | None = None
        for source in sources:
            try:
                stats, remaining = source(team_id, league, season)
            except ProviderError as e:
                logger.info("Stats source %s failed for team %s: %s", source.__name__, team_id, e)
                last_error = e
                continue
            if stats is not None:
                return self._ok(stats, remaining)

        if last_error is not None:
            return self._error(ErrorCode.FETCH_ERROR, f"Failed to fetch team stats: {last_error}")
        return self._error(ErrorCode.STATS_NOT_FOUND, f"No statistics for team {team_id}")

    def _standings_row(
        self, team_id: str, league: LeagueInfo, season: str
    ) -> tuple[ApiItem | None, int | None]:
        page = self._api().get_page(
            "/standings", {"league": league.provider_league_id, "season": season, "team": team_id}
        )
        for row in standings_rows(page.items):
            if str(dig(row, "team", "id")) == team_id:
                return row, page.requests_remaining
        return None, page.requests_remaining

    def get_injuries(
        self, team_id: str, team_name: str | None = None
    ) -> DataLayerResponse[list[Injury]]:
        if self.injury_provider is None:
            raise ProviderCapabilityError(f"Injuries data is not available for {self.sport.value}")

        team_id = self.external_id(team_id)
        if not team_name:
            found = self.find_team(TeamQuery(sport=self.sport, team_id=team_id))
            if not found.success or found.data is None:
                return self._error(ErrorCode.TEAM_NOT_FOUND, f"Could not find team: {team_id}")
            team_name = found.data.name

        try:
            injuries = self.injury_provider.injuries_for_team(
                team_id=team_id, team_name=team_name, sport=self.sport
            )
        except ProviderError as e:
            logger.warning("Injury fetch failed for %s: %s", team_name, e)
            return self._error(ErrorCode.FETCH_ERROR, f"Failed to fetch injuries: {e}")

        return DataLayerResponse.ok(injuries, provider=ProviderEnum.ESPN)

    def get_team_roster(self, team_id: str) -> DataLayerResponse[list[Player]]:
        if self.roster_path is None:
            raise ProviderCapabilityError(f"Rosters are not available for {self.sport.value}")

        team_id = self.external_id(team_id)
        league = self._league(None)
        try:
            page = self._api().get_page(self.roster_path, self._roster_params(team_id, league))
        except ProviderError as e:
            logger.warning("Roster fetch failed for team %s: %s", team_id, e)
            return self._error(ErrorCode.FETCH_ERROR, f"Failed to fetch team roster: {e}")

        players = [self._transform_player(p) for p in self._roster_items(page.items)]
        logger.debug("Found %d players for team %s", len(players), team_id)
        return self._ok(players, page.requests_remaining)

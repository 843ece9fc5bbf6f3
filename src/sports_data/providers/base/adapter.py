from __future__ import annotations

from typing import Protocol, runtime_checkable

from sports_data.domain.entities import (
    HeadToHead,
    Injury,
    Match,
    Player,
    RecentGames,
    Team,
    TeamStats,
)
from sports_data.domain.enums import ProviderEnum, Sport
from sports_data.domain.queries import H2HQuery, MatchQuery, StatsQuery, TeamQuery
from sports_data.domain.response import DataLayerResponse


@runtime_checkable
class SportAdapter(Protocol):
    """
    The data layer depends on this, not on any HTTP client.

    Every method returns an envelope; provider failures are converted, never
    raised. The optional capabilities (injuries, roster) raise
    ProviderCapabilityError when the sport has no source for them.
    """

    sport: Sport
    provider: ProviderEnum

    def is_available(self) -> bool:
        """Required credentials/configuration are present."""
        ...

    def find_team(self, query: TeamQuery) -> DataLayerResponse[Team]: ...

    def get_matches(self, query: MatchQuery) -> DataLayerResponse[list[Match]]: ...

    def get_team_stats(self, query: StatsQuery) -> DataLayerResponse[TeamStats]: ...

    def get_recent_games(
        self, team_id: str, limit: int = 5, league_id: int | None = None
    ) -> DataLayerResponse[RecentGames]: ...

    def get_h2h(self, query: H2HQuery) -> DataLayerResponse[HeadToHead]: ...

    def get_injuries(
        self, team_id: str, team_name: str | None = None
    ) -> DataLayerResponse[list[Injury]]: ...

    def get_team_roster(self, team_id: str) -> DataLayerResponse[list[Player]]: ...

from __future__ import annotations

from typing import Any

from sports_data.domain.enums import Sport
from sports_data.providers.base.client import BaseHttpClient
from sports_data.providers.base.errors import ProviderCapabilityError

# ESPN site-API path segment per sport (league-wide endpoints).
ESPN_LEAGUE_PATHS: dict[Sport, str] = {
    Sport.BASKETBALL: "basketball/nba",
    Sport.HOCKEY: "hockey/nhl",
    Sport.AMERICAN_FOOTBALL: "football/nfl",
}


def espn_league_path(sport: Sport) -> str:
    try:
        return ESPN_LEAGUE_PATHS[sport]
    except KeyError:
        raise ProviderCapabilityError(f"ESPN has no league feed for sport={sport}") from None


class EspnClient:
    """ESPN's public site API. No key; a browser-like user agent is expected."""

    user_agent = "Mozilla/5.0 (compatible; sports-data-layer/0.1)"

    def __init__(self, *, http: BaseHttpClient) -> None:
        self.http = http

    def get_injuries(self, sport: Sport) -> dict[str, Any]:
        return self.http.get_json(
            f"/{espn_league_path(sport)}/injuries", headers={"User-Agent": self.user_agent}
        )

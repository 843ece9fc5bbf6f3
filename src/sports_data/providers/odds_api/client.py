from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sports_data.core.config import settings
from sports_data.providers.base.client import BaseHttpClient
from sports_data.providers.base.errors import ProviderRequestError

ApiItem = dict[str, Any]


def _header_int(headers: Mapping[str, str], name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        # The provider reports usage as "12.0" on some plans.
        return int(float(value))
    except ValueError:
        return None


@dataclass(frozen=True)
class OddsApiResult:
    items: list[ApiItem]
    requests_used: int | None = None
    requests_remaining: int | None = None


class OddsApiClient:
    def __init__(self, *, http: BaseHttpClient, api_key: str | None = None) -> None:
        self.http = http
        self.api_key = api_key or settings.require_odds_api_key()

    def _get_list(self, path: str, params: dict[str, str]) -> OddsApiResult:
        value, headers = self.http.get_json_with_headers(path, params=params)
        if not isinstance(value, list):
            raise ProviderRequestError(f"Expected list response, got {type(value)}")

        return OddsApiResult(
            items=[v for v in value if isinstance(v, dict)],
            requests_used=_header_int(headers, "x-requests-used"),
            requests_remaining=_header_int(headers, "x-requests-remaining"),
        )

    def get_odds(
        self,
        *,
        sport_key: str,
        regions: Sequence[str],
        markets: Sequence[str],
        odds_format: str = "decimal",
        bookmakers: Sequence[str] | None = None,
    ) -> OddsApiResult:
        """Current odds for upcoming/live events."""

        params: dict[str, str] = {
            "apiKey": self.api_key,
            "regions": ",".join(regions),
            "markets": ",".join(markets),
            "oddsFormat": odds_format,
        }
        if bookmakers:
            params["bookmakers"] = ",".join(bookmakers)

        return self._get_list(f"/sports/{sport_key}/odds", params)

    def get_events(self, *, sport_key: str) -> OddsApiResult:
        """Upcoming events without prices. Does not count against the quota."""

        return self._get_list(f"/sports/{sport_key}/events", {"apiKey": self.api_key})

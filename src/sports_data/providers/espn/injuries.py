from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from sports_data.cache import TTLCache
from sports_data.core.text import last_word, normalize_team_alias
from sports_data.domain.entities import Injury
from sports_data.domain.enums import InjuryStatus, ProviderEnum, Sport
from sports_data.providers.base.errors import ProviderResponseError
from sports_data.resolution.resolver import lookup_entry

from .client import EspnClient

logger = logging.getLogger(__name__)

ApiItem = dict[str, Any]

_INJURY_TYPES = (
    "ACL", "MCL", "Achilles", "hamstring", "ankle", "knee", "groin", "concussion",
    "shoulder", "back", "hip", "calf", "quad", "foot", "wrist", "elbow", "finger",
    "illness", "rest", "personal",
)  # fmt: skip


def map_injury_status(value: Any) -> InjuryStatus:
    s = value.strip().lower() if isinstance(value, str) else ""
    try:
        return InjuryStatus(s)
    except ValueError:
        return InjuryStatus.DAY_TO_DAY


def extract_injury_type(description: str) -> str:
    lowered = description.lower()
    for kind in _INJURY_TYPES:
        if kind.lower() in lowered:
            return kind
    return "Unspecified"


def _nickname(name: str, sport: Sport) -> str:
    entry = lookup_entry(name, sport)
    if entry is not None:
        return normalize_team_alias(entry.nickname)
    return last_word(normalize_team_alias(name))


def _parse_date(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


@dataclass
class EspnInjuryProvider:
    """
    League-wide ESPN injury reports, matched to a team by name.

    ESPN lists only teams with at least one injury, so an unmatched team
    yields an empty list rather than an error.
    """

    client: EspnClient
    cache: TTLCache = field(default_factory=lambda: TTLCache(ttl_s=1800.0))

    def _league_payload(self, sport: Sport) -> list[ApiItem]:
        key = f"espn-injuries:{sport.value}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        payload = self.client.get_injuries(sport)
        teams = payload.get("injuries")
        if not isinstance(teams, list):
            raise ProviderResponseError("ESPN injuries payload missing 'injuries' list")
        items = [t for t in teams if isinstance(t, dict)]
        logger.info("Fetched ESPN %s injury report (%d teams)", sport.value, len(items))
        self.cache.set(key, items)
        return items

    def find_team_entry(self, team_name: str, sport: Sport) -> ApiItem | None:
        query_norm = normalize_team_alias(team_name)
        entry = lookup_entry(team_name, sport)
        if entry is not None:
            query_norm = normalize_team_alias(entry.full_name)
        query_nick = _nickname(team_name, sport)

        teams = self._league_payload(sport)
        for team in teams:
            if normalize_team_alias(str(team.get("displayName") or "")) == query_norm:
                return team
        for team in teams:
            display = str(team.get("displayName") or "")
            if display and _nickname(display, sport) == query_nick:
                return team
        return None

    def injuries_for_team(self, *, team_id: str, team_name: str, sport: Sport) -> list[Injury]:
        team = self.find_team_entry(team_name, sport)
        if team is None:
            logger.info("No ESPN injury entry for %s (%s)", team_name, sport.value)
            return []

        display = str(team.get("displayName") or team_name)
        raw_injuries = team.get("injuries") or []
        return [
            self._transform(i, team_id=team_id, team_name=display, sport=sport)
            for i in raw_injuries
            if isinstance(i, dict)
        ]

    def _transform(self, raw: ApiItem, *, team_id: str, team_name: str, sport: Sport) -> Injury:
        athlete = raw.get("athlete") or {}
        details = raw.get("details") or {}
        player_name = athlete.get("displayName")
        description = str(raw.get("shortComment") or raw.get("longComment") or "")

        player_id = raw.get("id")
        if not player_id and player_name:
            player_id = "espn_" + str(player_name).replace(" ", "_")

        return Injury(
            team_id=team_id,
            sport=sport,
            status=map_injury_status(raw.get("status")),
            description=description,
            player_id=str(player_id) if player_id else None,
            player_name=player_name,
            team_name=team_name,
            injury_type=details.get("type") or extract_injury_type(description),
            expected_return=_parse_date(details.get("returnDate")),
            provider=ProviderEnum.ESPN,
        )

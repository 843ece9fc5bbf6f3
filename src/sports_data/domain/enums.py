from __future__ import annotations

from enum import StrEnum


class Sport(StrEnum):
    SOCCER = "soccer"
    BASKETBALL = "basketball"
    HOCKEY = "hockey"
    AMERICAN_FOOTBALL = "american_football"


class ProviderEnum(StrEnum):
    API_SPORTS = "api-sports"
    ODDS_API = "the-odds-api"
    ESPN = "espn"
    NONE = "none"


class MatchStatus(StrEnum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    HALFTIME = "halftime"
    FINISHED = "finished"
    POSTPONED = "postponed"
    CANCELLED = "cancelled"
    SUSPENDED = "suspended"
    UNKNOWN = "unknown"


class InjuryStatus(StrEnum):
    OUT = "out"
    DOUBTFUL = "doubtful"
    QUESTIONABLE = "questionable"
    PROBABLE = "probable"
    DAY_TO_DAY = "day-to-day"


class ErrorCode(StrEnum):
    SPORT_NOT_SUPPORTED = "SPORT_NOT_SUPPORTED"
    NOT_SUPPORTED = "NOT_SUPPORTED"
    TEAM_NOT_FOUND = "TEAM_NOT_FOUND"
    TEAMS_NOT_FOUND = "TEAMS_NOT_FOUND"
    STATS_NOT_FOUND = "STATS_NOT_FOUND"
    FETCH_ERROR = "FETCH_ERROR"
    API_NOT_CONFIGURED = "API_NOT_CONFIGURED"
    API_ERROR = "API_ERROR"
    MATCH_NOT_FOUND = "MATCH_NOT_FOUND"
    NO_ODDS_FOUND = "NO_ODDS_FOUND"
    INVALID_QUERY = "INVALID_QUERY"

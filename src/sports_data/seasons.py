"""
Calendar-driven season resolution.

API-Sports keys seasons either by the starting year ("2025") or by the two
calendar years the season spans ("2025-2026"). A league's season rolls over
on its cutover month; before that month the previous season is still the
current one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import StrEnum


class SeasonStyle(StrEnum):
    START_YEAR = "start_year"
    SPLIT_YEARS = "split_years"


@dataclass(frozen=True)
class SeasonRule:
    cutover_month: int
    style: SeasonStyle = SeasonStyle.START_YEAR

    def __post_init__(self) -> None:
        if not 1 <= self.cutover_month <= 12:
            raise ValueError(f"cutover_month must be 1..12, got {self.cutover_month}")


def _today() -> date:
    return datetime.now(tz=UTC).date()


def season_start_year(rule: SeasonRule, today: date | None = None) -> int:
    today = today or _today()
    return today.year if today.month >= rule.cutover_month else today.year - 1


def format_season(rule: SeasonRule, start_year: int) -> str:
    if rule.style is SeasonStyle.SPLIT_YEARS:
        return f"{start_year}-{start_year + 1}"
    return str(start_year)


def current_season(rule: SeasonRule, today: date | None = None) -> str:
    return format_season(rule, season_start_year(rule, today))


def previous_season(rule: SeasonRule, today: date | None = None) -> str:
    return format_season(rule, season_start_year(rule, today) - 1)

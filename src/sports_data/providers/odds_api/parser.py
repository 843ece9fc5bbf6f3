from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from typing import Any

from sports_data.core.text import normalize_team_alias
from sports_data.domain.entities import (
    Moneyline,
    Odds,
    PricedLine,
    Spread,
    Totals,
    UpcomingEvent,
    utcnow,
)
from sports_data.domain.enums import ProviderEnum, Sport
from sports_data.resolution.matching import odds_team_matches

ApiItem = dict[str, Any]


def parse_iso_z(value: str) -> datetime:
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    dt = datetime.fromisoformat(v)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def _optional_iso_z(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_iso_z(value)
    except ValueError:
        return None


def names_equal(provider_name: Any, names: Sequence[str]) -> bool:
    if not isinstance(provider_name, str):
        return False
    n = normalize_team_alias(provider_name)
    return bool(n) and any(normalize_team_alias(name) == n for name in names)


def names_contain(provider_name: Any, names: Sequence[str]) -> bool:
    if not isinstance(provider_name, str):
        return False
    n = normalize_team_alias(provider_name)
    if not n:
        return False
    for name in names:
        c = normalize_team_alias(name)
        if c and (c in n or n in c):
            return True
    return False


def matches_any(provider_name: Any, names: Sequence[str]) -> bool:
    if not isinstance(provider_name, str):
        return False
    return any(odds_team_matches(provider_name, n) for n in names)


def find_event(
    events: Iterable[ApiItem], *, home_names: Sequence[str], away_names: Sequence[str]
) -> ApiItem | None:
    """
    First event whose home and away sides both match the requested teams.

    A name-containment hit on both sides anywhere in the list wins over the
    looser word-overlap match, so "Lakers" never lands on a Clippers game.
    """

    candidates = [e for e in events if isinstance(e, dict)]
    for matcher in (names_contain, matches_any):
        for event in candidates:
            if matcher(event.get("home_team"), home_names) and matcher(
                event.get("away_team"), away_names
            ):
                return event
    return None


def _outcomes(book: ApiItem, market_key: str) -> list[ApiItem]:
    for market in book.get("markets") or []:
        if isinstance(market, dict) and market.get("key") == market_key:
            return [o for o in market.get("outcomes") or [] if isinstance(o, dict)]
    return []


def _price(outcome: ApiItem | None) -> float | None:
    if outcome is None:
        return None
    price = outcome.get("price")
    if isinstance(price, bool) or not isinstance(price, int | float):
        return None
    return float(price)


def _line(outcome: ApiItem) -> PricedLine | None:
    price = _price(outcome)
    if price is None:
        return None
    point = outcome.get("point")
    line = float(point) if isinstance(point, int | float) and not isinstance(point, bool) else 0.0
    return PricedLine(line=line, odds=price)


def _side(outcomes: list[ApiItem], names: Sequence[str]) -> ApiItem | None:
    for matcher in (names_equal, names_contain, matches_any):
        found = next((o for o in outcomes if matcher(o.get("name"), names)), None)
        if found is not None:
            return found
    return None


def _named(outcomes: list[ApiItem], label: str) -> ApiItem | None:
    return next(
        (o for o in outcomes if str(o.get("name") or "").strip().lower() == label), None
    )


def parse_bookmaker(
    event: ApiItem,
    book: ApiItem,
    *,
    sport: Sport,
    home_names: Sequence[str],
    away_names: Sequence[str],
) -> Odds:
    """
    One bookmaker's h2h / spreads / totals markets as a normalized Odds.

    A market is only set when both of its sides were found.
    """

    moneyline = None
    h2h = _outcomes(book, "h2h")
    home_price = _price(_side(h2h, home_names))
    away_price = _price(_side(h2h, away_names))
    if home_price is not None and away_price is not None:
        moneyline = Moneyline(home=home_price, away=away_price, draw=_price(_named(h2h, "draw")))

    spread = None
    spreads = _outcomes(book, "spreads")
    home_side = _side(spreads, home_names)
    away_side = _side(spreads, away_names)
    home_line = _line(home_side) if home_side else None
    away_line = _line(away_side) if away_side else None
    if home_line and away_line:
        spread = Spread(home=home_line, away=away_line)

    total = None
    totals = _outcomes(book, "totals")
    over = _named(totals, "over")
    under = _named(totals, "under")
    over_line = _line(over) if over else None
    under_line = _line(under) if under else None
    if over_line and under_line:
        total = Totals(over=over_line, under=under_line)

    return Odds(
        match_id=str(event.get("id")),
        sport=sport,
        bookmaker=str(book.get("title") or book.get("key") or "unknown"),
        last_update=_optional_iso_z(book.get("last_update")) or utcnow(),
        moneyline=moneyline,
        spread=spread,
        total=total,
        provider=ProviderEnum.ODDS_API,
    )


def parse_event_odds(
    event: ApiItem,
    *,
    sport: Sport,
    home_names: Sequence[str],
    away_names: Sequence[str],
) -> list[Odds]:
    return [
        parse_bookmaker(event, book, sport=sport, home_names=home_names, away_names=away_names)
        for book in event.get("bookmakers") or []
        if isinstance(book, dict)
    ]


def parse_upcoming_event(item: ApiItem, *, sport_key: str) -> UpcomingEvent:
    return UpcomingEvent(
        id=str(item.get("id")),
        sport=str(item.get("sport_title") or sport_key),
        sport_key=sport_key,
        home_team=str(item.get("home_team") or ""),
        away_team=str(item.get("away_team") or ""),
        commence_time=_optional_iso_z(item.get("commence_time")),
    )

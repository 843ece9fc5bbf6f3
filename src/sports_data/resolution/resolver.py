"""
Team name resolution.

Maps whatever a user typed ("Mavs", "LA Lakers", "Montréal") to the
canonical team name of the sport plus an ordered list of search strings for
provider lookups. Pure and deterministic: table lookups only, no I/O.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from functools import lru_cache

from sports_data.core.text import normalize_team_alias
from sports_data.domain.enums import Sport

from .aliases import TEAM_TABLES, TeamAliasEntry


@dataclass(frozen=True)
class ResolvedName:
    raw: str
    canonical: str
    candidates: tuple[str, ...]
    entry: TeamAliasEntry | None = None

    @property
    def in_table(self) -> bool:
        return self.entry is not None


@dataclass(frozen=True)
class _SportIndex:
    by_alias: dict[str, TeamAliasEntry]
    unique_cities: frozenset[str]


def _entry_keys(entry: TeamAliasEntry) -> list[str]:
    keys = [entry.full_name, entry.nickname, f"{entry.city} {entry.nickname}", *entry.aliases]
    return [normalize_team_alias(k) for k in keys]


@lru_cache(maxsize=None)
def _index_for(sport: Sport) -> _SportIndex:
    entries = TEAM_TABLES.get(sport, ())

    by_alias: dict[str, TeamAliasEntry] = {}
    ambiguous: set[str] = set()
    for entry in entries:
        for key in _entry_keys(entry):
            owner = by_alias.get(key)
            if owner is not None and owner is not entry:
                ambiguous.add(key)
            by_alias.setdefault(key, entry)
    for key in ambiguous:
        del by_alias[key]

    city_counts = Counter(normalize_team_alias(e.city) for e in entries)
    unique_cities = frozenset(c for c, n in city_counts.items() if n == 1)
    return _SportIndex(by_alias=by_alias, unique_cities=unique_cities)


def lookup_entry(raw: str, sport: Sport) -> TeamAliasEntry | None:
    return _index_for(sport).by_alias.get(normalize_team_alias(raw))


def resolve(raw: str, sport: Sport) -> ResolvedName:
    """
    Resolve `raw` for `sport`.

    Candidates run most specific first: full name, nickname, city (only when
    no other team of the sport shares it), then the literal input. Unknown
    names resolve to the trimmed, lower-cased input as the sole candidate;
    callers try that literally instead of treating it as an error.
    """

    literal = raw.strip().lower()
    entry = lookup_entry(raw, sport)
    if entry is None:
        return ResolvedName(raw=raw, canonical=literal, candidates=(literal,))

    index = _index_for(sport)
    city = normalize_team_alias(entry.city)

    ordered = [normalize_team_alias(entry.full_name), normalize_team_alias(entry.nickname)]
    if city in index.unique_cities:
        ordered.append(city)
    ordered.append(literal)

    candidates: list[str] = []
    for c in ordered:
        if c and c not in candidates:
            candidates.append(c)

    return ResolvedName(raw=raw, canonical=entry.full_name, candidates=tuple(candidates), entry=entry)


def resolve_team_name(raw: str, sport: Sport) -> str:
    return resolve(raw, sport).canonical


def get_search_variations(raw: str, sport: Sport) -> list[str]:
    return list(resolve(raw, sport).candidates)

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from sports_data.core.text import normalize_team_alias, words

T = TypeVar("T")

# Lowest word-overlap score accepted as a fuzzy team match. Lower admits wrong
# teams, higher turns legitimately fuzzy queries into "not found".
FUZZY_MATCH_THRESHOLD = 0.5

# Club-name prefixes shared by many unrelated teams ("Real Madrid" / "Real Betis").
COMMON_CLUB_PREFIXES = frozenset(
    {"real", "fc", "cf", "ac", "as", "sc", "cd", "ud", "rc", "rcd", "athletic", "atletico"}
)


@dataclass(frozen=True)
class TeamMatch(Generic[T]):
    item: T
    kind: str
    candidate: str
    score: float = 1.0


def word_overlap_score(a: str, b: str) -> float:
    """
    Words of `a` found (by substring, either way) among the words of `b`,
    over the longer of the two word lists.
    """

    a_words = words(a)
    b_words = words(b)
    if not a_words or not b_words:
        return 0.0
    overlap = sum(1 for w in a_words if any(w in bw or bw in w for bw in b_words))
    return overlap / max(len(a_words), len(b_words))


def match_team(
    candidates: Sequence[str],
    items: Sequence[T],
    *,
    name_of: Callable[[T], str],
    resolved_name: str,
    threshold: float = FUZZY_MATCH_THRESHOLD,
) -> TeamMatch[T] | None:
    """
    Pick the team named by `candidates` out of a league roster.

    Candidates are tried in priority order; for each one an exact
    (normalized) name beats a substring hit in either direction. Only when no
    candidate hits does the best word-overlap score against `resolved_name`
    decide, and only at or above `threshold`.
    """

    named = [(normalize_team_alias(name_of(i)), i) for i in items]

    for candidate in candidates:
        c = normalize_team_alias(candidate)
        if not c:
            continue
        for norm, item in named:
            if norm == c:
                return TeamMatch(item=item, kind="exact", candidate=candidate)
        for norm, item in named:
            if norm and (c in norm or norm in c):
                return TeamMatch(item=item, kind="partial", candidate=candidate)

    best: T | None = None
    best_score = 0.0
    for _, item in named:
        score = word_overlap_score(name_of(item), resolved_name)
        if score > best_score:
            best, best_score = item, score

    if best is not None and best_score >= threshold:
        return TeamMatch(item=best, kind="fuzzy", candidate=resolved_name, score=best_score)
    return None


def odds_team_matches(provider_name: str, team_name: str) -> bool:
    """
    Stricter matcher for odds-provider event names.

    Generic club prefixes are ignored; with significant words on both sides,
    any overlap among them decides. Otherwise only words of 4+ characters
    may overlap.
    """

    n1 = normalize_team_alias(provider_name)
    n2 = normalize_team_alias(team_name)
    if not n1 or not n2:
        return False

    if n1 == n2:
        return True
    if n1 in n2 or n2 in n1:
        return True

    words1 = [w for w in n1.split() if len(w) > 2]
    words2 = [w for w in n2.split() if len(w) > 2]

    significant1 = [w for w in words1 if w not in COMMON_CLUB_PREFIXES]
    significant2 = [w for w in words2 if w not in COMMON_CLUB_PREFIXES]

    if significant1 and significant2:
        return any(w1 in w2 or w2 in w1 for w1 in significant1 for w2 in significant2)

    return any(
        len(w1) >= 4 and len(w2) >= 4 and (w1 in w2 or w2 in w1) for w1 in words1 for w2 in words2
    )

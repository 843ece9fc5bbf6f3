from __future__ import annotations

from sports_data.resolution.matching import match_team, odds_team_matches, word_overlap_score

NBA = [
    {"id": 132, "name": "Charlotte Hornets"},
    {"id": 134, "name": "Brooklyn Nets"},
    {"id": 145, "name": "Los Angeles Lakers"},
]


def _name(item: dict) -> str:
    return item["name"]


def test_exact_beats_substring_across_candidates() -> None:
    # "nets" is a substring of "hornets"; the full-name candidate is tried first.
    match = match_team(
        ["brooklyn nets", "nets"], NBA, name_of=_name, resolved_name="Brooklyn Nets"
    )

    assert match is not None
    assert match.item["id"] == 134
    assert match.kind == "exact"


def test_substring_match_either_direction() -> None:
    match = match_team(["lakers"], NBA, name_of=_name, resolved_name="lakers")

    assert match is not None
    assert match.item["id"] == 145
    assert match.kind == "partial"


def test_fuzzy_match_requires_threshold() -> None:
    teams = [{"name": "Real Madrid CF"}, {"name": "Atletico Madrid"}]

    hit = match_team(["zzz"], teams, name_of=_name, resolved_name="Real Madrid")
    assert hit is not None
    assert hit.kind == "fuzzy"
    assert hit.item["name"] == "Real Madrid CF"
    assert hit.score >= 0.5

    miss = match_team(["zzz"], NBA, name_of=_name, resolved_name="Springfield Isotopes")
    assert miss is None


def test_word_overlap_score() -> None:
    assert word_overlap_score("Los Angeles Lakers", "Los Angeles Lakers") == 1.0
    assert word_overlap_score("Boston Celtics", "Springfield Isotopes") == 0.0
    assert word_overlap_score("Real Madrid CF", "Real Madrid") == 2 / 3


def test_odds_matching_ignores_shared_club_prefixes() -> None:
    assert odds_team_matches("Real Madrid", "Real Madrid")
    assert odds_team_matches("Atlético Madrid", "Atletico Madrid")
    assert not odds_team_matches("Real Betis", "Real Madrid")
    assert odds_team_matches("Manchester United", "Man United FC")


def test_odds_matching_distinct_clubs_and_empty_names() -> None:
    assert not odds_team_matches("FC Porto", "FC Basel")
    assert not odds_team_matches("", "Los Angeles Lakers")

from __future__ import annotations

import pytest

from sports_data.core.text import normalize_team_alias, strip_diacritics
from sports_data.domain.enums import Sport
from sports_data.resolution.resolver import get_search_variations, resolve, resolve_team_name


@pytest.mark.parametrize("raw", ["Lakers", "LA Lakers", "los angeles lakers", "  LAKERS ", "lal"])
def test_lakers_spellings_share_canonical_name(raw: str) -> None:
    assert resolve_team_name(raw, Sport.BASKETBALL) == "Los Angeles Lakers"


def test_candidates_run_most_specific_first() -> None:
    resolved = resolve("Mavs", Sport.BASKETBALL)

    assert resolved.in_table
    assert resolved.canonical == "Dallas Mavericks"
    assert resolved.candidates == ("dallas mavericks", "mavericks", "dallas", "mavs")


def test_shared_city_is_not_a_candidate() -> None:
    # Los Angeles hosts two NBA teams; the city alone is ambiguous.
    candidates = get_search_variations("Clippers", Sport.BASKETBALL)

    assert "los angeles" not in candidates
    assert candidates[0] == "los angeles clippers"


def test_unknown_name_falls_back_to_literal() -> None:
    resolved = resolve("  Springfield Isotopes ", Sport.BASKETBALL)

    assert not resolved.in_table
    assert resolved.canonical == "springfield isotopes"
    assert resolved.candidates == ("springfield isotopes",)


def test_diacritics_are_ignored() -> None:
    assert strip_diacritics("Dončić") == "Doncic"
    assert resolve_team_name("Montréal Canadiens", Sport.HOCKEY) == "Montreal Canadiens"
    assert resolve_team_name("habs", Sport.HOCKEY) == "Montreal Canadiens"


def test_nickname_shared_across_sports_resolves_per_sport() -> None:
    assert resolve_team_name("Jets", Sport.HOCKEY) == "Winnipeg Jets"
    assert resolve_team_name("Jets", Sport.AMERICAN_FOOTBALL) == "New York Jets"


def test_soccer_aliases() -> None:
    assert resolve_team_name("Man Utd", Sport.SOCCER) == "Manchester United"
    assert resolve_team_name("Gunners", Sport.SOCCER) == "Arsenal"


def test_normalize_team_alias_drops_punctuation() -> None:
    assert normalize_team_alias("St. Louis Blues") == "st louis blues"
    assert normalize_team_alias("Paris Saint-Germain") == "paris saint germain"

from __future__ import annotations

import re
import unicodedata

_whitespace_re = re.compile(r"\s+")
_non_alnum_re = re.compile(r"[^a-z0-9\s]")


def strip_diacritics(value: str) -> str:
    """'Dončić' -> 'Doncic', 'Montréal' -> 'Montreal'."""

    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_team_alias(value: str) -> str:
    """Normalize a team alias for stable matching across sources."""

    v = strip_diacritics(value).strip().lower()
    v = v.replace(".", "")
    v = _non_alnum_re.sub(" ", v)
    v = _whitespace_re.sub(" ", v)
    return v.strip()


def words(value: str) -> list[str]:
    return normalize_team_alias(value).split()


def last_word(value: str) -> str:
    parts = value.split()
    return parts[-1] if parts else value

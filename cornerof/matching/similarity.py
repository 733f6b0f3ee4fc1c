from __future__ import annotations

from collections.abc import Mapping, Sequence

from .config import DEFAULT_VARIATIONS

EXACT_SCORE = 100.0
CONTAINS_SCORE = 85.0
MAX_TOKEN_SCORE = 70.0
VARIATION_SCORE = 60.0

_MIN_TOKEN_LENGTH = 3


def _token_overlap_score(n1: str, n2: str) -> float:
    words1 = n1.split()
    words2 = n2.split()

    # Words of two letters or fewer ("of", "in") never count as shared.
    common = [
        word
        for word in words1
        if len(word) >= _MIN_TOKEN_LENGTH
        and any(other in word or word in other for other in words2)
    ]
    if not common:
        return 0.0

    similarity = len(common) * 2 / (len(words1) + len(words2))
    return min(similarity * MAX_TOKEN_SCORE, MAX_TOKEN_SCORE)


def _shares_variation(
    n1: str,
    n2: str,
    variations: Mapping[str, Sequence[str]],
) -> bool:
    for full, abbrevs in variations.items():
        if full in n1 and any(abbrev in n2 for abbrev in abbrevs):
            return True
        if full in n2 and any(abbrev in n1 for abbrev in abbrevs):
            return True
    return False


def calculate_neighborhood_similarity(
    neighborhood1: str | None,
    neighborhood2: str | None,
    variations: Mapping[str, Sequence[str]] = DEFAULT_VARIATIONS,
) -> float:
    """
    Score how likely two free-text neighborhood names refer to the same area.

    Rules are tried in order and the first one that applies wins:

    - exact match after lowercasing and trimming: 100
    - one name contains the other ("Greenwich" / "Greenwich Village"): 85
    - shared words, weighted by how many of the words are shared: up to 70
    - a known abbreviation on one side of a term on the other ("bk" / "Brooklyn"): 60
    - otherwise 0

    Empty or missing names score 0.
    """
    if not neighborhood1 or not neighborhood2:
        return 0.0

    n1 = neighborhood1.lower().strip()
    n2 = neighborhood2.lower().strip()
    if not n1 or not n2:
        return 0.0

    if n1 == n2:
        return EXACT_SCORE

    if n1 in n2 or n2 in n1:
        return CONTAINS_SCORE

    token_score = _token_overlap_score(n1, n2)
    if token_score > 0:
        return token_score

    if _shares_variation(n1, n2, variations):
        return VARIATION_SCORE

    return 0.0


def best_similarity(
    neighborhood: str | None,
    candidates: Sequence[str],
    variations: Mapping[str, Sequence[str]] = DEFAULT_VARIATIONS,
) -> float:
    """Highest similarity of ``neighborhood`` against any of ``candidates`` (0 if none)."""
    best = 0.0
    for candidate in candidates:
        best = max(best, calculate_neighborhood_similarity(neighborhood, candidate, variations))
    return best

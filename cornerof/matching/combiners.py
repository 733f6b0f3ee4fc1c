from __future__ import annotations

from .config import DEFAULT_MATCHING_CONFIG, MatchingConfig
from .models import GroupIntent, GroupPreference
from .similarity import calculate_neighborhood_similarity

_CHILL_WORDS = ("chill", "relax")
_PARTY_WORDS = ("party", "fun")


def combine_group_intents(intent1: GroupIntent, intent2: GroupIntent) -> GroupIntent:
    """Merge two composition preferences, falling back to ``mixed`` when they differ."""
    if intent1 == intent2:
        return intent1
    if intent1 == GroupIntent.any:
        return intent2
    if intent2 == GroupIntent.any:
        return intent1
    # any remaining combination (mixed + anything, boys + girls) is mixed
    return GroupIntent.mixed


def _mentions(vibe: str, words: tuple[str, ...]) -> bool:
    return any(word in vibe for word in words)


def combine_group_vibes(vibe1: str | None, vibe2: str | None) -> str:
    if not vibe1 and not vibe2:
        return "casual"
    if not vibe1:
        return vibe2
    if not vibe2:
        return vibe1

    v1 = vibe1.lower().strip()
    v2 = vibe2.lower().strip()

    if v1 == v2:
        return vibe1

    if _mentions(v1, _CHILL_WORDS) and _mentions(v2, _CHILL_WORDS):
        return "chill and relaxed"

    if _mentions(v1, _PARTY_WORDS) and _mentions(v2, _PARTY_WORDS):
        return "fun and energetic"

    return f"{vibe1} and {vibe2}"


def get_primary_neighborhood(
    group_a: GroupPreference,
    group_b: GroupPreference,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> str:
    """
    Pick the neighborhood to present for a matched pair.

    When the groups name the same area in different ways, the longer (more
    specific) spelling wins; otherwise the first two distinct neighborhoods
    are shown together as ``"A / B"``.
    """
    neighborhoods_a = group_a.neighborhood_list()
    neighborhoods_b = group_b.neighborhood_list()

    if not neighborhoods_a and not neighborhoods_b:
        return config.default_city
    if not neighborhoods_a:
        return neighborhoods_b[0]
    if not neighborhoods_b:
        return neighborhoods_a[0]

    best_match = ""
    best_similarity = 0.0
    for n1 in neighborhoods_a:
        for n2 in neighborhoods_b:
            similarity = calculate_neighborhood_similarity(n1, n2, config.variations)
            if similarity > best_similarity:
                best_similarity = similarity
                best_match = n1 if len(n1) > len(n2) else n2

    if best_similarity >= config.perfect_match_score:
        return best_match

    unique = list(dict.fromkeys(neighborhoods_a + neighborhoods_b))
    return " / ".join(unique[:2])

from __future__ import annotations

from .config import DEFAULT_MATCHING_CONFIG, MatchingConfig
from .models import GroupPreference, Venue
from .similarity import best_similarity


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def generate_venue_reasoning(
    venue: Venue,
    group_a: GroupPreference,
    group_b: GroupPreference,
    is_ai_generated: bool = False,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> str:
    """Explain to both groups why ``venue`` was picked for them."""
    neighborhoods = _unique(group_a.neighborhood_list() + group_b.neighborhood_list())
    vibes = _unique(group_a.vibe_list() + group_b.vibe_list())

    if is_ai_generated:
        return (
            f"AI suggested this venue based on your combined preferences for "
            f"{', '.join(vibes)} vibes in the {'/'.join(neighborhoods)} area."
        )

    score_a = best_similarity(venue.neighborhood, group_a.neighborhood_list(), config.variations)
    score_b = best_similarity(venue.neighborhood, group_b.neighborhood_list(), config.variations)

    if score_a >= config.perfect_match_score or score_b >= config.perfect_match_score:
        return (
            f"Perfect location match! {venue.name} is right in your preferred "
            f"neighborhood and matches your {' and '.join(vibes)} vibes."
        )
    if score_a >= config.nearby_score or score_b >= config.nearby_score:
        return (
            f"Great choice! {venue.name} is in a nearby area that works well "
            f"for both groups' preferences."
        )
    return f"{venue.name} looks like a good spot that should work well for both groups!"

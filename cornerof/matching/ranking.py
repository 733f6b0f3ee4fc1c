from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

from .config import DEFAULT_MATCHING_CONFIG, DEFAULT_VARIATIONS, MatchingConfig
from .models import GroupPreference, ScoredVenue, Venue
from .similarity import best_similarity, calculate_neighborhood_similarity

logger = logging.getLogger(__name__)


class VenueSource(Protocol):
    def list_venues(self) -> list[Venue]: ...


def rank_venues(
    venues: Iterable[Venue],
    group_a: GroupPreference,
    group_b: GroupPreference,
    min_score: float = DEFAULT_MATCHING_CONFIG.min_score,
    variations: Mapping[str, Sequence[str]] = DEFAULT_VARIATIONS,
) -> list[ScoredVenue]:
    """
    Score every venue against both groups and rank by combined score.

    A group's score for a venue is the best similarity between the venue's
    neighborhood and any of the group's neighborhoods. The combined score is
    the plain mean of the two. Venues below ``min_score`` are dropped; ties
    keep their input order.
    """
    neighborhoods_a = group_a.neighborhood_list()
    neighborhoods_b = group_b.neighborhood_list()

    scored: list[ScoredVenue] = []
    for venue in venues:
        score_a = best_similarity(venue.neighborhood, neighborhoods_a, variations)
        score_b = best_similarity(venue.neighborhood, neighborhoods_b, variations)
        scored.append(ScoredVenue(
            venue=venue,
            score=(score_a + score_b) / 2,
            group_a_score=score_a,
            group_b_score=score_b,
        ))

    qualifying = [s for s in scored if s.score >= min_score]
    return sorted(qualifying, key=lambda s: s.score, reverse=True)


def find_matching_venues(
    venues: Iterable[Venue],
    group_a: GroupPreference,
    group_b: GroupPreference,
    min_score: float = DEFAULT_MATCHING_CONFIG.min_score,
    variations: Mapping[str, Sequence[str]] = DEFAULT_VARIATIONS,
) -> list[Venue]:
    """Venues good enough for both groups, best first."""
    return [s.venue for s in rank_venues(venues, group_a, group_b, min_score, variations)]


def venues_for_neighborhood(
    venues: Iterable[Venue],
    neighborhood: str,
    limit: int = DEFAULT_MATCHING_CONFIG.candidate_limit,
    min_score: float = DEFAULT_MATCHING_CONFIG.min_score,
    variations: Mapping[str, Sequence[str]] = DEFAULT_VARIATIONS,
) -> list[tuple[Venue, float]]:
    """Venues near a single neighborhood with their similarity, best first."""
    scored = [
        (venue, calculate_neighborhood_similarity(venue.neighborhood, neighborhood, variations))
        for venue in venues
    ]
    qualifying = [pair for pair in scored if pair[1] >= min_score]
    return sorted(qualifying, key=lambda pair: pair[1], reverse=True)[:limit]


def select_best(ranked: Sequence[ScoredVenue]) -> Venue | None:
    """Return the highest-ranked venue, or ``None`` when nothing qualified."""
    if not ranked:
        return None
    return ranked[0].venue


def get_best_venue_suggestion(
    group_a: GroupPreference,
    group_b: GroupPreference,
    store: VenueSource,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> Venue | None:
    """
    Fetch the curated venues and pick the best one for a pair of groups.

    A failing store is treated the same as "no qualifying venue".
    """
    try:
        venues = store.list_venues()
    except Exception:
        logger.warning("Venue lookup failed, no database suggestion available", exc_info=True)
        return None

    return select_best(rank_venues(venues, group_a, group_b, config.min_score, config.variations))

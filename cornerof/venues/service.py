from __future__ import annotations

import logging
import time
from typing import Any

from ..analytics.store import record_event
from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import suggest_venue
from ..matching.combiners import (
    combine_group_intents,
    combine_group_vibes,
    get_primary_neighborhood,
)
from ..matching.config import DEFAULT_MATCHING_CONFIG, MatchingConfig
from ..matching.models import GroupPreference
from ..matching.ranking import VenueSource, get_best_venue_suggestion, venues_for_neighborhood
from ..matching.reasoning import generate_venue_reasoning
from .models import AIVenueRequest, SuggestionSource, VenueSuggestion

logger = logging.getLogger(__name__)

# (keywords in the combined vibe, venue name, description)
_FALLBACK_VENUES: list[tuple[tuple[str, ...], str, str]] = [
    (("chill",), "The Coffee Bean", "A cozy coffee shop perfect for relaxed conversations"),
    (("party", "fun"), "The Social Club", "A lively spot with great atmosphere for groups"),
    (("upscale", "fancy"), "The Metropolitan", "An upscale dining experience in the heart of the city"),
]
_DEFAULT_FALLBACK = ("Central Park", "A great outdoor meeting spot")


def _label(group: GroupPreference) -> str:
    return group.name or group.id or "unnamed group"


def _first_vibe(group: GroupPreference) -> str:
    vibes = group.vibe_list()
    return vibes[0] if vibes else ""


def combined_vibe(group_a: GroupPreference, group_b: GroupPreference) -> str:
    """Merge the leading vibe of each group."""
    return combine_group_vibes(_first_vibe(group_a), _first_vibe(group_b))


def build_ai_request(
    group_a: GroupPreference,
    group_b: GroupPreference,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> AIVenueRequest:
    neighborhoods = list(dict.fromkeys(group_a.neighborhood_list() + group_b.neighborhood_list()))
    vibes = list(dict.fromkeys(group_a.vibe_list() + group_b.vibe_list()))
    return AIVenueRequest(
        neighborhoods=neighborhoods or [get_primary_neighborhood(group_a, group_b, config)],
        vibes=vibes or [combined_vibe(group_a, group_b)],
        group_intent=combine_group_intents(group_a.group_intent, group_b.group_intent),
    )


def _ai_candidates(
    store: VenueSource,
    neighborhoods: list[str],
    config: MatchingConfig,
) -> list[dict[str, Any]]:
    try:
        venues = store.list_venues()
    except Exception:
        logger.warning("Venue lookup failed, asking the LLM without candidates", exc_info=True)
        return []

    best: dict[str, dict[str, Any]] = {}
    for neighborhood in neighborhoods:
        for venue, score in venues_for_neighborhood(
            venues, neighborhood, config.candidate_limit, config.min_score, config.variations
        ):
            if venue.id not in best or best[venue.id]["similarity"] < score:
                best[venue.id] = {**venue.model_dump(), "similarity": score}

    ranked = sorted(best.values(), key=lambda c: c["similarity"], reverse=True)
    return ranked[: config.candidate_limit]


def _ai_suggestion(
    group_a: GroupPreference,
    group_b: GroupPreference,
    store: VenueSource,
    matching_config: MatchingConfig,
    llm_config: LLMConfig,
) -> VenueSuggestion | None:
    request = build_ai_request(group_a, group_b, matching_config)
    candidates = _ai_candidates(store, request.neighborhoods, matching_config)

    result = suggest_venue(request, candidates, config=llm_config)
    if result is None:
        return None

    return VenueSuggestion(
        venue_name=result.venue_suggestion,
        reasoning=result.reasoning,
        venue_url=result.venue_url,
        venue_description=result.venue_description,
        source=SuggestionSource.ai,
    )


def fallback_venue_suggestion(
    group_a: GroupPreference,
    group_b: GroupPreference,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
) -> VenueSuggestion:
    """Static suggestion used when neither the database nor the LLM came up with one."""
    neighborhood = get_primary_neighborhood(group_a, group_b, config)
    vibe = combined_vibe(group_a, group_b)
    vibe_lower = vibe.lower()

    venue_name, description = _DEFAULT_FALLBACK
    for keywords, name, desc in _FALLBACK_VENUES:
        if any(k in vibe_lower for k in keywords):
            venue_name, description = name, desc
            break

    return VenueSuggestion(
        venue_name=venue_name,
        reasoning=(
            f"Let's meet at {venue_name} in {neighborhood}! "
            f"This should be a great spot that matches your {vibe} vibe."
        ),
        venue_description=description,
        source=SuggestionSource.none,
    )


def get_venue_suggestion_for_match(
    group_a: GroupPreference,
    group_b: GroupPreference,
    store: VenueSource,
    matching_config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
    llm_config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> VenueSuggestion:
    """
    Suggest a meeting venue for two matched groups.

    Tries the curated venue list first, then the LLM, then a static pick
    based on the combined vibe. Always returns a suggestion.
    """
    start_time = time.time()
    logger.info("Getting venue suggestion for %s + %s", _label(group_a), _label(group_b))

    venue = get_best_venue_suggestion(group_a, group_b, store, matching_config)
    if venue is not None:
        logger.info("Found database venue: %s", venue.name)
        suggestion = VenueSuggestion(
            venue_name=venue.name,
            reasoning=generate_venue_reasoning(venue, group_a, group_b, False, matching_config),
            venue_url=venue.url,
            venue_description=venue.description,
            source=SuggestionSource.database,
        )
    else:
        logger.info("No database venue found, using AI suggestion")
        suggestion = _ai_suggestion(group_a, group_b, store, matching_config, llm_config)
        if suggestion is None:
            logger.info("AI suggestion unavailable, using static fallback")
            suggestion = fallback_venue_suggestion(group_a, group_b, matching_config)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("venue_suggestion", {
        "group_ids": [group_a.id, group_b.id],
        "primary_neighborhood": get_primary_neighborhood(group_a, group_b, matching_config),
        "source": suggestion.source.value,
        "venue_name": suggestion.venue_name,
        "response_time_ms": elapsed_ms,
    })

    return suggestion


def is_valid_venue_suggestion(suggestion: VenueSuggestion | None) -> bool:
    return bool(
        suggestion
        and suggestion.venue_name.strip()
        and suggestion.reasoning.strip()
    )

from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .matching.combiners import (
    combine_group_intents,
    get_primary_neighborhood,
)
from .matching.models import Venue
from .matching.ranking import VenueSource, rank_venues, select_best
from .matching.similarity import calculate_neighborhood_similarity
from .venues.data_store import VenueStoreError, get_venue_store
from .venues.models import (
    CombineResponse,
    MatchRequest,
    MatchResponse,
    SimilarityRequest,
    SimilarityResponse,
    VenueSuggestion,
)
from .venues.service import combined_vibe, get_venue_suggestion_for_match

app = FastAPI(title="Corner Of Venue Matching API", version="1.0.0")


def _list_venues(store: VenueSource) -> list[Venue]:
    try:
        return store.list_venues()
    except VenueStoreError as exc:
        raise HTTPException(status_code=503, detail="Venue list unavailable") from exc


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/venues", response_model=list[Venue])
def venues(store: VenueSource = Depends(get_venue_store)) -> list[Venue]:
    return _list_venues(store)


# ── Matching endpoints ───────────────────────────────────────────────────


@app.post("/similarity", response_model=SimilarityResponse)
def similarity(body: SimilarityRequest) -> SimilarityResponse:
    return SimilarityResponse(
        a=body.a,
        b=body.b,
        score=calculate_neighborhood_similarity(body.a, body.b),
    )


@app.post("/venues/match", response_model=MatchResponse)
def match_venues(
    body: MatchRequest,
    store: VenueSource = Depends(get_venue_store),
) -> MatchResponse:
    ranked = rank_venues(_list_venues(store), body.group_a, body.group_b)
    return MatchResponse(matches=ranked, best=select_best(ranked))


@app.post("/combine", response_model=CombineResponse)
def combine(body: MatchRequest) -> CombineResponse:
    a, b = body.group_a, body.group_b
    return CombineResponse(
        group_intent=combine_group_intents(a.group_intent, b.group_intent),
        vibe=combined_vibe(a, b),
        primary_neighborhood=get_primary_neighborhood(a, b),
    )


@app.post("/suggestions", response_model=VenueSuggestion)
def suggestions(
    body: MatchRequest,
    store: VenueSource = Depends(get_venue_store),
) -> VenueSuggestion:
    # Store failures are absorbed by the service and fall through to the LLM
    return get_venue_suggestion_for_match(body.group_a, body.group_b, store)


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())

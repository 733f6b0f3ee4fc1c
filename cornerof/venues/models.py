from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..matching.models import GroupIntent, GroupPreference, ScoredVenue, Venue


class SuggestionSource(str, Enum):
    database = "database"
    ai = "ai"
    none = "none"


class VenueSuggestion(BaseModel):
    venue_name: str
    reasoning: str
    venue_url: str | None = None
    venue_description: str | None = None
    source: SuggestionSource


class AIVenueRequest(BaseModel):
    neighborhoods: list[str] = Field(default_factory=list)
    vibes: list[str] = Field(default_factory=list)
    group_intent: GroupIntent = GroupIntent.any


class AIVenueResult(BaseModel):
    venue_suggestion: str = Field(..., min_length=1)
    reasoning: str = Field(..., min_length=1)
    venue_url: str | None = None
    venue_description: str | None = None


class MatchRequest(BaseModel):
    group_a: GroupPreference
    group_b: GroupPreference


class MatchResponse(BaseModel):
    matches: list[ScoredVenue]
    best: Venue | None = None


class CombineResponse(BaseModel):
    group_intent: GroupIntent
    vibe: str
    primary_neighborhood: str


class SimilarityRequest(BaseModel):
    a: str = ""
    b: str = ""


class SimilarityResponse(BaseModel):
    a: str
    b: str
    score: float

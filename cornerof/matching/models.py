from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class GroupIntent(str, Enum):
    all_boys = "all-boys"
    all_girls = "all-girls"
    mixed = "mixed"
    any = "any"


class Venue(BaseModel):
    id: str
    name: str
    neighborhood: str
    description: str | None = None
    url: str | None = None


class GroupPreference(BaseModel):
    """The part of a group record the matcher reads.

    ``neighborhood`` / ``vibe`` are the legacy single-value fields; groups
    created later carry ``neighborhoods`` / ``vibes`` lists instead.
    """

    id: str | None = None
    name: str = ""
    neighborhood: str | None = None
    neighborhoods: list[str] = Field(default_factory=list)
    vibe: str | None = None
    vibes: list[str] = Field(default_factory=list)
    group_intent: GroupIntent = GroupIntent.any

    def neighborhood_list(self) -> list[str]:
        if self.neighborhoods:
            return list(self.neighborhoods)
        return [self.neighborhood] if self.neighborhood else []

    def vibe_list(self) -> list[str]:
        if self.vibes:
            return list(self.vibes)
        return [self.vibe] if self.vibe else []


class ScoredVenue(BaseModel):
    venue: Venue
    score: float
    group_a_score: float
    group_b_score: float

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

# Canonical term -> abbreviations/variants accepted as the same place.
DEFAULT_VARIATIONS: dict[str, list[str]] = {
    "village": ["vil", "vlg"],
    "heights": ["hts", "height"],
    "east": ["e", "eastern"],
    "west": ["w", "western"],
    "north": ["n", "northern"],
    "south": ["s", "southern"],
    "manhattan": ["nyc", "new york city"],
    "brooklyn": ["bk", "bklyn"],
}


@dataclass(frozen=True)
class MatchingConfig:
    min_score: float = 60.0
    perfect_match_score: float = 85.0
    nearby_score: float = 60.0
    default_city: str = "New York City"
    candidate_limit: int = 10
    variations: Mapping[str, Sequence[str]] = field(default_factory=lambda: dict(DEFAULT_VARIATIONS))


DEFAULT_MATCHING_CONFIG = MatchingConfig()

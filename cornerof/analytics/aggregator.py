from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    suggestions = [e for e in events if e["type"] == "venue_suggestion"]
    total = len(suggestions)

    # Average response time
    times = [s["response_time_ms"] for s in suggestions if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Where suggestions came from
    source_counts = {"database": 0, "ai": 0, "none": 0}
    for s in suggestions:
        source = s.get("source", "none")
        source_counts[source] = source_counts.get(source, 0) + 1

    # Top neighborhoods
    hood_counter: Counter[str] = Counter()
    for s in suggestions:
        hood_counter[s.get("primary_neighborhood") or "unknown"] += 1
    top_neighborhoods = [{"name": n, "count": c} for n, c in hood_counter.most_common(10)]

    # Top suggested venues
    venue_counter: Counter[str] = Counter()
    for s in suggestions:
        if s.get("venue_name"):
            venue_counter[s["venue_name"]] += 1
    top_venues = [{"name": n, "count": c} for n, c in venue_counter.most_common(10)]

    return {
        "total_suggestions": total,
        "avg_response_time_ms": avg_time,
        "source_counts": source_counts,
        "database_hit_rate": round(source_counts["database"] / total * 100, 1) if total else 0.0,
        "top_neighborhoods": top_neighborhoods,
        "top_venues": top_venues,
    }

"""
Venue matching core.

Responsibilities:
- Score how close two free-text neighborhood names are.
- Rank curated venues against the neighborhoods of two matched groups.
- Pick the best venue, or report that none qualifies.
- Merge the two groups' vibes, intents and neighborhoods into display values.
"""

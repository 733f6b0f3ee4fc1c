"""
Venue suggestions for matched groups.

Responsibilities:
- Load the admin-curated venue list (read-only).
- Suggest a meeting venue for two matched groups: curated venue first,
  AI suggestion second, a static vibe-based pick last.
"""

"""
In-memory analytics for venue suggestions.

Responsibilities:
- Record an event for every suggestion made.
- Summarise where suggestions came from and how long they took.
"""

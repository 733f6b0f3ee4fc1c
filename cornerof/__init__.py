"""
Corner Of venue matching service.

Suggests where two freshly matched groups should meet, based on how well
curated venues fit both groups' neighborhoods and vibes.
"""

from cornerof.matching.config import MatchingConfig
from cornerof.matching.models import GroupPreference, Venue
from cornerof.matching.reasoning import generate_venue_reasoning

THE_DEN = Venue(id="2", name="The Den", neighborhood="Greenwich Village")
JOES_BAR = Venue(id="1", name="Joe's Bar", neighborhood="East Village")
ASTORIA_CAFE = Venue(id="3", name="Astoria Cafe", neighborhood="Astoria")


def test_perfect_match_reasoning():
    a = GroupPreference(neighborhood="Greenwich", vibe="chill")
    b = GroupPreference(neighborhood="Greenwich Village", vibe="chill")

    reasoning = generate_venue_reasoning(THE_DEN, a, b)

    assert reasoning == (
        "Perfect location match! The Den is right in your preferred neighborhood "
        "and matches your chill vibes."
    )


def test_perfect_match_lists_both_vibes():
    a = GroupPreference(neighborhood="Greenwich Village", vibe="chill")
    b = GroupPreference(neighborhood="Tribeca", vibe="artsy")

    reasoning = generate_venue_reasoning(THE_DEN, a, b)

    assert "matches your chill and artsy vibes" in reasoning


def test_nearby_reasoning():
    a = GroupPreference(neighborhood="Greenwich")
    b = GroupPreference(neighborhood="Tribeca")

    reasoning = generate_venue_reasoning(JOES_BAR, a, b)

    assert reasoning == (
        "Great choice! Joe's Bar is in a nearby area that works well for both "
        "groups' preferences."
    )


def test_generic_reasoning():
    a = GroupPreference(neighborhood="Tribeca")
    b = GroupPreference(neighborhood="SoHo")

    reasoning = generate_venue_reasoning(ASTORIA_CAFE, a, b)

    assert reasoning == "Astoria Cafe looks like a good spot that should work well for both groups!"


def test_ai_generated_reasoning_ignores_scores():
    a = GroupPreference(neighborhoods=["Tribeca"], vibes=["chill"])
    b = GroupPreference(neighborhoods=["SoHo", "Tribeca"], vibes=["party", "chill"])

    reasoning = generate_venue_reasoning(ASTORIA_CAFE, a, b, is_ai_generated=True)

    assert reasoning == (
        "AI suggested this venue based on your combined preferences for "
        "chill, party vibes in the Tribeca/SoHo area."
    )


def test_reasoning_uses_custom_variation_table():
    dutch_kills = Venue(id="lic", name="Dutch Kills", neighborhood="Long Island City")
    a = GroupPreference(neighborhood="LIC")
    b = GroupPreference(neighborhood="LIC")
    config = MatchingConfig(variations={"long island city": ["lic"]})

    assert generate_venue_reasoning(dutch_kills, a, b).startswith("Dutch Kills looks like a good spot")
    assert generate_venue_reasoning(dutch_kills, a, b, config=config) == (
        "Great choice! Dutch Kills is in a nearby area that works well for both "
        "groups' preferences."
    )

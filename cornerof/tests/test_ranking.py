from cornerof.matching.config import MatchingConfig
from cornerof.matching.models import GroupPreference, Venue
from cornerof.matching.ranking import (
    find_matching_venues,
    get_best_venue_suggestion,
    rank_venues,
    select_best,
    venues_for_neighborhood,
)
from cornerof.venues.data_store import InMemoryVenueStore, VenueStoreError

JOES_BAR = Venue(id="1", name="Joe's Bar", neighborhood="East Village")
THE_DEN = Venue(id="2", name="The Den", neighborhood="Greenwich Village")
ASTORIA_CAFE = Venue(id="3", name="Astoria Cafe", neighborhood="Astoria")


def _group(neighborhood=None, **kwargs) -> GroupPreference:
    return GroupPreference(neighborhood=neighborhood, **kwargs)


class _BrokenStore:
    def list_venues(self):
        raise VenueStoreError("store is down")


def test_best_venue_ranked_first():
    ranked = rank_venues([JOES_BAR, THE_DEN], _group("Greenwich"), _group("Greenwich Village"))

    assert [s.venue.name for s in ranked] == ["The Den"]
    assert ranked[0].score >= 85
    assert ranked[0].group_a_score == 85
    assert ranked[0].group_b_score == 100


def test_find_matching_venues_returns_venues():
    venues = find_matching_venues([JOES_BAR, THE_DEN], _group("Greenwich"), _group("Greenwich Village"))
    assert venues == [THE_DEN]


def test_empty_venue_list():
    assert find_matching_venues([], _group("SoHo"), _group("Tribeca")) == []
    assert rank_venues([], _group("SoHo"), _group("Tribeca")) == []


def test_never_returns_low_scores():
    venues = [
        JOES_BAR,
        THE_DEN,
        ASTORIA_CAFE,
        Venue(id="4", name="Slate", neighborhood="Chelsea"),
        Venue(id="5", name="Harbor Hall", neighborhood="Brooklyn Heights"),
        Venue(id="6", name="Lucky Lanes", neighborhood="Lower East Side"),
    ]
    ranked = rank_venues(venues, _group("East Village"), _group("Greenwich"))

    assert ranked
    assert all(s.score >= 60 for s in ranked)
    scores = [s.score for s in ranked]
    assert scores == sorted(scores, reverse=True)


def test_ties_keep_input_order():
    first = Venue(id="a", name="First", neighborhood="SoHo")
    second = Venue(id="b", name="Second", neighborhood="soho")
    ranked = rank_venues([first, second], _group("SoHo"), _group("SoHo"))
    assert [s.venue.id for s in ranked] == ["a", "b"]


def test_group_without_neighborhood_scores_zero():
    ranked = rank_venues([THE_DEN], _group("Greenwich Village"), _group())
    assert ranked == []


def test_multiple_neighborhoods_use_best_match():
    chelsea = Venue(id="c", name="Slate", neighborhood="Chelsea")
    group_a = GroupPreference(neighborhoods=["Tribeca", "Chelsea"])
    ranked = rank_venues([chelsea], group_a, _group("Chelsea"))
    assert ranked[0].score == 100


def test_select_best():
    assert select_best([]) is None
    ranked = rank_venues([THE_DEN], _group("Greenwich"), _group("Greenwich Village"))
    assert select_best(ranked) == THE_DEN


def test_get_best_venue_suggestion_from_store():
    store = InMemoryVenueStore([JOES_BAR, THE_DEN])
    best = get_best_venue_suggestion(_group("Greenwich"), _group("Greenwich Village"), store)
    assert best is not None
    assert best.name == "The Den"


def test_get_best_venue_suggestion_none_when_nothing_qualifies():
    store = InMemoryVenueStore([ASTORIA_CAFE])
    assert get_best_venue_suggestion(_group("Tribeca"), _group("SoHo"), store) is None


def test_get_best_venue_suggestion_none_when_store_fails():
    assert get_best_venue_suggestion(_group("Greenwich"), _group("Greenwich"), _BrokenStore()) is None


def test_venues_for_neighborhood_limits_results():
    venues = [Venue(id=str(i), name=f"Spot {i}", neighborhood="SoHo") for i in range(15)]
    venues.append(ASTORIA_CAFE)

    results = venues_for_neighborhood(venues, "soho", limit=10)

    assert len(results) == 10
    assert all(score == 100 for _, score in results)
    assert ASTORIA_CAFE not in [v for v, _ in results]


def test_custom_variation_table_used_for_selection():
    dutch_kills = Venue(id="lic", name="Dutch Kills", neighborhood="Long Island City")
    store = InMemoryVenueStore([dutch_kills])
    config = MatchingConfig(variations={"long island city": ["lic"]})

    assert get_best_venue_suggestion(_group("LIC"), _group("LIC"), store) is None
    assert get_best_venue_suggestion(_group("LIC"), _group("LIC"), store, config) == dutch_kills
    assert find_matching_venues([dutch_kills], _group("LIC"), _group("LIC"), variations=config.variations) == [dutch_kills]
    assert venues_for_neighborhood([dutch_kills], "LIC", variations=config.variations) == [(dutch_kills, 60)]

"""Tests for place-name normalization and fuzzy token overlap."""

from itinerary_gaps.models import Location
from itinerary_gaps.normalize.location_normalizer import (
    display_text,
    levenshtein,
    normalize,
    overlap_ratio,
    tokens_match,
)


class TestNormalize:

    def test_lowercases_and_strips_punctuation(self):
        assert normalize("Musée d'Orsay, PARIS!") == ["musée", "d", "orsay", "paris"]

    def test_removes_all_three_stop_word_groups(self):
        tokens = normalize("The Grand Hotel at 5th Avenue and Main St")
        assert tokens == ["grand", "5th", "main"]

    def test_airport_names_reduce_to_same_tokens(self):
        a = normalize("Grand Case International Airport")
        b = normalize("grand case airport")
        assert a == ["grand", "case"]
        assert b == ["grand", "case"]
        assert overlap_ratio(a, b) == 1.0

    def test_duplicates_removed_order_preserved(self):
        assert normalize("Paris Marriott Paris Champs") == ["paris", "marriott", "champs"]

    def test_all_stop_words_falls_back_to_raw_tokens(self):
        """A name made only of stop words keeps its tokens instead of vanishing."""
        assert normalize("The Hotel") == ["the", "hotel"]
        assert normalize("Hotel") == ["hotel"]
        assert normalize("Inn") != normalize("Lodge")

    def test_empty_and_whitespace(self):
        assert normalize("") == []
        assert normalize("   ") == []
        assert normalize("!!!") == []


class TestFuzzyOverlap:

    def test_levenshtein_basics(self):
        assert levenshtein("marriot", "marriott") == 1
        assert levenshtein("kitten", "sitting") == 3
        assert levenshtein("", "abc") == 3
        assert levenshtein("same", "same") == 0

    def test_token_spelling_variant_matches(self):
        assert tokens_match("Marriot", "marriott")

    def test_short_tokens_need_exact_match(self):
        assert not tokens_match("inn", "ink")
        assert tokens_match("inn", "INN")

    def test_two_edits_do_not_match(self):
        assert not tokens_match("hilton", "holten")

    def test_overlap_counts_fuzzy_pairs(self):
        ratio = overlap_ratio(["paris", "marriot"], ["paris", "marriott"])
        assert ratio == 1.0

    def test_overlap_is_intersection_over_union(self):
        assert overlap_ratio(["a", "b", "c"], ["b", "c", "d"]) == 2 / 4

    def test_each_token_pairs_once(self):
        # "park" can only absorb one of the two near-identical tokens
        assert overlap_ratio(["park"], ["park", "parks"]) == 1 / 2

    def test_empty_lists_give_zero(self):
        assert overlap_ratio([], []) == 0.0
        assert overlap_ratio(["tokyo"], []) == 0.0


class TestDisplayText:

    def test_joins_name_city_country(self):
        loc = Location(name="Park Hyatt", city="Tokyo", country="Japan")
        assert display_text(loc) == "Park Hyatt Tokyo Japan"

    def test_skips_missing_parts(self):
        assert display_text(Location(city="Lyon")) == "Lyon"
        assert display_text(None) == ""

"""Domain Types — verifies Quote matching and enum values.

Tests:
    - QuoteId wraps str
    - Quote.matches checks tags, text and author with a lowercased needle
    - SelectionSource has exactly two members
"""

from inspire_me.core.domain_types import (
    MAX_SELECTIONS, Quote, QuoteId, SelectionSource,
)


def _quote() -> Quote:
    return Quote(
        id=QuoteId("42"), text="Be Curious.", author="Ada Lovelace",
        tags=("Science", "wonder"),
    )


def test_quote_id_wraps_str():
    assert QuoteId("1") == "1"


def test_matches_tag_case_insensitively():
    assert _quote().matches("science")


def test_matches_text_and_author():
    assert _quote().matches("curious")
    assert _quote().matches("lovelace")


def test_does_not_match_unrelated_needle():
    assert not _quote().matches("history")


def test_quote_without_tags_defaults_to_empty_tuple():
    assert Quote(id=QuoteId("1"), text="t", author="a").tags == ()


def test_selection_source_members():
    assert set(SelectionSource) == {SelectionSource.MATCH, SelectionSource.RANDOM}
    assert SelectionSource.MATCH.value == "match"


def test_max_selections_is_three():
    assert MAX_SELECTIONS == 3

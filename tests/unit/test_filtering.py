from __future__ import annotations

from charview.domain.models import Filters
from charview.filtering import apply_filters, matches


def test_empty_filters_return_collection_in_order(characters):
    result = apply_filters(characters, Filters())

    assert result == characters
    assert result is not characters


def test_species_filter_is_case_insensitive_substring(characters):
    result = apply_filters(characters, Filters(species="HUM"))

    expected = [c for c in characters if "hum" in c.species.lower()]
    assert result == expected
    # "Human" and "Humanoid" both contain the needle
    assert {c.species for c in result} == {"Human", "Humanoid"}


def test_status_filter_matches_each_record_independently(characters):
    filters = Filters(status="dEaD")

    for character in characters:
        assert matches(character, filters) == (character.status == "Dead")


def test_both_filters_must_match(character_factory):
    records = [
        character_factory(1, species="Human", status="Alive"),
        character_factory(2, species="Human", status="Dead"),
        character_factory(3, species="Alien", status="Alive"),
    ]

    result = apply_filters(records, Filters(species="human", status="alive"))

    assert [c.id for c in result] == [1]


def test_filtering_is_idempotent(characters):
    filters = Filters(species="an", status="a")

    once = apply_filters(characters, filters)
    twice = apply_filters(once, filters)

    assert once == twice


def test_no_match_yields_empty_list(character_factory):
    records = [character_factory(i, status="Alive") for i in range(1, 6)]

    assert apply_filters(records, Filters(status="Dead")) == []

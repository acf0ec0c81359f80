from __future__ import annotations

from setboard.core.cards import Card, Color, Number, Shading, Shape, find_sets, is_set, make_deck


def test_deck_has_81_distinct_cards_ordered_by_id() -> None:
    deck = make_deck()
    assert len(deck) == 81
    assert [c.id for c in deck] == list(range(81))
    assert len({c.attributes() for c in deck}) == 81


def test_first_cards_differ_only_by_shape() -> None:
    deck = make_deck()
    assert deck[0] == Card(0, Number.one, Shading.solid, Color.red, Shape.diamond)
    assert deck[2].shape == Shape.oval
    assert deck[3].color == Color.green


def test_is_set_all_same_but_one_attribute() -> None:
    deck = make_deck()
    assert is_set([deck[0], deck[1], deck[2]])


def test_is_set_all_attributes_distinct() -> None:
    a = Card(0, Number.one, Shading.solid, Color.red, Shape.diamond)
    b = Card(1, Number.two, Shading.striped, Color.green, Shape.squiggle)
    c = Card(2, Number.three, Shading.open, Color.purple, Shape.oval)
    assert is_set({a, b, c})


def test_is_set_rejects_two_of_a_kind() -> None:
    deck = make_deck()
    # Shapes: diamond, squiggle, diamond.
    assert not is_set([deck[0], deck[1], deck[3]])


def test_is_set_needs_exactly_three_distinct_cards() -> None:
    deck = make_deck()
    assert not is_set(deck[:2])
    assert not is_set(deck[:4])
    assert not is_set([deck[0], deck[0], deck[0]])


def test_find_sets_lists_triples_in_id_order() -> None:
    deck = make_deck()
    found = find_sets([deck[2], deck[0], deck[1], deck[3]])
    assert found == [(deck[0], deck[1], deck[2])]

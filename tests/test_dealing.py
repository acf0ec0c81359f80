from __future__ import annotations

import random

import pytest

from setboard.core.dealing import deal, deal_group, discard, discard_set, shuffle_ids
from setboard.core.errors import CardNotOnBoard, EmptyDealQueue, SlotOccupied
from setboard.core.state import GameState

from conftest import assert_closed


def test_shuffle_ids_is_a_seeded_permutation(fresh: GameState) -> None:
    a = shuffle_ids(fresh.deck, random.Random(7))
    b = shuffle_ids(fresh.deck, random.Random(7))
    assert a == b
    assert sorted(a) == list(range(81))


def test_deal_takes_front_of_queue(fresh: GameState) -> None:
    state = deal(fresh, "C")
    assert state.board.get("C") == 0
    assert state.to_deal == fresh.to_deal[1:]
    # Earlier snapshot untouched.
    assert fresh.board.get("C") is None
    assert len(fresh.to_deal) == 81


def test_deal_from_empty_queue_fails(fresh: GameState) -> None:
    drained = GameState(deck=fresh.deck, to_deal=(), board=fresh.board)
    with pytest.raises(EmptyDealQueue) as e:
        deal(drained, "A")
    assert e.value.slot == "A"


def test_deal_into_occupied_slot_fails(fresh: GameState) -> None:
    state = deal(fresh, "A")
    with pytest.raises(SlotOccupied):
        deal(state, "A")


def test_deal_group_keeps_slot_order(fresh: GameState) -> None:
    state = deal_group(fresh, ("M", "N", "O"))
    assert [state.board.get(s) for s in "MNO"] == [0, 1, 2]
    assert_closed(state)


def test_discard_empties_the_cards_slot(started: GameState) -> None:
    state = discard(started, started.card(4))
    assert state.board.get("E") is None
    assert state.discarded_ids() == {4}
    assert_closed(state)


def test_discard_card_not_on_board_fails(started: GameState) -> None:
    with pytest.raises(CardNotOnBoard) as e:
        discard(started, started.card(50))
    assert e.value.card_id == 50


def test_discard_set_removes_all_three(started: GameState) -> None:
    state = discard_set(started, [started.card(i) for i in (0, 5, 9)])
    assert state.board.empty_slots() == ["A", "F", "J", *"MNOPQR"]
    assert_closed(state)

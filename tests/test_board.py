from __future__ import annotations

import pytest

from setboard.core.board import (
    CORE,
    EXTRA1,
    EXTRA2,
    SLOT_GROUPS,
    SLOTS,
    Board,
    downsize_board,
    empty_board,
    has_cards,
    has_openings,
    needs_downsize,
)
from setboard.core.errors import UnknownSlot


def _board(**cells: int) -> Board:
    board = empty_board()
    for slot, card_id in cells.items():
        board = board.assign(slot, card_id)
    return board


def _full(slots) -> Board:  # type: ignore[no-untyped-def]
    board = empty_board()
    for i, slot in enumerate(slots):
        board = board.assign(slot, i)
    return board


def test_slot_partition() -> None:
    assert SLOTS[0] == "A" and SLOTS[-1] == "R"
    assert len(SLOT_GROUPS) == 6
    assert all(len(g) == 3 for g in SLOT_GROUPS)
    assert CORE == tuple("ABCDEFGHIJKL")
    assert EXTRA1 == ("M", "N", "O")
    assert EXTRA2 == ("P", "Q", "R")


def test_assign_returns_new_board() -> None:
    board = empty_board()
    updated = board.assign("C", 7)
    assert board.get("C") is None
    assert updated.get("C") == 7
    assert updated.slot_of(7) == "C"


def test_unknown_slot_is_reported() -> None:
    with pytest.raises(UnknownSlot):
        empty_board().get("Z")


def test_board_requires_eighteen_cells() -> None:
    with pytest.raises(ValueError):
        Board(cells=(None,) * 12)


def test_openings_and_cards() -> None:
    board = _board(A=1)
    assert has_cards(board, CORE)
    assert has_openings(board, CORE)
    assert not has_cards(board, EXTRA1)


def test_needs_downsize_false_when_only_core_used() -> None:
    assert not needs_downsize(empty_board())
    assert not needs_downsize(_board(B=1))


def test_needs_downsize_extra1_with_core_gap() -> None:
    board = _full(CORE + EXTRA1).assign("E", None)
    assert needs_downsize(board)


def test_needs_downsize_false_when_core_full_and_extra1_used() -> None:
    assert not needs_downsize(_full(CORE + EXTRA1))


def test_needs_downsize_extra2_with_extra1_gap() -> None:
    board = _full(SLOTS).assign("N", None)
    assert needs_downsize(board)


def test_needs_downsize_false_when_everything_full() -> None:
    assert not needs_downsize(_full(SLOTS))


def test_downsize_packs_cards_in_slot_order() -> None:
    board = _board(B=10, D=11, M=12, R=13)
    packed = downsize_board(board)
    assert packed.as_dict()["A"] == 10
    assert [packed.get(s) for s in "ABCD"] == [10, 11, 12, 13]
    assert packed.empty_slots() == list(SLOTS[4:])
    assert sorted(packed.card_ids()) == sorted(board.card_ids())

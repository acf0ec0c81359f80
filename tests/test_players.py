from __future__ import annotations

import pytest

from setboard.claims import claim_card
from setboard.core.errors import DuplicatePlayer, UnknownPlayer
from setboard.core.state import GameState, PlayerRecord
from setboard.players import add_player, remove_player, update_score


def test_add_player_starts_at_zero(started: GameState) -> None:
    state = add_player("alice", 3, started)
    assert state.player("alice") == PlayerRecord(color=3, score=0, claimed=frozenset())
    assert "alice" not in started.players


def test_players_mapping_is_read_only(started: GameState) -> None:
    state = add_player("alice", 3, started)
    with pytest.raises(TypeError):
        state.players["bob"] = PlayerRecord(color=1)  # type: ignore[index]


def test_re_adding_resets_record(seated: GameState) -> None:
    state = update_score(claim_card("alice", 0, seated), "alice", 2)
    state = add_player("alice", 9, state)
    assert state.player("alice") == PlayerRecord(color=9)


def test_re_adding_can_be_refused(seated: GameState) -> None:
    with pytest.raises(DuplicatePlayer):
        add_player("alice", 1, seated, replace_existing=False)


def test_remove_player(seated: GameState) -> None:
    state = remove_player("bob", seated)
    assert set(state.players) == {"alice"}
    assert remove_player("nobody", state) is state


def test_update_score(seated: GameState) -> None:
    state = update_score(update_score(seated, "bob", 1), "bob", -3)
    assert state.player("bob").score == -2
    with pytest.raises(UnknownPlayer):
        update_score(seated, "carol", 1)

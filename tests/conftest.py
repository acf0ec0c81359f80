from __future__ import annotations

import pytest

from setboard.core.state import GameState
from setboard.game_setup import initial_state, start_board
from setboard.players import add_player


@pytest.fixture(autouse=True)
def _hermetic_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SETBOARD_* variables from leaking into tests."""

    monkeypatch.delenv("SETBOARD_SEED", raising=False)
    monkeypatch.delenv("SETBOARD_LOG_LEVEL", raising=False)


def in_order(ids):  # type: ignore[no-untyped-def]
    """Shuffle stand-in: deal ids in deck order."""

    return list(ids)


@pytest.fixture()
def fresh() -> GameState:
    return initial_state(shuffle=in_order)


@pytest.fixture()
def started(fresh: GameState) -> GameState:
    # Core slots A..L hold cards 0..11; the queue starts at 12.
    return start_board(fresh)


@pytest.fixture()
def seated(started: GameState) -> GameState:
    state = add_player("alice", 1, started)
    return add_player("bob", 2, state)


def assert_closed(state: GameState) -> None:
    queued = list(state.to_deal)
    on_board = state.board.card_ids()
    discarded = state.discarded_ids()
    assert len(queued) + len(on_board) + len(discarded) == state.deck_size
    assert len(set(queued) | set(on_board) | discarded) == state.deck_size

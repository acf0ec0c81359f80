from __future__ import annotations

import logging
from dataclasses import replace

from setboard.core.errors import DuplicatePlayer
from setboard.core.state import GameState, PlayerRecord

logger = logging.getLogger(__name__)


def add_player(name: str, color: int, state: GameState, *, replace_existing: bool = True) -> GameState:
    """Seat a player with a zero score and no claims.

    Re-adding an existing name resets that player's record unless
    ``replace_existing`` is False, in which case ``DuplicatePlayer`` is raised.
    """

    if name in state.players:
        if not replace_existing:
            raise DuplicatePlayer(name)
        logger.info("player %s re-added; score and claims reset", name)
    return state.with_player(name, PlayerRecord(color=color))


def remove_player(name: str, state: GameState) -> GameState:
    if name not in state.players:
        return state
    return state.without_player(name)


def update_score(state: GameState, player: str, delta: int) -> GameState:
    rec = state.player(player)
    return state.with_player(player, replace(rec, score=rec.score + delta))

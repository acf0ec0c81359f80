from __future__ import annotations

from dataclasses import replace

from setboard.core.cards import Card
from setboard.core.errors import CardNotOnBoard, ClaimLimitExceeded
from setboard.core.state import GameState

CANDIDATE_SIZE = 3


def _set_claimed(state: GameState, player: str, claimed: frozenset[int]) -> GameState:
    rec = state.player(player)
    return state.with_player(player, replace(rec, claimed=claimed))


def claim_card(player: str, card_id: int, state: GameState) -> GameState:
    """Add a card on the board to the player's claims.

    Claiming an already-claimed card changes nothing. A fourth distinct claim
    raises ``ClaimLimitExceeded``.
    """

    claimed = state.player(player).claimed
    if card_id in claimed:
        return state
    if state.board.slot_of(card_id) is None:
        raise CardNotOnBoard(card_id)
    if len(claimed) >= CANDIDATE_SIZE:
        raise ClaimLimitExceeded(player, card_id, CANDIDATE_SIZE)
    return _set_claimed(state, player, claimed | {card_id})


def unclaim_card(player: str, card_id: int, state: GameState) -> GameState:
    claimed = state.player(player).claimed
    if card_id not in claimed:
        return state
    return _set_claimed(state, player, claimed - {card_id})


def is_claimed(card_id: int, player: str, state: GameState) -> bool:
    return card_id in state.player(player).claimed


def toggle_claimed(player: str, card_id: int, state: GameState) -> GameState:
    if is_claimed(card_id, player, state):
        return unclaim_card(player, card_id, state)
    return claim_card(player, card_id, state)


def check_for_candidate(player: str, state: GameState) -> bool:
    return len(state.player(player).claimed) == CANDIDATE_SIZE


def claimed_cards(player: str, state: GameState) -> tuple[Card, ...]:
    """The player's claims as card records, ordered by id."""

    return tuple(state.card(i) for i in sorted(state.player(player).claimed))


def empty_claimed(state: GameState, player: str) -> GameState:
    return _set_claimed(state, player, frozenset())

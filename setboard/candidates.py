from __future__ import annotations

import logging
from dataclasses import replace

from setboard.board_manager import downsize_if_needed, refill_if_needed
from setboard.claims import CANDIDATE_SIZE, claimed_cards, empty_claimed
from setboard.core.cards import Card, SetPredicate, is_set
from setboard.core.dealing import discard_set
from setboard.core.errors import InvalidCandidateSize
from setboard.core.events import CandidateResult, SetEvent
from setboard.core.state import GameState
from setboard.fsm import CandidateFSM
from setboard.players import update_score

logger = logging.getLogger(__name__)


def _prune_claims(state: GameState, removed: tuple[Card, ...]) -> GameState:
    """Drop cards that just left the board from everyone's claims."""

    gone = frozenset(c.id for c in removed)
    for name, rec in state.players.items():
        if rec.claimed & gone:
            state = state.with_player(name, replace(rec, claimed=rec.claimed - gone))
    return state


def _settle_found(state: GameState, triple: tuple[Card, ...]) -> GameState:
    logger.debug("board before:\n%s", state.board.pretty())
    state = discard_set(state, triple)
    state = downsize_if_needed(state)
    state = refill_if_needed(state)
    logger.debug("board after:\n%s", state.board.pretty())
    return _prune_claims(state, triple)


def process_candidate(player: str, state: GameState, *, is_set: SetPredicate = is_set) -> CandidateResult:
    """Score the player's claimed triple and refresh the board.

    A matching triple leaves the board, the board is compacted and refilled,
    and the player gains a point. Otherwise the board is untouched and the
    player loses a point. Either way the player's claims are cleared.
    """

    triple = claimed_cards(player, state)
    if len(triple) != CANDIDATE_SIZE:
        raise InvalidCandidateSize(player, len(triple))

    fsm = CandidateFSM()
    if is_set(triple):
        new_state = _settle_found(state, triple)
        fsm.match()
    else:
        new_state = state
        fsm.mismatch()

    event = fsm.outcome
    new_state = update_score(new_state, player, 1 if event == SetEvent.found else -1)
    new_state = empty_claimed(new_state, player)

    logger.info("%s: %s %s", event.upper(), player, [c.id for c in triple])
    return CandidateResult(user=player, triple=triple, event=event, game_state=new_state)

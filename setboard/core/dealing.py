from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence
from dataclasses import replace

from setboard.core.board import Slot
from setboard.core.cards import Card
from setboard.core.errors import CardNotOnBoard, EmptyDealQueue, SlotOccupied
from setboard.core.state import GameState

logger = logging.getLogger(__name__)


def shuffle_ids(deck: Sequence[Card], rng: random.Random) -> tuple[int, ...]:
    """Uniform random permutation of every card id in ``deck``."""

    ids = [c.id for c in deck]
    rng.shuffle(ids)
    return tuple(ids)


def deal(state: GameState, slot: Slot) -> GameState:
    """Move the front of the deal queue into ``slot``."""

    current = state.board.get(slot)
    if current is not None:
        raise SlotOccupied(slot, current)
    if not state.to_deal:
        raise EmptyDealQueue(slot)

    card_id, rest = state.to_deal[0], state.to_deal[1:]
    logger.debug("dealing card %d into slot %s (%d left)", card_id, slot, len(rest))
    return replace(state, to_deal=rest, board=state.board.assign(slot, card_id))


def deal_group(state: GameState, slots: Iterable[Slot]) -> GameState:
    for slot in slots:
        state = deal(state, slot)
    return state


def discard(state: GameState, card: Card) -> GameState:
    slot = state.board.slot_of(card.id)
    if slot is None:
        raise CardNotOnBoard(card.id)
    logger.debug("discarding card %d from slot %s", card.id, slot)
    return state.with_board(state.board.assign(slot, None))


def discard_set(state: GameState, cards: Iterable[Card]) -> GameState:
    for card in cards:
        state = discard(state, card)
    return state

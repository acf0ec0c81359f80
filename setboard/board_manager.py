"""Board maintenance run after a set is removed, plus explicit upsizing.

After a discard the order is always: downsize, then refill.
"""
from __future__ import annotations

import logging

from setboard.core.board import CORE, EXTRA1, EXTRA2, downsize_board, has_openings, needs_downsize
from setboard.core.dealing import deal, deal_group
from setboard.core.state import GameState

logger = logging.getLogger(__name__)


def downsize_if_needed(state: GameState) -> GameState:
    if not needs_downsize(state.board):
        logger.debug("no downsize needed")
        return state
    logger.debug("downsizing board")
    return state.with_board(downsize_board(state.board))


def refill_board(state: GameState) -> GameState:
    """Deal into empty core slots in slot order.

    Unlike ``deal``, running out of cards here is not an error: once the queue
    is exhausted the remaining core slots stay empty, which is how the end of
    the game looks. Extra slots are never refilled.
    """

    empty = state.board.empty_slots(CORE)
    if len(empty) > len(state.to_deal):
        logger.info("deal queue short: %d empty core slots, %d cards left", len(empty), len(state.to_deal))
        empty = empty[: len(state.to_deal)]
    for slot in empty:
        state = deal(state, slot)
    return state


def refill_if_needed(state: GameState) -> GameState:
    if not has_openings(state.board, CORE):
        logger.debug("no refill needed")
        return state
    return refill_board(state)


def upsize_if_needed(state: GameState) -> GameState:
    """Grow the visible board by one group of three.

    Raises ``EmptyDealQueue`` when fewer than three cards remain to deal.
    """

    for group in (EXTRA1, EXTRA2):
        if has_openings(state.board, group):
            logger.debug("upsizing into %s", "".join(group))
            # Top up a partly filled group instead of overwriting its cards.
            return deal_group(state, state.board.empty_slots(group))
    logger.debug("board already at full size")
    return state

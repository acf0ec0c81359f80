from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence

from setboard.config import get_seed, load_dotenv_if_present
from setboard.core.board import CORE, empty_board
from setboard.core.cards import DeckFactory, make_deck
from setboard.core.dealing import deal_group, shuffle_ids
from setboard.core.state import GameState

logger = logging.getLogger(__name__)

Shuffle = Callable[[Sequence[int]], Sequence[int]]


def _default_rng() -> random.Random:
    load_dotenv_if_present()
    seed = get_seed()
    if seed is None:
        seed = random.SystemRandom().randint(1, 2**31 - 1)
    logger.debug("shuffle seed %d", seed)
    return random.Random(seed)


def initial_state(
    *,
    deck_factory: DeckFactory = make_deck,
    shuffle: Shuffle | None = None,
    rng: random.Random | None = None,
) -> GameState:
    """Fresh game: full deck, shuffled deal queue, empty board, no players.

    ``shuffle`` receives the deck ids in order and must return a permutation
    of them. When omitted, ids are shuffled with ``rng``.
    """

    deck = tuple(deck_factory())
    for i, card in enumerate(deck):
        if card.id != i:
            raise ValueError(f"Deck must be ordered by id: position {i} holds card {card.id}")

    if shuffle is None:
        to_deal = shuffle_ids(deck, rng or _default_rng())
    else:
        to_deal = tuple(shuffle([c.id for c in deck]))
        if sorted(to_deal) != list(range(len(deck))):
            raise ValueError("shuffle must return a permutation of the deck ids")

    return GameState(deck=deck, to_deal=to_deal, board=empty_board())


def start_board(state: GameState) -> GameState:
    """Deal the twelve core slots in slot order."""

    if len(state.to_deal) < len(CORE):
        # A deck this small cannot host a game at all.
        raise RuntimeError(f"Need at least {len(CORE)} cards to start, have {len(state.to_deal)}")
    return deal_group(state, CORE)

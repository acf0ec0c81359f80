"""Self-playing demo: ``python -m setboard.main``.

Two bots share one table; each turn the first visible set is claimed card by
card, and the board is upsized whenever no set is showing.
"""
from __future__ import annotations

import asyncio
import logging
import random

from setboard.config import EngineConfig, load_config
from setboard.core.cards import find_sets
from setboard.core.errors import EmptyDealQueue
from setboard.game_loop import GameTable
from setboard.game_setup import initial_state

logger = logging.getLogger(__name__)

PLAYERS: tuple[tuple[str, int], ...] = (("alice", 0), ("bob", 1))


def configure_logging(config: EngineConfig) -> None:
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


async def play(config: EngineConfig) -> dict[str, int]:
    rng = random.Random(config.seed) if config.seed is not None else None
    async with GameTable(initial_state(rng=rng)) as table:
        for name, color in PLAYERS:
            await table.submit("add_player", player=name, payload={"color": color})
        await table.submit("start_board")

        turn = 0
        while True:
            state = table.state
            visible = [state.card(i) for i in state.board.card_ids()]
            sets = find_sets(visible)
            if not sets:
                try:
                    await table.submit("upsize")
                except EmptyDealQueue:
                    logger.info("no sets left and nothing to deal; game over")
                    break
                if table.state == state:
                    logger.info("board is full and shows no set; game over")
                    break
                continue

            name = PLAYERS[turn % len(PLAYERS)][0]
            for card in sets[0]:
                result = await table.submit("toggle_claimed", player=name, payload={"card_id": card.id})
            if result.candidate is not None:
                logger.info("%s -> %s", name, result.candidate.event)
            turn += 1

        return {name: rec.score for name, rec in table.state.players.items()}


def main() -> None:
    config = load_config()
    configure_logging(config)
    scores = asyncio.run(play(config))
    for name, score in sorted(scores.items(), key=lambda kv: -kv[1]):
        print(f"{name}: {score}")


if __name__ == "__main__":
    main()

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from setboard.core.board import Board, CardId, empty_board
from setboard.core.cards import Card
from setboard.core.errors import UnknownPlayer


def _frozen_players(players: Mapping[str, PlayerRecord]) -> Mapping[str, PlayerRecord]:
    return MappingProxyType(dict(players))


@dataclass(frozen=True, slots=True)
class PlayerRecord:
    color: int
    score: int = 0
    # Claimed cards are tracked by id.
    claimed: frozenset[CardId] = frozenset()


@dataclass(frozen=True, slots=True)
class GameState:
    """One immutable snapshot of a game.

    Transitions build a new snapshot with ``dataclasses.replace``; earlier
    snapshots stay valid and can be compared with ``==``.
    """

    deck: tuple[Card, ...]
    to_deal: tuple[CardId, ...]
    board: Board = field(default_factory=empty_board)
    players: Mapping[str, PlayerRecord] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.players, MappingProxyType):
            object.__setattr__(self, "players", _frozen_players(self.players))

    @property
    def deck_size(self) -> int:
        return len(self.deck)

    def card(self, card_id: CardId) -> Card:
        return self.deck[card_id]

    def discarded_ids(self) -> set[CardId]:
        live = set(self.to_deal) | set(self.board.card_ids())
        return {c.id for c in self.deck} - live

    def player(self, name: str) -> PlayerRecord:
        rec = self.players.get(name)
        if rec is None:
            raise UnknownPlayer(name)
        return rec

    def with_board(self, board: Board) -> GameState:
        return replace(self, board=board)

    def with_player(self, name: str, record: PlayerRecord) -> GameState:
        players = dict(self.players)
        players[name] = record
        return replace(self, players=MappingProxyType(players))

    def without_player(self, name: str) -> GameState:
        players = {k: v for k, v in self.players.items() if k != name}
        return replace(self, players=MappingProxyType(players))

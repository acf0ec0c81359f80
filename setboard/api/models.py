"""Serializable snapshot shapes for whatever transport or store wraps the engine."""
from __future__ import annotations

from pydantic import BaseModel, Field

from setboard.core.board import SLOTS, Board
from setboard.core.cards import Card, Color, Number, Shading, Shape
from setboard.core.events import CandidateResult, SetEvent
from setboard.core.state import GameState, PlayerRecord


class CardModel(BaseModel):
    id: int = Field(..., ge=0)
    number: Number
    shading: Shading
    color: Color
    shape: Shape

    @staticmethod
    def from_card(card: Card) -> "CardModel":
        return CardModel(id=card.id, number=card.number, shading=card.shading, color=card.color, shape=card.shape)

    def to_card(self) -> Card:
        return Card(id=self.id, number=self.number, shading=self.shading, color=self.color, shape=self.shape)


class PlayerSnapshot(BaseModel):
    color: int
    score: int = 0
    # Card ids, ascending.
    claimed: list[int] = Field(default_factory=list)


class GameSnapshot(BaseModel):
    deck: list[CardModel]
    to_deal: list[int] = Field(default_factory=list)
    # Every slot A..R is present; None marks an empty slot.
    board: dict[str, int | None]
    players: dict[str, PlayerSnapshot] = Field(default_factory=dict)

    @staticmethod
    def from_state(state: GameState) -> "GameSnapshot":
        return GameSnapshot(
            deck=[CardModel.from_card(c) for c in state.deck],
            to_deal=list(state.to_deal),
            board=state.board.as_dict(),
            players={
                name: PlayerSnapshot(color=rec.color, score=rec.score, claimed=sorted(rec.claimed))
                for name, rec in state.players.items()
            },
        )

    def to_state(self) -> GameState:
        """Rebuild a ``GameState``, rejecting snapshots that break the card bookkeeping."""

        deck = tuple(c.to_card() for c in self.deck)
        for i, card in enumerate(deck):
            if card.id != i:
                raise ValueError(f"deck must be ordered by id: position {i} holds card {card.id}")

        if set(self.board) != set(SLOTS):
            raise ValueError("board must list exactly the slots A..R")
        board = Board(cells=tuple(self.board[s] for s in SLOTS))

        placed = list(self.to_deal) + board.card_ids()
        if len(placed) != len(set(placed)):
            raise ValueError("a card appears more than once across to_deal and board")
        if any(i < 0 or i >= len(deck) for i in placed):
            raise ValueError("to_deal/board reference cards outside the deck")

        on_board = set(board.card_ids())
        players: dict[str, PlayerRecord] = {}
        for name, p in self.players.items():
            if not set(p.claimed) <= on_board:
                raise ValueError(f"player {name} claims cards that are not on the board")
            players[name] = PlayerRecord(color=p.color, score=p.score, claimed=frozenset(p.claimed))

        return GameState(deck=deck, to_deal=tuple(self.to_deal), board=board, players=players)


class CandidateEvent(BaseModel):
    user: str
    triple: list[int]
    event: SetEvent
    game_state: GameSnapshot

    @staticmethod
    def from_result(result: CandidateResult) -> "CandidateEvent":
        return CandidateEvent(
            user=result.user,
            triple=[c.id for c in result.triple],
            event=result.event,
            game_state=GameSnapshot.from_state(result.game_state),
        )

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from setboard.core.cards import Card
from setboard.core.state import GameState


class SetEvent(StrEnum):
    found = "set found"
    failed = "set failed"


@dataclass(frozen=True, slots=True)
class CandidateResult:
    """Outcome of resolving one player's claimed triple.

    Meant to be broadcast to every client watching the table.
    """

    user: str
    triple: tuple[Card, ...]
    event: SetEvent
    game_state: GameState

    @property
    def score_delta(self) -> int:
        return 1 if self.event == SetEvent.found else -1

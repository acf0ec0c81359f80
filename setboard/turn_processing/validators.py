from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from setboard.core.board import CORE, has_cards
from setboard.core.errors import GameError, UnknownPlayer
from setboard.core.state import GameState


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Inputs available to validators. Small enough to log as-is."""

    player: str | None
    action: str


class ActionValidator(ABC):
    """A small, composable validation unit for an incoming action."""

    @abstractmethod
    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class PlayerValidator(ActionValidator):
    """The acting player must be seated."""

    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        if ctx.player is None or ctx.player not in state.players:
            raise UnknownPlayer(str(ctx.player))


@dataclass(frozen=True, slots=True)
class PlayerNamedValidator(ActionValidator):
    """Actions that seat or unseat someone need a name."""

    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        if not ctx.player:
            raise GameError(f"Action '{ctx.action}' needs a player name")


@dataclass(frozen=True, slots=True)
class BoardDealtValidator(ActionValidator):
    """Board actions make no sense before the core slots are dealt."""

    dealt: bool = True

    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        started = has_cards(state.board, CORE)
        if self.dealt and not started:
            raise GameError(f"Action '{ctx.action}' not allowed before the board is dealt")
        if not self.dealt and started:
            raise GameError("Board already dealt")


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[ActionValidator, ...]

    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        for v in self.validators:
            v.validate(ctx=ctx, state=state)


DEFAULT_ACTION_PIPELINES: dict[str, ValidatorPipeline] = {
    "start_board": ValidatorPipeline(validators=(BoardDealtValidator(dealt=False),)),
    "add_player": ValidatorPipeline(validators=(PlayerNamedValidator(),)),
    "remove_player": ValidatorPipeline(validators=(PlayerNamedValidator(),)),
    "toggle_claimed": ValidatorPipeline(validators=(PlayerValidator(), BoardDealtValidator())),
    "upsize": ValidatorPipeline(validators=(BoardDealtValidator(),)),
}


def pipeline_for_action(action: str) -> ValidatorPipeline:
    pipe = DEFAULT_ACTION_PIPELINES.get(action)
    if pipe is None:
        raise GameError(f"Unknown action: {action}")
    return pipe

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal

from setboard.board_manager import upsize_if_needed
from setboard.candidates import process_candidate
from setboard.claims import check_for_candidate, toggle_claimed
from setboard.core.cards import SetPredicate, is_set
from setboard.core.errors import GameError
from setboard.core.events import CandidateResult
from setboard.core.state import GameState
from setboard.game_setup import start_board
from setboard.players import add_player, remove_player
from setboard.turn_processing.validators import ValidationContext, pipeline_for_action

logger = logging.getLogger(__name__)

ActionName = Literal["start_board", "add_player", "remove_player", "toggle_claimed", "upsize"]


@dataclass(frozen=True, slots=True)
class ActionResult:
    state: GameState
    # Set when the action completed a claimed triple.
    candidate: CandidateResult | None = None


def _int_field(payload: dict[str, Any], key: str, default: int | None = None) -> int:
    raw = payload.get(key, default)
    try:
        return int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise GameError(f"{key} must be an integer, got {raw!r}") from None


def dispatch_action(
    state: GameState,
    action: ActionName | str,
    *,
    player: str | None = None,
    payload: dict[str, Any] | None = None,
    is_set: SetPredicate = is_set,
) -> ActionResult:
    """Validate and apply one command against a snapshot.

    A claim toggle that leaves the player holding three cards resolves the
    candidate right away; the result rides along in ``ActionResult.candidate``.
    """

    payload = payload or {}
    pipeline_for_action(action).validate(ctx=ValidationContext(player=player, action=action), state=state)

    if action == "start_board":
        return ActionResult(state=start_board(state))

    if action == "add_player":
        color = _int_field(payload, "color", 0)
        replace_existing = bool(payload.get("replace", True))
        return ActionResult(state=add_player(str(player), color, state, replace_existing=replace_existing))

    if action == "remove_player":
        return ActionResult(state=remove_player(str(player), state))

    if action == "upsize":
        return ActionResult(state=upsize_if_needed(state))

    if action == "toggle_claimed":
        name = str(player)
        state = toggle_claimed(name, _int_field(payload, "card_id"), state)
        if not check_for_candidate(name, state):
            return ActionResult(state=state)
        result = process_candidate(name, state, is_set=is_set)
        return ActionResult(state=result.game_state, candidate=result)

    # pipeline_for_action rejects anything else first.
    raise GameError(f"Unknown action: {action}")

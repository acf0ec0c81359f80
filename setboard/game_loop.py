"""Single-writer ownership of the authoritative game state.

One asyncio task owns the current snapshot and applies commands strictly in
arrival order, so concurrent players never resolve against stale boards.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from setboard.actions import ActionName, ActionResult, dispatch_action
from setboard.api.models import CandidateEvent, GameSnapshot
from setboard.core.cards import SetPredicate, is_set
from setboard.core.errors import GameError
from setboard.core.state import GameState
from setboard.hub import SnapshotHub

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Command:
    action: ActionName | str
    player: str | None
    payload: dict[str, Any]
    done: asyncio.Future[ActionResult]


def _fail(cmd: _Command, exc: BaseException) -> None:
    if not cmd.done.cancelled():
        cmd.done.set_exception(exc)


class GameTable:
    def __init__(self, state: GameState, *, is_set: SetPredicate = is_set, hub: SnapshotHub | None = None) -> None:
        self._state = state
        self._is_set = is_set
        self.hub = hub or SnapshotHub()
        self._queue: asyncio.Queue[_Command | None] = asyncio.Queue()
        self._task: asyncio.Task[None] | None = None
        self._closing = False

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="game-table")

    async def stop(self) -> None:
        """Finish queued commands, then end the worker."""

        if self._task is None:
            return
        self._closing = True
        await self._queue.put(None)
        await self._task
        self._task = None
        self._closing = False

    async def __aenter__(self) -> GameTable:
        await self.start()
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.stop()

    async def submit(
        self,
        action: ActionName | str,
        *,
        player: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> ActionResult:
        if not self.running or self._closing:
            raise RuntimeError("GameTable is not running")
        done: asyncio.Future[ActionResult] = asyncio.get_running_loop().create_future()
        await self._queue.put(_Command(action=action, player=player, payload=payload or {}, done=done))
        return await done

    async def _run(self) -> None:
        while True:
            cmd = await self._queue.get()
            if cmd is None:
                break
            await self._apply(cmd)
        self._fail_leftovers()

    def _fail_leftovers(self) -> None:
        while not self._queue.empty():
            cmd = self._queue.get_nowait()
            if cmd is not None:
                _fail(cmd, RuntimeError("GameTable stopped"))

    async def _apply(self, cmd: _Command) -> None:
        try:
            result = dispatch_action(
                self._state,
                cmd.action,
                player=cmd.player,
                payload=cmd.payload,
                is_set=self._is_set,
            )
        except GameError as e:
            logger.info("rejected %s from %s: %s", cmd.action, cmd.player, e)
            _fail(cmd, e)
            return
        except Exception as e:
            logger.exception("command %s failed", cmd.action)
            _fail(cmd, e)
            return

        self._state = result.state
        await self._publish(cmd, result)
        if not cmd.done.cancelled():
            cmd.done.set_result(result)

    async def _publish(self, cmd: _Command, result: ActionResult) -> None:
        if result.candidate is not None:
            event = CandidateEvent.from_result(result.candidate)
            await self.hub.broadcast({"type": event.event.value, **event.model_dump(mode="json")})
        await self.hub.broadcast(
            {
                "type": "state_changed",
                "action": str(cmd.action),
                "player": cmd.player,
                "snapshot": GameSnapshot.from_state(result.state).model_dump(mode="json"),
            }
        )

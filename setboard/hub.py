from __future__ import annotations

import asyncio
import logging

logger = logging.getLogger(__name__)


class SnapshotHub:
    """In-process pub/sub for table updates.

    Contract:
      - ``subscribe()`` hands out a queue that receives every later broadcast.
      - ``broadcast(payload)`` fans a JSON-serializable dict out to all queues.

    A subscriber whose bounded queue is full is dropped rather than blocking
    the table.
    """

    def __init__(self) -> None:
        self._subscribers: set[asyncio.Queue[dict[str, object]]] = set()
        self._lock = asyncio.Lock()

    async def subscribe(self, *, maxsize: int = 0) -> asyncio.Queue[dict[str, object]]:
        queue: asyncio.Queue[dict[str, object]] = asyncio.Queue(maxsize=maxsize)
        async with self._lock:
            self._subscribers.add(queue)
        return queue

    async def unsubscribe(self, queue: asyncio.Queue[dict[str, object]]) -> None:
        async with self._lock:
            self._subscribers.discard(queue)

    async def broadcast(self, payload: dict[str, object]) -> None:
        async with self._lock:
            queues = list(self._subscribers)

        dead: list[asyncio.Queue[dict[str, object]]] = []
        for q in queues:
            try:
                q.put_nowait(payload)
            except asyncio.QueueFull:
                dead.append(q)

        if dead:
            logger.warning("dropping %d slow subscriber(s)", len(dead))
            async with self._lock:
                for q in dead:
                    self._subscribers.discard(q)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

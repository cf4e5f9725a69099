from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ScreenWebSocketHub:
    """In-process WebSocket fan-out for the single local game.

    Contract:
      - register a page with `connect(websocket)`.
      - push JSON-serializable dicts with `broadcast(payload)` (async) or
        `publish(payload)` (sync, from game-loop callbacks running on the event loop).
    """

    def __init__(self) -> None:
        self._conns: set[WebSocket] = set()
        self._lock = asyncio.Lock()
        self._pending: set[asyncio.Task[None]] = set()

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self._conns.add(websocket)

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            self._conns.discard(websocket)

    async def broadcast(self, payload: dict[str, Any]) -> None:
        async with self._lock:
            conns = list(self._conns)

        if not conns:
            return

        dead: list[WebSocket] = []
        for ws in conns:
            try:
                await ws.send_json(payload)
            except Exception:
                dead.append(ws)

        if dead:
            async with self._lock:
                for ws in dead:
                    self._conns.discard(ws)

    def publish(self, payload: dict[str, Any]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop (e.g. a synchronous simulation): nobody can be listening.
            logger.debug("Dropping screen update outside the event loop: %s", payload)
            return
        task = loop.create_task(self.broadcast(payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)


hub = ScreenWebSocketHub()

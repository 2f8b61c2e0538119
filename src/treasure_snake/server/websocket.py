"""WebSocket handler for real-time play."""

from __future__ import annotations

import asyncio
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from treasure_snake.server.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_session(ws: WebSocket) -> GameSession:
    return ws.app.state.session


async def _pump(websocket: WebSocket, queue: asyncio.Queue[dict]) -> None:
    """Forward queued states to the client until cancelled."""
    while True:
        state = await queue.get()
        try:
            if websocket.client_state != WebSocketState.CONNECTED:
                return
            await websocket.send_text(json.dumps(state, separators=(",", ":")))
        except Exception:
            logger.warning("Failed sending state to player socket.")
            return


@ws_router.websocket("/game/play")
async def play(websocket: WebSocket) -> None:
    """Player WebSocket: send keys and commands, receive state on change."""
    session = _get_session(websocket)
    await websocket.accept()
    logger.info("Player connected.")

    queue = session.subscribe()
    sender = asyncio.create_task(_pump(websocket, queue))
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue
            await session.handle_message(msg)
    except WebSocketDisconnect:
        logger.info("Player disconnected.")
    finally:
        sender.cancel()
        await asyncio.gather(sender, return_exceptions=True)
        session.unsubscribe(queue)

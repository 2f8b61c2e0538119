"""Game session: one engine, its async tick loop, and state subscribers."""

from __future__ import annotations

import asyncio
import logging

from treasure_snake.config import GameConfig, Palette
from treasure_snake.engine import GameEngine
from treasure_snake.keys import direction_for_key
from treasure_snake.render import Renderer
from treasure_snake.snake import Direction
from treasure_snake.state import GameState

logger = logging.getLogger(__name__)

# Slow consumers only ever need the latest states.
_SUBSCRIBER_QUEUE_SIZE = 16

COMMANDS = ("start", "pause", "resume", "toggle")


class GameSession:
    """Hosts a single game and delivers its ticks.

    The engine is only touched while holding :attr:`lock`, so ticks,
    commands and input are serialized on the event loop. Pausing cancels
    the tick task and resuming creates a new one.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        palette: Palette | None = None,
    ) -> None:
        self.engine = GameEngine(config, seed=seed)
        self.renderer = Renderer(self.engine.config, palette)
        self.lock = asyncio.Lock()
        self._subscribers: list[asyncio.Queue[dict]] = []
        self._task: asyncio.Task | None = None
        self.engine.subscribe(self._on_change)

    @property
    def ticking(self) -> bool:
        return self._task is not None and not self._task.done()

    # -- commands -----------------------------------------------------------

    async def start(self) -> bool:
        async with self.lock:
            self.engine.start()
        self._ensure_ticking()
        return True

    async def pause(self) -> bool:
        async with self.lock:
            accepted = self.engine.pause()
        if accepted:
            self._stop_ticking()
        return accepted

    async def resume(self) -> bool:
        async with self.lock:
            accepted = self.engine.resume()
        if accepted:
            self._ensure_ticking()
        return accepted

    async def toggle(self) -> bool:
        if self.engine.state.running:
            return await self.pause()
        return await self.resume()

    async def command(self, name: str) -> bool:
        """Run one of :data:`COMMANDS` by name."""
        if name not in COMMANDS:
            raise ValueError(f"Unknown command '{name}'.")
        return await getattr(self, name)()

    async def set_direction(self, direction: Direction) -> bool:
        async with self.lock:
            return self.engine.set_direction(direction)

    async def handle_message(self, msg: dict) -> bool:
        """Apply a client message; unknown or malformed content is ignored."""
        command = msg.get("command")
        if isinstance(command, str) and command.lower() in COMMANDS:
            return await self.command(command.lower())

        for field in ("key", "direction"):
            value = msg.get(field)
            if isinstance(value, str):
                direction = direction_for_key(value)
                if direction is not None:
                    return await self.set_direction(direction)
        return False

    # -- observation --------------------------------------------------------

    def state(self) -> dict:
        return self.engine.get_state()

    def frame_png(self) -> bytes:
        return self.renderer.render_png(self.engine.state)

    def subscribe(self) -> asyncio.Queue[dict]:
        """Return a queue that receives the current state, then every change."""
        queue: asyncio.Queue[dict] = asyncio.Queue(maxsize=_SUBSCRIBER_QUEUE_SIZE)
        queue.put_nowait(self.engine.get_state())
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[dict]) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def _on_change(self, state: GameState) -> None:
        payload = self.engine.get_state()
        for queue in self._subscribers:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(payload)

    # -- tick loop ----------------------------------------------------------

    def _ensure_ticking(self) -> None:
        if not self.ticking:
            self._task = asyncio.create_task(self._tick_loop())

    def _stop_ticking(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _tick_loop(self) -> None:
        """Advance the engine once per tick until it stops playing."""
        interval = self.engine.config.tick_ms / 1000.0
        try:
            while self.engine.is_playing:
                await asyncio.sleep(interval)
                async with self.lock:
                    self.engine.advance()
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled.")
        except Exception:
            logger.exception("Tick loop error; pausing game.")
            self.engine.pause()

    async def cleanup(self) -> None:
        """Cancel the tick loop and drop subscribers."""
        task = self._task
        self._stop_ticking()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)
        self._subscribers.clear()
        logger.info("GameSession cleanup complete.")

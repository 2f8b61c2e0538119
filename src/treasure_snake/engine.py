"""Tick-based game engine composing snake, treasure, and score logic."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from treasure_snake.config import GameConfig
from treasure_snake.grid import Grid
from treasure_snake.snake import Direction, Position, Snake
from treasure_snake.state import GameState
from treasure_snake.treasure import TreasureSpawner

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class GameEngine:
    """Single-player, tick-based game engine.

    The engine owns the one mutable :class:`GameState`. Commands
    (:meth:`start`, :meth:`pause`, :meth:`resume`, :meth:`set_direction`)
    and the periodic :meth:`advance` are the only ways it changes, and
    every change is announced to the subscribed listeners.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = np.random.default_rng(seed)
        self.treasure_spawner = TreasureSpawner(
            self.config.grid_size,
            rng=self.rng,
            max_attempts=self.config.max_sample_attempts,
        )
        self._listeners: list[Listener] = []
        self.state = self._initial_state()

    # -- observable state ---------------------------------------------------

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def is_playing(self) -> bool:
        return self.state.is_playing

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def snake(self) -> tuple[Position, ...]:
        return tuple(self.state.snake)

    @property
    def treasure(self) -> Position | None:
        return self.state.treasure

    @property
    def direction(self) -> Direction:
        return self.state.direction

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for state changes; returns an unsubscriber."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- commands -----------------------------------------------------------

    def start(self) -> None:
        """Discard any game in progress and start a fresh one."""
        self.state = self._initial_state()
        self.state.started = True
        self.state.running = True
        logger.info("Game started (treasure at %s).", self.state.treasure)
        self._notify()

    def pause(self) -> bool:
        """Stop ticking. Returns False if there was nothing to pause."""
        if not self.state.is_playing:
            return False
        self.state.running = False
        logger.info("Game paused at tick %d.", self.state.tick)
        self._notify()
        return True

    def resume(self) -> bool:
        """Continue a paused game. Returns False if the game is not paused."""
        if not self.state.is_paused:
            return False
        self.state.running = True
        logger.info("Game resumed at tick %d.", self.state.tick)
        self._notify()
        return True

    def toggle_pause(self) -> bool:
        if self.state.running:
            return self.pause()
        return self.resume()

    def set_direction(self, direction: Direction) -> bool:
        """Buffer *direction* for the next tick.

        Reversals of the committed direction and input received while the
        game is not running are ignored. The last accepted input before a
        tick wins.
        """
        state = self.state
        if not state.is_playing or direction.is_opposite(state.direction):
            return False
        if state.pending_direction is not direction:
            state.pending_direction = direction
            self._notify()
        return True

    def advance(self) -> dict:
        """Advance the game by one tick.

        Returns the full game state as a serializable dict.
        """
        state = self.state
        if not state.is_playing:
            return self.get_state()

        state.direction = state.pending_direction
        new_head = state.snake.next_head(state.direction)

        # Collisions are checked against the body before the move, so the
        # cell the tail is about to vacate still counts as occupied.
        if not self._in_bounds(new_head) or state.snake.occupies(new_head):
            self._end_game()
            return self.get_state()

        ate = new_head == state.treasure
        state.snake.move(new_head, grow=ate)
        state.tick += 1

        if ate:
            state.score += self.config.treasure_reward
            state.treasure = self.treasure_spawner.spawn(state.snake)
            if state.treasure is None:
                self._end_game(won=True)
                return self.get_state()

        self._notify()
        return self.get_state()

    # -- queries ------------------------------------------------------------

    def board(self) -> Grid:
        """Return the board contents as an occupancy grid."""
        return Grid.from_state(self.state, self.config.grid_size)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        d = self.state.to_dict()
        d["grid"] = self.board().to_dict()
        d["config"] = {
            "grid_size": self.config.grid_size,
            "cell_size": self.config.cell_size,
            "tick_ms": self.config.tick_ms,
        }
        return d

    # -- internals ----------------------------------------------------------

    def _initial_state(self) -> GameState:
        snake = Snake(self.config.initial_snake)
        direction = self.config.initial_direction
        return GameState(
            snake=snake,
            direction=direction,
            pending_direction=direction,
            treasure=self.treasure_spawner.spawn(snake),
        )

    def _in_bounds(self, position: Position) -> bool:
        x, y = position
        size = self.config.grid_size
        return 0 <= x < size and 0 <= y < size

    def _end_game(self, won: bool = False) -> None:
        """Mark the game as over and stop ticking."""
        state = self.state
        state.game_over = True
        state.running = False
        state.won = won
        if won:
            state.treasure = None
            logger.info(
                "Board filled at tick %d with score %d.", state.tick, state.score,
            )
        else:
            state.tick += 1
            logger.info(
                "Snake crashed at tick %d with score %d.", state.tick, state.score,
            )
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.state.snapshot())
            except Exception:
                logger.exception("State listener %r failed.", listener)

"""The mutable game state aggregate owned by the engine."""

from __future__ import annotations

from dataclasses import dataclass, replace

from treasure_snake.snake import Direction, Position, Snake


@dataclass
class GameState:
    """Everything one game needs between ticks.

    ``direction`` is the direction applied on the most recent tick;
    ``pending_direction`` is the buffered input consumed by the next one.
    """

    snake: Snake
    direction: Direction
    pending_direction: Direction
    treasure: Position | None
    score: int = 0
    started: bool = False
    running: bool = False
    game_over: bool = False
    won: bool = False
    tick: int = 0

    @property
    def is_playing(self) -> bool:
        return self.running and not self.game_over

    @property
    def is_paused(self) -> bool:
        return self.started and not self.running and not self.game_over

    def snapshot(self) -> GameState:
        """Return an independent copy safe to hand to observers."""
        return replace(self, snake=self.snake.copy())

    def to_dict(self) -> dict:
        """Serialize to JSON-friendly primitives."""
        return {
            "tick": self.tick,
            "score": self.score,
            "started": self.started,
            "running": self.running,
            "is_playing": self.is_playing,
            "paused": self.is_paused,
            "game_over": self.game_over,
            "won": self.won,
            "snake": self.snake.to_list(),
            "direction": list(self.direction.value),
            "pending_direction": list(self.pending_direction.value),
            "treasure": list(self.treasure) if self.treasure is not None else None,
        }

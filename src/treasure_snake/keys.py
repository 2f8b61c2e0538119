"""Keyboard mapping: arrow keys and WASD to directions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from treasure_snake.snake import Direction

if TYPE_CHECKING:
    from treasure_snake.engine import GameEngine

KEY_BINDINGS: dict[str, Direction] = {
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Return the direction bound to *key* (case-insensitive), if any."""
    return KEY_BINDINGS.get(key.strip().lower())


def handle_key(engine: GameEngine, key: str) -> bool:
    """Forward a recognized key to the engine.

    Returns True only if the engine accepted the direction.
    """
    direction = direction_for_key(key)
    if direction is None:
        return False
    return engine.set_direction(direction)

"""Treasure Snake: single-player snake game engine and renderer."""

from treasure_snake.config import GameConfig, Palette
from treasure_snake.engine import GameEngine
from treasure_snake.grid import CellType, Grid
from treasure_snake.keys import direction_for_key, handle_key
from treasure_snake.render import Renderer
from treasure_snake.snake import Direction, Snake
from treasure_snake.state import GameState
from treasure_snake.treasure import TreasureSpawner

__all__ = [
    "CellType",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Grid",
    "Palette",
    "Renderer",
    "Snake",
    "TreasureSpawner",
    "direction_for_key",
    "handle_key",
]

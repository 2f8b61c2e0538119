"""Treasure placement."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from treasure_snake.grid import Grid
from treasure_snake.snake import Position

logger = logging.getLogger(__name__)


class TreasureSpawner:
    """Picks a treasure cell uniformly among the cells the snake leaves free.

    Placement is rejection sampled with a seeded NumPy RNG. Once
    *max_attempts* draws all land on the snake, the spawner falls back to
    choosing directly among the empty cells of an occupancy grid, so a
    crowded board never stalls a tick.
    """

    def __init__(
        self,
        grid_size: int,
        rng: np.random.Generator | None = None,
        max_attempts: int = 1_000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid_size = grid_size
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(self, occupied: Iterable[Position]) -> Position | None:
        """Return a free cell, or ``None`` when the snake fills the board."""
        taken = set(occupied)
        if len(taken) >= self.grid_size * self.grid_size:
            return None

        for _ in range(self.max_attempts):
            x, y = self.rng.integers(0, self.grid_size, size=2).tolist()
            if (x, y) not in taken:
                return x, y

        logger.warning(
            "Treasure sampling missed %d times; choosing from empty cells.",
            self.max_attempts,
        )
        grid = Grid(self.grid_size)
        grid.paint_snake(taken)
        empty = grid.empty_cells()
        if not empty:
            return None
        return empty[int(self.rng.integers(len(empty)))]

"""Grid representation for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from treasure_snake.snake import Position

if TYPE_CHECKING:
    from treasure_snake.state import GameState


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    TREASURE = 2


class Grid:
    """NumPy-backed square board.

    Cells are stored as integers indexed ``cells[y, x]`` so that a row of
    the array is a row of the board as drawn on screen.
    """

    def __init__(self, size: int = 20) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4×4.")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.int8)

    @classmethod
    def from_state(cls, state: GameState, size: int) -> Grid:
        """Build a board with the snake and treasure of *state* painted on."""
        grid = cls(size)
        grid.paint_snake(state.snake)
        if state.treasure is not None:
            grid.set(state.treasure, CellType.TREASURE)
        return grid

    def in_bounds(self, position: Position) -> bool:
        """Check whether a coordinate lies within the grid."""
        x, y = position
        return 0 <= x < self.size and 0 <= y < self.size

    def set(self, position: Position, cell_type: CellType) -> None:
        x, y = position
        self.cells[y, x] = cell_type

    def paint_snake(self, segments: Iterable[Position]) -> None:
        """Mark every in-bounds segment as snake."""
        for seg in segments:
            if self.in_bounds(seg):
                self.set(seg, CellType.SNAKE)

    def empty_cells(self) -> list[Position]:
        """Return a list of all empty cell coordinates as (x, y)."""
        ys, xs = np.where(self.cells == CellType.EMPTY)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "size": self.size,
            "cells": self.cells.tolist(),
        }

"""Game constants and theme palette."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from treasure_snake.snake import Direction, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Named game parameters.

    Supports JSON serialization so a session can be reproduced.
    """

    grid_size: int = 20
    cell_size: int = 24
    tick_ms: int = 140
    treasure_reward: int = 10
    initial_snake: tuple[Position, ...] = ((9, 10), (8, 10))
    initial_direction: Direction = Direction.RIGHT
    max_sample_attempts: int = 1_000

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        for name in (
            "cell_size", "tick_ms", "treasure_reward", "max_sample_attempts",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive.")

        snake = tuple((int(x), int(y)) for x, y in self.initial_snake)
        object.__setattr__(self, "initial_snake", snake)
        direction = self.initial_direction
        if not isinstance(direction, Direction):
            direction = Direction(tuple(direction))
            object.__setattr__(self, "initial_direction", direction)

        if len(snake) < 2:
            raise ValueError("initial_snake needs at least 2 segments.")
        if len(set(snake)) != len(snake):
            raise ValueError("initial_snake segments must not overlap.")
        for x, y in snake:
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(f"initial_snake segment {(x, y)} is off the grid.")
        for (ax, ay), (bx, by) in zip(snake, snake[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ValueError("initial_snake segments must be contiguous.")

        # The first move must not run the head straight into the neck.
        dx, dy = direction.value
        head_x, head_y = snake[0]
        if (head_x + dx, head_y + dy) == snake[1]:
            raise ValueError("initial_direction points back into the snake.")

    @property
    def board_pixels(self) -> int:
        return self.grid_size * self.cell_size

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        d["initial_snake"] = [list(seg) for seg in self.initial_snake]
        d["initial_direction"] = self.initial_direction.name.lower()
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        raw = dict(raw)
        if "initial_snake" in raw:
            raw["initial_snake"] = tuple(tuple(seg) for seg in raw["initial_snake"])
        name = raw.get("initial_direction")
        if isinstance(name, str):
            try:
                raw["initial_direction"] = Direction[name.upper()]
            except KeyError as exc:
                raise ValueError(f"Unknown initial_direction '{name}'.") from exc
        return cls(**raw)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))


@dataclass(frozen=True)
class Palette:
    """Colors used by the renderer (ocean theme)."""

    background: str = "#FDF2F8"
    surface: str = "#FFFFFF"
    surface_alt: str = "#F9FAFB"
    accent: str = "#EC4899"
    secondary: str = "#8B5CF6"
    eye: str = "#111827"
    highlight: tuple[int, int, int, int] = (255, 255, 255, 191)
    overlay: tuple[int, int, int, int] = (17, 24, 39, 140)
    overlay_text: str = "#FFFFFF"

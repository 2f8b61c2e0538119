"""Snake body and movement directions."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator

Position = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    The y axis grows downwards, matching screen coordinates.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: Direction) -> bool:
        """Check whether *other* would be an instant 180° reversal."""
        return self.opposite is other


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, segments: Iterable[Position] = ()) -> None:
        self.body: deque[Position] = deque(
            (int(x), int(y)) for x, y in segments
        )

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snake):
            return NotImplemented
        return self.body == other.body

    def __repr__(self) -> str:
        return f"Snake({list(self.body)!r})"

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    def next_head(self, direction: Direction) -> Position:
        """Compute the next head position without moving."""
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def move(self, new_head: Position, grow: bool = False) -> Position | None:
        """Prepend *new_head* and drop the tail unless growing.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def occupies(self, position: Position) -> bool:
        """Check whether the snake occupies a given cell."""
        return position in self.body

    def copy(self) -> Snake:
        return Snake(self.body)

    def to_list(self) -> list[list[int]]:
        """Serialize the body as a list of [x, y] pairs."""
        return [list(seg) for seg in self.body]

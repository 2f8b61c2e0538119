"""Frame rendering with Pillow.

The renderer is a read-only projection of a :class:`GameState` into an
image: a checkerboard board, the treasure diamond, the snake with an
oriented head, and a dimming overlay once the game is over. Geometry is
expressed for a 24 px cell and scaled to the configured cell size.
"""

from __future__ import annotations

import io
from functools import lru_cache

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from treasure_snake.config import GameConfig, Palette
from treasure_snake.snake import Direction, Position
from treasure_snake.state import GameState

_REFERENCE_CELL = 24
GAME_OVER_TEXT = "Game Over"
WIN_TEXT = "You Win"
RESTART_HINT = "Press Restart to play again"


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def gradient_tile(
    size: int, start: tuple[int, int, int], end: tuple[int, int, int],
) -> Image.Image:
    """Square RGBA tile shading from *start* (top-left) to *end* (bottom-right)."""
    ramp = np.add.outer(np.arange(size), np.arange(size)) / max(2 * (size - 1), 1)
    lo = np.asarray(start, dtype=np.float64)
    hi = np.asarray(end, dtype=np.float64)
    pixels = lo + (hi - lo) * ramp[..., np.newaxis]
    return Image.fromarray(pixels.round().astype(np.uint8)).convert("RGBA")


@lru_cache(maxsize=8)
def _load_font(size: int, bold: bool = False) -> ImageFont.ImageFont:
    name = "DejaVuSans-Bold.ttf" if bold else "DejaVuSans.ttf"
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        return ImageFont.load_default(size=size)


class Renderer:
    """Draws game frames at ``grid_size * cell_size`` pixels square."""

    def __init__(
        self,
        config: GameConfig | None = None,
        palette: Palette | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.palette = palette if palette is not None else Palette()
        self.cell = self.config.cell_size
        self.pixels = self.config.board_pixels

        scale = self.cell / _REFERENCE_CELL
        self._inset = min(max(1, round(2 * scale)), (self.cell - 1) // 2)
        self._radius = max(1, round(6 * scale))
        self._eye_spread = 5 * scale
        self._eye_forward = 6 * scale
        self._eye_radius = max(1.0, 4 * scale)
        self._title_font = _load_font(max(8, round(26 * scale)), bold=True)
        self._hint_font = _load_font(max(6, round(16 * scale)))

        accent = hex_to_rgb(self.palette.accent)
        secondary = hex_to_rgb(self.palette.secondary)
        self._head_tile = gradient_tile(self.cell, accent, secondary)
        self._body_tile = gradient_tile(self.cell, secondary, accent)
        self._treasure_tile = self._head_tile
        self._segment_mask = self._make_segment_mask()
        self._diamond_mask = self._make_diamond_mask()

    def render(self, state: GameState) -> Image.Image:
        """Draw *state* and return an RGB image."""
        img = self._draw_board()
        if state.treasure is not None:
            self._draw_treasure(img, state.treasure)
        for idx, segment in enumerate(state.snake):
            self._draw_segment(img, segment, is_head=idx == 0)
            if idx == 0:
                self._draw_eyes(img, segment, state.direction)
        if state.game_over:
            img = self._draw_overlay(img, won=state.won)
        return img.convert("RGB")

    def render_array(self, state: GameState) -> np.ndarray:
        """Draw *state* as an ``(H, W, 3)`` uint8 array."""
        return np.asarray(self.render(state))

    def render_png(self, state: GameState) -> bytes:
        buf = io.BytesIO()
        self.render(state).save(buf, format="PNG")
        return buf.getvalue()

    # -- layers -------------------------------------------------------------

    def _draw_board(self) -> Image.Image:
        """Background fill with a checkerboard of the two surface tones."""
        n = self.config.grid_size
        parity = np.add.outer(np.arange(n), np.arange(n)) % 2
        parity = np.kron(parity, np.ones((self.cell, self.cell), dtype=np.int64))
        tones = np.array(
            [hex_to_rgb(self.palette.surface), hex_to_rgb(self.palette.surface_alt)],
            dtype=np.uint8,
        )
        board = Image.new("RGBA", (self.pixels, self.pixels), self.palette.background)
        board.paste(Image.fromarray(tones[parity]).convert("RGBA"), (0, 0))
        return board

    def _draw_treasure(self, img: Image.Image, position: Position) -> None:
        origin = self._origin(position)
        img.paste(self._treasure_tile, origin, self._diamond_mask)

        # Highlight facet on the upper right of the diamond.
        half = self.cell / 2
        size = self.cell * 0.5
        facet = Image.new("RGBA", (self.cell, self.cell), (0, 0, 0, 0))
        ImageDraw.Draw(facet).polygon(
            [
                (half, half - size * 0.6),
                (half + size * 0.2, half - size * 0.1),
                (half, half),
            ],
            fill=self.palette.highlight,
        )
        img.alpha_composite(facet, dest=origin)

    def _draw_segment(self, img: Image.Image, position: Position, is_head: bool) -> None:
        tile = self._head_tile if is_head else self._body_tile
        img.paste(tile, self._origin(position), self._segment_mask)

    def _draw_eyes(self, img: Image.Image, head: Position, direction: Direction) -> None:
        """Two eyes pushed toward the side the head is facing."""
        x0, y0 = self._origin(head)
        cx = x0 + self.cell / 2
        cy = y0 + self.cell / 2
        dx, dy = direction.value
        # Perpendicular axis along which the two eyes are spread.
        px, py = abs(dy), abs(dx)
        fx = cx + dx * self._eye_forward
        fy = cy + dy * self._eye_forward
        r = self._eye_radius
        draw = ImageDraw.Draw(img)
        for sign in (-1, 1):
            ex = fx + sign * px * self._eye_spread
            ey = fy + sign * py * self._eye_spread
            draw.ellipse([ex - r, ey - r, ex + r, ey + r], fill=self.palette.eye)

    def _draw_overlay(self, img: Image.Image, won: bool) -> Image.Image:
        shade = Image.new("RGBA", img.size, self.palette.overlay)
        img = Image.alpha_composite(img, shade)
        draw = ImageDraw.Draw(img)
        center = self.pixels / 2
        title = WIN_TEXT if won else GAME_OVER_TEXT
        self._draw_centered(draw, title, self._title_font, center - 8)
        self._draw_centered(draw, RESTART_HINT, self._hint_font, center + 18)
        return img

    def _draw_centered(
        self,
        draw: ImageDraw.ImageDraw,
        text: str,
        font: ImageFont.ImageFont,
        baseline: float,
    ) -> None:
        """Draw *text* horizontally centered with its alphabetic baseline at *baseline*."""
        draw.text(
            (self.pixels / 2, baseline), text,
            fill=self.palette.overlay_text, font=font, anchor="ms",
        )

    # -- geometry -----------------------------------------------------------

    def _origin(self, position: Position) -> tuple[int, int]:
        x, y = position
        return x * self.cell, y * self.cell

    def _make_segment_mask(self) -> Image.Image:
        mask = Image.new("L", (self.cell, self.cell), 0)
        inset = self._inset
        box = [inset, inset, self.cell - inset - 1, self.cell - inset - 1]
        draw = ImageDraw.Draw(mask)
        # Cells this small have no room for rounded corners.
        if self.cell < 4:
            draw.rectangle(box, fill=255)
        else:
            draw.rounded_rectangle(box, radius=self._radius, fill=255)
        return mask

    def _make_diamond_mask(self) -> Image.Image:
        mask = Image.new("L", (self.cell, self.cell), 0)
        half = self.cell / 2
        size = self.cell * 0.5
        ImageDraw.Draw(mask).polygon(
            [(half, half - size), (half + size, half), (half, half + size), (half - size, half)],
            fill=255,
        )
        return mask

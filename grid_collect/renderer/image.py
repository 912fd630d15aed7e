"""Pillow image rendering.

Draws the board as an RGBA image: a light grid, a yellow star for each item,
a red cross for each obstacle and a blue cell with a white disc for the
player. Nothing but the player is drawn on the player's cell.
"""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Set, Tuple

from PIL import Image, ImageDraw

from grid_collect.components import Position
from grid_collect.state import State


DEFAULT_RESOLUTION = 640

Color = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Palette:
    background: Color = (255, 255, 255, 255)
    grid_line: Color = (229, 231, 235, 255)
    player_cell: Color = (59, 130, 246, 255)
    player: Color = (255, 255, 255, 255)
    item: Color = (250, 204, 21, 255)
    obstacle: Color = (239, 68, 68, 255)


DEFAULT_PALETTE = Palette()


@lru_cache(maxsize=64)
def star_points(
    cx: float, cy: float, outer: float, inner: float
) -> Tuple[Tuple[float, float], ...]:
    """Vertices of a five-pointed star centered on ``(cx, cy)``."""
    points: List[Tuple[float, float]] = []
    for i in range(10):
        radius = outer if i % 2 == 0 else inner
        angle = -math.pi / 2 + i * math.pi / 5
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return tuple(points)


def _cell_box(pos: Position, cell_size: int) -> Tuple[int, int, int, int]:
    x0, y0 = pos.x * cell_size, pos.y * cell_size
    return x0, y0, x0 + cell_size - 1, y0 + cell_size - 1


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    palette: Optional[Palette] = None,
) -> Image.Image:
    """Render ``state`` as a square RGBA image.

    The image side is ``resolution`` rounded down to a multiple of the grid
    size so every cell is the same number of pixels.
    """
    palette = palette or DEFAULT_PALETTE
    cell_size: int = max(resolution // state.grid_size, 1)
    side = cell_size * state.grid_size
    img = Image.new("RGBA", (side, side), palette.background)
    draw = ImageDraw.Draw(img)

    for i in range(state.grid_size + 1):
        offset = min(i * cell_size, side - 1)
        draw.line([(offset, 0), (offset, side - 1)], fill=palette.grid_line)
        draw.line([(0, offset), (side - 1, offset)], fill=palette.grid_line)

    half = cell_size / 2
    inset = cell_size * 0.3
    drawn_items: Set[Position] = set()
    for item in state.items:
        if item.position == state.player or item.position in drawn_items:
            continue
        drawn_items.add(item.position)
        cx = item.position.x * cell_size + half
        cy = item.position.y * cell_size + half
        draw.polygon(
            star_points(cx, cy, cell_size * 0.3, cell_size * 0.12), fill=palette.item
        )

    width = max(cell_size // 10, 1)
    for obstacle in state.obstacles:
        if obstacle.position == state.player:
            continue
        x0, y0, x1, y1 = _cell_box(obstacle.position, cell_size)
        draw.line(
            [(x0 + inset, y0 + inset), (x1 - inset, y1 - inset)],
            fill=palette.obstacle,
            width=width,
        )
        draw.line(
            [(x0 + inset, y1 - inset), (x1 - inset, y0 + inset)],
            fill=palette.obstacle,
            width=width,
        )

    x0, y0, x1, y1 = _cell_box(state.player, cell_size)
    draw.rectangle([x0, y0, x1, y1], fill=palette.player_cell)
    radius = cell_size * 0.2
    cx, cy = x0 + half, y0 + half
    draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=palette.player)

    return img


class ImageRenderer:
    resolution: int
    palette: Palette

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        palette: Optional[Palette] = None,
    ):
        self.resolution = resolution
        self.palette = palette or DEFAULT_PALETTE

    def render(self, state: State) -> Image.Image:
        return render(state, resolution=self.resolution, palette=self.palette)

"""ASCII board rendering.

One line per row, one character per cell. When several things share a cell
the player is shown first, then an obstacle, then an item.
"""

from typing import Dict

from grid_collect.components import Position
from grid_collect.state import State


PLAYER_GLYPH = "P"
OBSTACLE_GLYPH = "X"
ITEM_GLYPH = "*"
EMPTY_GLYPH = "."


def cell_glyphs(state: State) -> Dict[Position, str]:
    glyphs: Dict[Position, str] = {}
    # Lowest precedence first so later writes win.
    for item in state.items:
        glyphs[item.position] = ITEM_GLYPH
    for obstacle in state.obstacles:
        glyphs[obstacle.position] = OBSTACLE_GLYPH
    glyphs[state.player] = PLAYER_GLYPH
    return glyphs


def render_text(state: State) -> str:
    """Render ``state`` as ``grid_size`` newline separated rows."""
    glyphs = cell_glyphs(state)
    rows = []
    for y in range(state.grid_size):
        rows.append(
            "".join(
                glyphs.get(Position(x, y), EMPTY_GLYPH) for x in range(state.grid_size)
            )
        )
    return "\n".join(rows)

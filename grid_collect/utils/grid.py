"""Grid math / lookup helpers.

Pure predicates and helpers used by the movement and collision systems. The
grid is small and holds only a handful of tokens, so lookups are plain linear
scans over the token vectors.
"""

import random
from typing import Iterable, Optional

from grid_collect.components import Position, Token
from grid_collect.types import Delta


def is_in_bounds(pos: Position, grid_size: int) -> bool:
    """Return True if ``pos`` lies within the ``grid_size`` square."""
    return 0 <= pos.x < grid_size and 0 <= pos.y < grid_size


def clamp(pos: Position, delta: Delta, grid_size: int) -> Position:
    """Shift ``pos`` by ``delta`` without leaving the grid.

    Each axis is clamped to ``[0, grid_size - 1]`` independently, so a move
    into an edge leaves that coordinate unchanged.
    """
    dx, dy = delta
    return Position(
        min(max(pos.x + dx, 0), grid_size - 1),
        min(max(pos.y + dy, 0), grid_size - 1),
    )


def first_token_at(tokens: Iterable[Token], pos: Position) -> Optional[Token]:
    """Return the first token at ``pos`` in collection order, if any."""
    return next((token for token in tokens if token.position == pos), None)


def random_position(rng: random.Random, grid_size: int) -> Position:
    """Draw a uniformly random cell of the ``grid_size`` square."""
    return Position(rng.randrange(grid_size), rng.randrange(grid_size))

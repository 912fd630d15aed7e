"""Round configuration.

``GameConfig`` bundles the knobs accepted by
:func:`grid_collect.levels.generator.new_game`. It is a frozen dataclass so a
front end can keep it in session state and derive variants with
``dataclasses.replace`` (e.g. bumping the seed for "Play Again").
"""

from dataclasses import dataclass
from typing import Optional

from grid_collect.types import DEFAULT_ITEM_COUNT, DEFAULT_OBSTACLE_COUNT, GRID_SIZE


@dataclass(frozen=True)
class GameConfig:
    """Parameters for a new round.

    Attributes:
        grid_size: Side length of the square grid.
        item_count: Number of items placed at the start of a round.
        obstacle_count: Number of obstacles placed at the start of a round.
        seed: Base RNG seed; ``None`` draws a fresh one per round.
    """

    grid_size: int = GRID_SIZE
    item_count: int = DEFAULT_ITEM_COUNT
    obstacle_count: int = DEFAULT_OBSTACLE_COUNT
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        validate_counts(self.grid_size, self.item_count, self.obstacle_count)


def validate_counts(grid_size: int, item_count: int, obstacle_count: int) -> None:
    """Raise ``ValueError`` for a grid or token counts that cannot form a round."""
    if grid_size < 1:
        raise ValueError(f"grid_size must be at least 1, got {grid_size}")
    if item_count < 0:
        raise ValueError(f"item_count must be non-negative, got {item_count}")
    if obstacle_count < 0:
        raise ValueError(f"obstacle_count must be non-negative, got {obstacle_count}")

"""Round generator.

Builds the initial :class:`grid_collect.state.State` of a round: a random
player cell, ``item_count`` items and ``obstacle_count`` obstacles, each on an
independent uniformly random cell. Placements are not de-duplicated, so tokens
may share cells with each other or with the player; the first evaluation pass
happens only after the first move.

Example:
    from grid_collect.levels.generator import new_game

    state = new_game(seed=123)
"""

import logging
import random
from typing import List, Optional

from pyrsistent import pvector

from grid_collect.components import Token
from grid_collect.config import GameConfig, validate_counts
from grid_collect.entity import token_ids
from grid_collect.state import State
from grid_collect.types import (
    DEFAULT_ITEM_COUNT,
    DEFAULT_OBSTACLE_COUNT,
    GRID_SIZE,
    TokenKind,
)
from grid_collect.utils.grid import random_position


logger = logging.getLogger(__name__)

SEED_BITS = 31


def place_tokens(
    rng: random.Random, kind: TokenKind, count: int, grid_size: int
) -> List[Token]:
    """Place ``count`` tokens of ``kind`` on independent random cells."""
    return [
        Token(id=tid, kind=kind, position=random_position(rng, grid_size))
        for tid in token_ids(kind, count)
    ]


def new_game(
    grid_size: int = GRID_SIZE,
    item_count: int = DEFAULT_ITEM_COUNT,
    obstacle_count: int = DEFAULT_OBSTACLE_COUNT,
    seed: Optional[int] = None,
) -> State:
    """Create the first state of a fresh round.

    Args:
        grid_size (int): Side length of the square grid.
        item_count (int): Number of items to place.
        obstacle_count (int): Number of obstacles to place.
        seed (int | None): Base RNG seed. ``None`` draws a fresh seed which is
            stored on the state so respawns stay reproducible.

    Returns:
        State: Started, not-over state with score 0.

    Raises:
        ValueError: If ``grid_size`` is smaller than 1 or a count is negative.
    """
    validate_counts(grid_size, item_count, obstacle_count)
    if seed is None:
        seed = random.getrandbits(SEED_BITS)
    rng = random.Random(seed)

    player = random_position(rng, grid_size)
    items = place_tokens(rng, TokenKind.ITEM, item_count, grid_size)
    obstacles = place_tokens(rng, TokenKind.OBSTACLE, obstacle_count, grid_size)

    logger.info(
        "New round: grid=%d items=%d obstacles=%d seed=%d",
        grid_size,
        item_count,
        obstacle_count,
        seed,
    )
    return State(
        grid_size=grid_size,
        player=player,
        items=pvector(items),
        obstacles=pvector(obstacles),
        score=0,
        started=True,
        game_over=False,
        turn=0,
        next_item_index=item_count,
        seed=seed,
    )


def new_game_from_config(config: GameConfig) -> State:
    """Create a fresh round from a :class:`GameConfig`."""
    return new_game(
        grid_size=config.grid_size,
        item_count=config.item_count,
        obstacle_count=config.obstacle_count,
        seed=config.seed,
    )

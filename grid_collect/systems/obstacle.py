"""Obstacle system.

Ends the round when the player shares a cell with any obstacle. Obstacles are
static and are never removed; the flag is set exactly once and the reducer
short-circuits on it afterwards.
"""

import logging
from dataclasses import replace

from grid_collect.state import State
from grid_collect.utils.grid import first_token_at
from grid_collect.utils.terminal import is_active_state


logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "Game over"


def obstacle_system(state: State) -> State:
    """Set ``game_over`` if an obstacle occupies the player's cell."""
    if not is_active_state(state):
        return state

    obstacle = first_token_at(state.obstacles, state.player)
    if obstacle is None:
        return state

    logger.info("Hit %s, final score %d", obstacle.id, state.score)
    return replace(state, game_over=True, message=GAME_OVER_MESSAGE)

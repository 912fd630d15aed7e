"""Collectible system.

Resolves item pickup when the player shares a cell with one or more items:

1. Only the *first* matching item in collection order is collected per pass,
    even if several items are stacked on the cell.
2. Collecting adds one to ``score`` and removes that token from ``items``.
3. If that removal empties ``items``, a single replacement item is spawned on
    a random cell so an active round always has something to collect.

Respawn ids come from ``State.next_item_index`` and never reuse an id removed
earlier in the round. Placement uses an RNG seeded from the round seed, the
turn and the index, so replaying the same inputs yields the same board.
"""

import logging
import random
from dataclasses import replace

from grid_collect.components import Token
from grid_collect.entity import token_id
from grid_collect.state import State
from grid_collect.types import TokenKind
from grid_collect.utils.grid import first_token_at, random_position
from grid_collect.utils.terminal import is_active_state


logger = logging.getLogger(__name__)


def respawn_rng(state: State) -> random.Random:
    """Deterministic RNG for the respawn happening in ``state``."""
    base_seed = hash(
        (state.seed if state.seed is not None else 0, state.turn, state.next_item_index)
    )
    return random.Random(base_seed)


def respawn_item(state: State) -> State:
    """Append one new item on a random cell and advance the id counter."""
    item = Token(
        id=token_id(TokenKind.ITEM, state.next_item_index),
        kind=TokenKind.ITEM,
        position=random_position(respawn_rng(state), state.grid_size),
    )
    logger.debug("Respawned %s at (%d, %d)", item.id, item.position.x, item.position.y)
    return replace(
        state,
        items=state.items.append(item),
        next_item_index=state.next_item_index + 1,
    )


def collectible_system(state: State) -> State:
    """Collect at most one item at the player's cell.

    Arguments:
        state:
            Current immutable state.

    Returns:
        State
            Updated state with score incremented, the collected item removed
            and, if needed, a replacement item spawned.
    """
    if not is_active_state(state):
        return state

    collected = first_token_at(state.items, state.player)
    if collected is None:
        return state

    logger.debug("Collected %s at turn %d", collected.id, state.turn)
    state = replace(
        state,
        items=state.items.remove(collected),
        score=state.score + 1,
    )
    if len(state.items) == 0:
        state = respawn_item(state)
    return state

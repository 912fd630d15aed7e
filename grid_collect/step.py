"""State reducer and step orchestration.

Each input event is one synchronous two-phase cycle:

1. ``movement_system`` moves the player (clamped to the grid).
2. :func:`evaluate` resolves the new cell: item collection first, then the
    obstacle check, both against the same player position. A cell holding an
    item and an obstacle therefore scores and ends the round in one pass.

The exported :func:`step` is the only gameplay progression entry point and is
pure: it returns a *new* :class:`grid_collect.state.State`. Nothing is
evaluated on the spawn frame; the first pass runs after the first move.
"""

from dataclasses import replace

from grid_collect.actions import Action
from grid_collect.state import State
from grid_collect.systems.collectible import collectible_system
from grid_collect.systems.movement import movement_system
from grid_collect.systems.obstacle import obstacle_system
from grid_collect.utils.terminal import is_active_state


def evaluate(state: State) -> State:
    """Run the collision / collection pass for the player's current cell.

    Args:
        state (State): State after a movement attempt.

    Returns:
        State: State with score, items and ``game_over`` updated. Inactive
            states are returned unchanged.
    """
    if not is_active_state(state):
        return state
    state = collectible_system(state)
    state = obstacle_system(state)
    return state


def step(state: State, action: Action) -> State:
    """Advance the round by one movement action.

    Args:
        state (State): Previous immutable state.
        action (Action): Movement action to apply.

    Returns:
        State: Next state. If the round is not started or already over the
            same object is returned unchanged.

    Raises:
        ValueError: If ``action`` is not a movement action.
    """
    if not is_active_state(state):
        return state

    state = movement_system(state, action)
    state = evaluate(state)
    return replace(state, turn=state.turn + 1)

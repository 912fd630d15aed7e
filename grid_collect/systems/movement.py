"""Player movement system.

Shifts the player one cell in the direction of a movement action, clamped to
the grid. Moving into an edge leaves the blocked coordinate unchanged; it is
not an error.

Returns the original ``State`` if the round is not active; otherwise a new
``State`` in which only ``player`` differs. Collisions are resolved separately
by :func:`grid_collect.step.evaluate`.
"""

from dataclasses import replace

from grid_collect.actions import Action, MOVE_ACTIONS
from grid_collect.moves import DIRECTION_DELTAS
from grid_collect.state import State
from grid_collect.utils.grid import clamp
from grid_collect.utils.terminal import is_active_state


def movement_system(state: State, action: Action) -> State:
    """Move the player one cell, clamped to the grid.

    Args:
        state (State): Current state.
        action (Action): One of ``MOVE_ACTIONS``.

    Returns:
        State: Same state if the round is inactive, otherwise a state with the
            updated player position.

    Raises:
        ValueError: If ``action`` is not a movement action.
    """
    if action not in MOVE_ACTIONS:
        raise ValueError(f"Not a movement action: {action!r}")

    if not is_active_state(state):
        return state

    next_pos = clamp(state.player, DIRECTION_DELTAS[action], state.grid_size)
    return replace(state, player=next_pos)

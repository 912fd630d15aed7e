"""Round lifecycle helper predicates."""

from grid_collect.state import State


def is_active_state(state: State) -> bool:
    """Return True if the round is started and not over."""
    return state.started and not state.game_over


def is_terminal_state(state: State) -> bool:
    """Return True if the round ended on an obstacle."""
    return state.started and state.game_over

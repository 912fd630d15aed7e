"""Commands exposed to front ends.

A presentation layer only needs three operations: start (or restart) a round,
quit the current round, and forward a key press. All of them return a new
``State``; the caller owns whichever state it keeps.
"""

import logging
from dataclasses import replace
from typing import Optional

from grid_collect.config import GameConfig
from grid_collect.keys import action_from_key
from grid_collect.levels.generator import new_game_from_config
from grid_collect.state import State
from grid_collect.step import step


logger = logging.getLogger(__name__)


def start(config: Optional[GameConfig] = None) -> State:
    """Begin a fresh round, discarding any previous one."""
    return new_game_from_config(config or GameConfig())


def quit_round(state: State) -> State:
    """Return to the pre-game screen.

    Only ``started`` changes; score and tokens are left as they were and are
    simply no longer shown.
    """
    if not state.started:
        return state
    logger.info("Round quit at turn %d with score %d", state.turn, state.score)
    return replace(state, started=False)


def press_key(state: State, key: Optional[str]) -> State:
    """Apply a keyboard event. Unbound keys leave ``state`` untouched."""
    action = action_from_key(key)
    if action is None:
        return state
    return step(state, action)

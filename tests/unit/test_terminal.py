# tests/unit/test_terminal.py

import pytest

from grid_collect.state import State
from grid_collect.utils.terminal import is_active_state, is_terminal_state
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "started, game_over, active, terminal",
    [
        (True, False, True, False),
        (True, True, False, True),
        (False, False, False, False),
        # quit after losing: back on the pre-game screen, not the game-over one
        (False, True, False, False),
    ],
)
def test_lifecycle_predicates(
    started: bool, game_over: bool, active: bool, terminal: bool
) -> None:
    state = make_state(started=started, game_over=game_over)
    assert is_active_state(state) is active
    assert is_terminal_state(state) is terminal


def test_pre_game_is_neither_active_nor_terminal() -> None:
    state = State.pre_game()
    assert not is_active_state(state)
    assert not is_terminal_state(state)

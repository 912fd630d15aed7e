from grid_collect.actions import Action, MOVE_ACTIONS
from grid_collect.components import Position
from grid_collect.levels.generator import new_game
from grid_collect.step import evaluate, step
from tests.test_utils import item_ids, make_state


def test_collect_on_spawn_cell_when_evaluated() -> None:
    # Player at (5,5), single item at (5,5), evaluated without moving.
    state = make_state(player=(5, 5), items=[(5, 5)])
    new_state = evaluate(state)
    assert new_state.score == 1
    assert "item-0" not in item_ids(new_state)
    assert len(new_state.items) == 1
    assert new_state.game_over is False


def test_move_into_obstacle_ends_round() -> None:
    state = make_state(player=(2, 2), obstacles=[(2, 3)], items=[(8, 8)])
    new_state = step(state, Action.DOWN)
    assert new_state.player == Position(2, 3)
    assert new_state.game_over is True
    assert new_state.score == 0


def test_move_into_corner_is_clamped() -> None:
    state = make_state(player=(0, 0), items=[(8, 8)])
    assert step(state, Action.LEFT).player == Position(0, 0)
    assert step(state, Action.UP).player == Position(0, 0)


def test_item_and_obstacle_on_same_cell_both_fire() -> None:
    state = make_state(player=(3, 3), items=[(4, 3), (9, 9)], obstacles=[(4, 3)])
    new_state = step(state, Action.RIGHT)
    assert new_state.score == 1
    assert item_ids(new_state) == ["item-1"]
    assert new_state.game_over is True


def test_collect_then_continue() -> None:
    state = make_state(player=(0, 0), items=[(1, 0), (2, 0)])
    state = step(state, Action.RIGHT)
    state = step(state, Action.RIGHT)
    assert state.score == 2
    assert len(state.items) == 1
    assert state.items[0].id == "item-2"
    assert state.turn == 2


def test_score_increments_once_per_pass_with_stacked_items() -> None:
    state = make_state(player=(1, 0), items=[(0, 0), (0, 0), (0, 0)])
    state = step(state, Action.LEFT)
    assert state.score == 1
    assert len(state.items) == 2
    # Bumping into the edge still counts as a move and re-evaluates the cell.
    state = step(state, Action.LEFT)
    assert state.player == Position(0, 0)
    assert state.score == 2
    assert item_ids(state) == ["item-2"]


def test_game_over_is_terminal() -> None:
    state = make_state(player=(2, 2), obstacles=[(2, 3)], items=[(2, 4)])
    over = step(state, Action.DOWN)
    assert over.game_over is True
    for action in MOVE_ACTIONS:
        after = step(over, action)
        assert after is over
        assert evaluate(after) is over


def test_not_started_ignores_input() -> None:
    state = make_state(player=(1, 1), items=[(1, 2)], started=False)
    assert step(state, Action.DOWN) is state
    assert evaluate(state) is state


def test_spawn_overlap_is_not_evaluated_before_first_move() -> None:
    state = make_state(player=(4, 4), items=[(4, 4)], obstacles=[(4, 4)])
    # Nothing has happened yet: the spawn frame is not evaluated.
    assert state.score == 0 and state.game_over is False
    new_state = step(state, Action.UP)
    assert new_state.player == Position(4, 3)
    assert new_state.score == 0
    assert new_state.game_over is False


def test_items_never_run_out_while_active() -> None:
    state = new_game(seed=11)
    actions = [Action.RIGHT, Action.DOWN, Action.LEFT, Action.UP] * 50
    for action in actions:
        state = step(state, action)
        if state.game_over:
            break
        assert len(state.items) >= 1

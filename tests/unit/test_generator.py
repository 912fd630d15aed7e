# tests/unit/test_generator.py

import pytest

from grid_collect.config import GameConfig
from grid_collect.levels.generator import new_game, new_game_from_config
from grid_collect.types import TokenKind
from grid_collect.utils.grid import is_in_bounds


def test_new_game_defaults() -> None:
    state = new_game(seed=1)
    assert len(state.items) == 5
    assert len(state.obstacles) == 3
    assert state.score == 0
    assert state.game_over is False
    assert state.started is True
    assert state.turn == 0
    assert state.grid_size == 10


def test_new_game_ids_are_sequential() -> None:
    state = new_game(seed=2)
    assert [t.id for t in state.items] == [f"item-{i}" for i in range(5)]
    assert [t.id for t in state.obstacles] == [f"obstacle-{i}" for i in range(3)]
    assert all(t.kind == TokenKind.ITEM for t in state.items)
    assert all(t.kind == TokenKind.OBSTACLE for t in state.obstacles)
    assert state.next_item_index == 5


def test_new_game_positions_in_bounds() -> None:
    for seed in range(50):
        state = new_game(seed=seed)
        assert is_in_bounds(state.player, state.grid_size)
        for token in [*state.items, *state.obstacles]:
            assert is_in_bounds(token.position, state.grid_size)


def test_new_game_is_reproducible_from_seed() -> None:
    assert new_game(seed=42) == new_game(seed=42)


def test_new_game_without_seed_records_one() -> None:
    state = new_game()
    assert state.seed is not None
    assert new_game(seed=state.seed) == state


def test_new_game_custom_counts() -> None:
    state = new_game(grid_size=4, item_count=1, obstacle_count=0, seed=3)
    assert len(state.items) == 1
    assert len(state.obstacles) == 0
    assert state.grid_size == 4


def test_new_game_from_config() -> None:
    config = GameConfig(grid_size=6, item_count=2, obstacle_count=1, seed=9)
    state = new_game_from_config(config)
    assert state == new_game(grid_size=6, item_count=2, obstacle_count=1, seed=9)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"grid_size": 0},
        {"item_count": -1},
        {"obstacle_count": -2},
    ],
)
def test_invalid_config_raises(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        new_game(**kwargs)
    with pytest.raises(ValueError):
        GameConfig(**kwargs)

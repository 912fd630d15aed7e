# tests/unit/test_grid.py

import itertools
from typing import Tuple

import pytest

from grid_collect.components import Position
from grid_collect.moves import DIRECTION_DELTAS
from grid_collect.types import GRID_SIZE, Delta
from grid_collect.utils.grid import (
    clamp,
    first_token_at,
    is_in_bounds,
)
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "start, delta, expected",
    [
        ((5, 5), (0, -1), (5, 4)),
        ((5, 5), (0, 1), (5, 6)),
        ((5, 5), (-1, 0), (4, 5)),
        ((5, 5), (1, 0), (6, 5)),
        # edges clamp
        ((0, 0), (-1, 0), (0, 0)),
        ((0, 0), (0, -1), (0, 0)),
        ((9, 9), (1, 0), (9, 9)),
        ((9, 9), (0, 1), (9, 9)),
        ((0, 9), (0, 1), (0, 9)),
        ((9, 0), (1, 0), (9, 0)),
        # only the blocked axis is held
        ((0, 3), (-1, 0), (0, 3)),
    ],
)
def test_clamp(
    start: Tuple[int, int], delta: Delta, expected: Tuple[int, int]
) -> None:
    assert clamp(Position(*start), delta, GRID_SIZE) == Position(*expected)


def test_clamp_never_leaves_grid() -> None:
    for x, y in itertools.product(range(GRID_SIZE), repeat=2):
        for delta in DIRECTION_DELTAS.values():
            assert is_in_bounds(clamp(Position(x, y), delta, GRID_SIZE), GRID_SIZE)


def test_clamp_large_delta_is_clamped() -> None:
    assert clamp(Position(2, 2), (-5, 20), GRID_SIZE) == Position(0, 9)


def test_clamp_returns_new_position() -> None:
    pos = Position(3, 3)
    moved = clamp(pos, (1, 0), GRID_SIZE)
    assert pos == Position(3, 3)
    assert moved is not pos


@pytest.mark.parametrize(
    "pos, expected",
    [((0, 0), True), ((9, 9), True), ((-1, 0), False), ((0, 10), False)],
)
def test_is_in_bounds(pos: Tuple[int, int], expected: bool) -> None:
    assert is_in_bounds(Position(*pos), GRID_SIZE) is expected


def test_first_token_at_uses_collection_order() -> None:
    state = make_state(items=[(1, 1), (2, 2), (1, 1)])
    first = first_token_at(state.items, Position(1, 1))
    assert first is not None and first.id == "item-0"
    assert first_token_at(state.items, Position(5, 5)) is None

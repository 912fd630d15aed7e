"""Common type aliases, enumerations and constants.

``TokenKind`` tags every placed :class:`grid_collect.components.Token`; the
state keeps items and obstacles in separate collections but the tag is carried
on the token so renderers and observations can treat them uniformly.
"""

from enum import StrEnum, auto
from typing import Tuple


GRID_SIZE = 10
DEFAULT_ITEM_COUNT = 5
DEFAULT_OBSTACLE_COUNT = 3

TokenID = str
Delta = Tuple[int, int]


class TokenKind(StrEnum):
    """Kinds of tokens that can be placed on the grid."""

    ITEM = auto()
    OBSTACLE = auto()

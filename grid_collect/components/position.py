"""Position component.

Immutable integer grid coordinates. Used for the player location and for the
location of every placed :class:`Token`. Moves never mutate a ``Position``;
see :func:`grid_collect.utils.grid.clamp` for producing the next one.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

"""Token component.

A token is anything placed on the grid other than the player: collectible
items and static obstacles. Identity is the ``id``, which is unique within the
collection of its kind for the lifetime of a round.
"""

from dataclasses import dataclass

from grid_collect.components.position import Position
from grid_collect.types import TokenID, TokenKind


@dataclass(frozen=True)
class Token:
    """Placed grid entity.

    Attributes:
        id: Stable identifier such as ``item-3`` or ``obstacle-0``.
        kind: Whether the token is an item or an obstacle.
        position: Cell the token occupies.
    """

    id: TokenID
    kind: TokenKind
    position: Position

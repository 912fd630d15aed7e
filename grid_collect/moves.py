"""Direction deltas for movement actions.

Maps each movement :class:`grid_collect.actions.Action` to a unit vector in
grid coordinates (``y`` grows downward, so ``UP`` is ``(0, -1)``).
"""

from typing import Dict

from grid_collect.actions import Action
from grid_collect.types import Delta


DIRECTION_DELTAS: Dict[Action, Delta] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

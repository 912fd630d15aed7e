"""grid_collect.components
=================================

Aggregate import surface for the immutable value objects the engine works
with. Both are frozen ``@dataclass`` instances carrying no behavior beyond
their fields; systems produce new instances rather than mutating them::

    from grid_collect.components import Position, Token
"""

from .position import Position
from .token import Token

__all__ = [
    "Position",
    "Token",
]

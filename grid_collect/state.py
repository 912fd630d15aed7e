"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents a whole
round at a single point in time. All systems are pure functions that take a
previous ``State`` plus inputs (e.g. an ``Action``) and return a *new*
``State``; no mutation happens in-place.

Design notes:

* Token collections are **persistent vectors** (``pyrsistent.PVector``) so
    iteration order is stable. Collection picks the *first* matching item,
    which is only well defined with an ordered collection.
* ``started`` / ``game_over`` describe the round lifecycle
    (``NotStarted -> Active -> GameOver``). The reducer short-circuits on any
    state that is not active.
* ``next_item_index`` is the monotonically increasing counter used to name
    respawned items; ``seed`` plus ``turn`` make respawn placement
    reproducible.

See :mod:`grid_collect.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from grid_collect.components import Position, Token
from grid_collect.types import GRID_SIZE


@dataclass(frozen=True)
class State:
    """Immutable round state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        grid_size (int): Side length of the square grid in cells.
        player (Position): Current player cell.
        items (PVector[Token]): Collectible tokens, in placement order.
        obstacles (PVector[Token]): Obstacle tokens, in placement order.
        score (int): Number of items collected this round.
        started (bool): False before the first ``start`` and after ``quit``.
        game_over (bool): True once the player touched an obstacle.
        turn (int): Number of processed moves this round.
        next_item_index (int): Index used for the next respawned item id.
        message (str | None): Optional informational / terminal message.
        seed (int | None): Base RNG seed of the round.
    """

    grid_size: int
    player: Position

    # Tokens
    items: PVector[Token] = pvector()
    obstacles: PVector[Token] = pvector()

    # Status
    score: int = 0
    started: bool = False
    game_over: bool = False
    turn: int = 0
    next_item_index: int = 0
    message: Optional[str] = None

    # RNG
    seed: Optional[int] = None

    @classmethod
    def pre_game(cls, grid_size: int = GRID_SIZE) -> "State":
        """Return the state shown before the first round is started."""
        return cls(grid_size=grid_size, player=Position(0, 0))

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Iterates dataclass fields and returns a persistent map including only
        those that are non-empty (for token vectors) or not ``None``. Useful
        for lightweight diagnostics without dumping empty collections.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for all
            populated fields.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            if isinstance(value, type(pvector())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description

"""Token identifiers.

Ids are ``"<kind>-<index>"`` strings. Indices are allocated sequentially per
kind: a new round hands out ``item-0`` … ``item-{n-1}`` and respawns continue
from ``State.next_item_index`` so a removed id is never handed out again in
the same round.

Examples
--------
>>> from grid_collect.entity import token_id, token_ids
>>> from grid_collect.types import TokenKind
>>> token_id(TokenKind.ITEM, 7)
'item-7'
>>> token_ids(TokenKind.OBSTACLE, 2)
['obstacle-0', 'obstacle-1']
"""

from typing import Iterator, List

from grid_collect.types import TokenID, TokenKind


def token_id(kind: TokenKind, index: int) -> TokenID:
    """Return the id of the ``index``-th token of ``kind``."""
    return f"{kind}-{index}"


def token_id_generator(kind: TokenKind, start: int = 0) -> Iterator[TokenID]:
    """Yield an infinite sequence of ids for ``kind`` starting at ``start``."""
    index = start
    while True:
        yield token_id(kind, index)
        index += 1


def token_ids(kind: TokenKind, n: int, start: int = 0) -> List[TokenID]:
    """Return ``n`` sequential ids for ``kind`` as a list."""
    gen = token_id_generator(kind, start)
    return [next(gen) for _ in range(n)]

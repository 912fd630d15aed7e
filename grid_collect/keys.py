"""Keyboard identifier to action mapping.

Eight key identifiers are accepted (four arrow keys and WASD), mapped
many-to-one onto the four movement actions. Anything else maps to ``None`` and
callers treat it as "ignore this input".
"""

from typing import Dict, Optional

from grid_collect.actions import Action


KEY_ACTION_MAP: Dict[str, Action] = {
    "ArrowUp": Action.UP,
    "w": Action.UP,
    "ArrowDown": Action.DOWN,
    "s": Action.DOWN,
    "ArrowLeft": Action.LEFT,
    "a": Action.LEFT,
    "ArrowRight": Action.RIGHT,
    "d": Action.RIGHT,
}


def action_from_key(key: Optional[str]) -> Optional[Action]:
    """Return the movement action for ``key`` or ``None`` if it is not bound.

    Single letters are matched case-insensitively so ``W`` (caps lock / shift)
    behaves like ``w``.
    """
    if not key:
        return None
    if len(key) == 1:
        key = key.lower()
    return KEY_ACTION_MAP.get(key)

"""Gymnasium environment wrapper for Grid Collect.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (player, status, tokens, config). Reward is the delta of
``state.score`` per step. ``terminated`` is ``True`` once the player hits an
obstacle; rounds never end early on their own, so ``truncated`` is always
``False``.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"player": {...}, "status": {...}, "tokens": {...}, "config": {...}}}``

Usage:

``env = GridCollectEnv(grid_size=10, item_count=5, obstacle_count=3, seed=0)``

The environment is purposely *not* vectorized; wrap externally if needed.
"""

from dataclasses import replace
import string
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from grid_collect.actions import Action, GymAction
from grid_collect.components import Token
from grid_collect.config import GameConfig
from grid_collect.control import start
from grid_collect.renderer.image import DEFAULT_RESOLUTION, ImageRenderer
from grid_collect.state import State
from grid_collect.step import step
from grid_collect.utils.terminal import is_terminal_state

ObsType = Dict[str, Any]

# Token ids ("item-3"), phases ("game_over") and messages need more than the
# default alphanumeric Text charset.
TEXT_CHARSET = string.ascii_letters + string.digits + "-_ "


def _serialize_token(token: Token) -> Dict[str, Any]:
    return {
        "id": token.id,
        "kind": str(token.kind),
        "x": int(token.position.x),
        "y": int(token.position.y),
    }


def player_observation_dict(state: State) -> Dict[str, Any]:
    """Player portion of observation (current cell)."""
    return {"x": int(state.player.x), "y": int(state.player.y)}


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (score, phase, turn, message)."""
    phase = "ongoing"
    if not state.started:
        phase = "not_started"
    elif is_terminal_state(state):
        phase = "game_over"
    return {
        "score": int(state.score),
        "phase": phase,
        "turn": int(state.turn),
        "message": state.message or "",
    }


def tokens_observation_dict(state: State) -> Dict[str, Tuple[Dict[str, Any], ...]]:
    """Token portion of observation (items and obstacles in order).

    Tuples, not lists: ``spaces.Sequence.contains`` only accepts tuples.
    """
    return {
        "items": tuple(_serialize_token(t) for t in state.items),
        "obstacles": tuple(_serialize_token(t) for t in state.obstacles),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (seed, grid size)."""
    return {
        "seed": state.seed if state.seed is not None else -1,
        "grid_size": int(state.grid_size),
    }


class GridCollectEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Grid Collect.

    Parameters mirror :class:`grid_collect.config.GameConfig` plus rendering
    knobs. The action space is ``Discrete(len(Action))``; see
    :mod:`grid_collect.actions`.
    """

    metadata = {"render_modes": ["human", "image"]}

    def __init__(
        self,
        render_mode: str = "image",
        render_resolution: int = DEFAULT_RESOLUTION,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "image" to return PIL image frames, "human" to open window.
            render_resolution: Side (pixels) of the rendered image.
            **kwargs: Forwarded to :class:`GameConfig` (grid_size, item_count,
                obstacle_count, seed).
        """
        from gymnasium import spaces

        self.config = GameConfig(**kwargs)
        self.state: Optional[State] = None

        self._render_mode = render_mode
        self._renderer = ImageRenderer(resolution=render_resolution)
        grid_size = self.config.grid_size
        side = max(render_resolution // grid_size, 1) * grid_size

        text_space_short = spaces.Text(max_length=32, charset=TEXT_CHARSET)
        text_space_message = spaces.Text(
            max_length=64, min_length=0, charset=TEXT_CHARSET
        )

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        token_space = spaces.Dict(
            {
                "id": text_space_short,
                "kind": text_space_short,
                "x": int_box(0, grid_size - 1),
                "y": int_box(0, grid_size - 1),
            }
        )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0, high=255, shape=(side, side, 4), dtype=np.uint8
                ),
                "info": spaces.Dict(
                    {
                        "player": spaces.Dict(
                            {
                                "x": int_box(0, grid_size - 1),
                                "y": int_box(0, grid_size - 1),
                            }
                        ),
                        "status": spaces.Dict(
                            {
                                "score": int_box(0, 1_000_000_000),
                                "phase": text_space_short,
                                "turn": int_box(0, 1_000_000_000),
                                "message": text_space_message,
                            }
                        ),
                        "tokens": spaces.Dict(
                            {
                                "items": spaces.Sequence(token_space),
                                "obstacles": spaces.Sequence(token_space),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "seed": int_box(-1, 2**31),
                                "grid_size": int_box(1, 10_000),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(Action))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new round.

        Arguments:
            seed: Overrides the configured round seed for this and later resets.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        if seed is not None:
            self.config = replace(self.config, seed=seed)
        self.state = start(self.config)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``Action`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        # Raises ValueError for indices outside the stable mapping.
        gym_action = GymAction(int(action))
        step_action: Action = Action[gym_action.name]

        prev_score = self.state.score
        self.state = step(self.state, step_action)
        reward = float(self.state.score - prev_score)
        obs = self._get_obs()
        terminated = self.state.game_over
        return obs, reward, terminated, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "image" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "image":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "player": player_observation_dict(self.state),
            "status": env_status_observation_dict(self.state),
            "tokens": tokens_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        img = self._renderer.render(self.state)
        return {"image": np.array(img, dtype=np.uint8), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        return {}

    def close(self) -> None:
        pass

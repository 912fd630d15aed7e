import logging
from collections import Counter
from dataclasses import replace
from typing import List, Optional

import streamlit as st
from pyrsistent import thaw
from st_keyup import st_keyup  # type: ignore

from grid_collect.actions import Action
from grid_collect.config import GameConfig
from grid_collect.control import press_key, quit_round, start
from grid_collect.renderer.image import ImageRenderer
from grid_collect.state import State
from grid_collect.step import step
from grid_collect.types import DEFAULT_ITEM_COUNT, DEFAULT_OBSTACLE_COUNT, GRID_SIZE
from grid_collect.utils.terminal import is_active_state, is_terminal_state

logging.basicConfig(level=logging.INFO)

st.set_page_config(layout="centered", page_title="Grid Collect")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = GameConfig()
        st.session_state["seed_counter"] = 0
    if "state" not in st.session_state:
        st.session_state["state"] = State.pre_game(st.session_state["config"].grid_size)


def get_config_from_widgets() -> GameConfig:
    config: GameConfig = st.session_state["config"]

    grid_size: int = st.slider("Grid size", 3, 20, config.grid_size, key="grid_size")
    item_count: int = st.slider("Items", 1, 10, config.item_count, key="item_count")
    obstacle_count: int = st.slider(
        "Obstacles", 0, 10, config.obstacle_count, key="obstacle_count"
    )
    seed_text: str = st.text_input(
        "Seed (blank for random)",
        "" if config.seed is None else str(config.seed),
        key="seed",
    )
    seed: Optional[int] = int(seed_text) if seed_text.strip().isdigit() else None

    if st.button("Reset to defaults", key="defaults_btn", use_container_width=True):
        return GameConfig(
            grid_size=GRID_SIZE,
            item_count=DEFAULT_ITEM_COUNT,
            obstacle_count=DEFAULT_OBSTACLE_COUNT,
        )
    return GameConfig(
        grid_size=grid_size,
        item_count=item_count,
        obstacle_count=obstacle_count,
        seed=seed,
    )


def start_round() -> None:
    config: GameConfig = st.session_state["config"]
    if config.seed is not None:
        st.session_state["seed_counter"] += 1
        config = replace(config, seed=config.seed + st.session_state["seed_counter"])
    st.session_state["state"] = start(config)
    st.session_state["key_input_prev"] = ""


def get_keyboard_key() -> Optional[str]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="key_input",
            placeholder="Type: WASD to move",
        )
        or ""
    )
    prev_value: str = st.session_state.get("key_input_prev", "")
    st.session_state["key_input_prev"] = value
    if value != prev_value:
        new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
        if not new_values:
            return None
        return new_values[-1]
    return None


def do_action(action: Action) -> None:
    st.session_state["state"] = step(st.session_state["state"], action)


# --------- Main App ---------

set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    st.session_state["config"] = get_config_from_widgets()

with tab_game:
    st.title("Grid Collect")
    state: State = st.session_state["state"]

    if not state.started:
        st.write("Use arrow buttons or WASD to move. Collect stars and avoid X marks.")
        if st.button("Play Game", key="play_btn", use_container_width=True):
            start_round()
            st.rerun()
    elif is_terminal_state(state):
        st.error(f"**{state.message or 'Game over'}!**")
        st.info(f"**Your score:** {state.score}", icon="🏅")
        if st.button("Play Again", key="again_btn", use_container_width=True):
            start_round()
            st.rerun()
    else:
        key = get_keyboard_key()
        if key is not None:
            st.session_state["state"] = press_key(state, key)

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn", use_container_width=True):
                do_action(Action.UP)
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn", use_container_width=True):
                do_action(Action.LEFT)
        with down_btn:
            if st.button("⬇️", key="down_btn", use_container_width=True):
                do_action(Action.DOWN)
        with right_btn:
            if st.button("➡️", key="right_btn", use_container_width=True):
                do_action(Action.RIGHT)

        state = st.session_state["state"]
        score_col, quit_col = st.columns([3, 1])
        with score_col:
            st.info(f"**Score:** {state.score}", icon="⭐")
        with quit_col:
            if st.button("Quit", key="quit_btn", use_container_width=True):
                st.session_state["state"] = quit_round(state)
                st.rerun()

        if not is_active_state(state):
            st.rerun()

        img = ImageRenderer().render(state)
        st.image(img, use_container_width=True)
        st.caption("Blue: player · Star: collect (+1) · X: avoid (game over)")

with tab_state:
    st.json(thaw(st.session_state["state"].description), expanded=1)

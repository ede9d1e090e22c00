import time
from collections import Counter
from typing import Dict, List, Optional

import streamlit as st
from st_keyup import st_keyup  # type: ignore

from glyph_rogue.deferred import AssetStatus
from glyph_rogue.errors import GameInitError, TilesetLoadError
from glyph_rogue.game import Game
from glyph_rogue.input import InputSnapshot, Key
from glyph_rogue.renderer.surface import ImageSurface
from glyph_rogue.utils.logging import setup_logging

KEY_MAP: Dict[str, Key] = {
    "w": Key.UP,
    "s": Key.DOWN,
    "a": Key.LEFT,
    "d": Key.RIGHT,
    "q": Key.EXIT,
}

# Delay between automatic reruns while fonts load in the background.
LOADING_RERUN_SECONDS = 0.25

st.set_page_config(layout="wide", page_title="Glyph Rogue")


def get_game() -> Optional[Game]:
    if "game" not in st.session_state:
        setup_logging("INFO")
        try:
            st.session_state["game"] = Game.from_env()
        except GameInitError as e:
            st.error(f"Game creation failed: {e}")
            return None
        st.session_state["tint_cache"] = {}
    return st.session_state["game"]


def get_keyboard_input() -> InputSnapshot:
    """Each newly typed character is one key press; nothing is ever held."""
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="key_input",
            placeholder="Type: WASD to move, q to quit",
        )
        or ""
    )
    prev_value: str = st.session_state.get("key_input_prev", "")
    st.session_state["key_input_prev"] = value
    if value == prev_value:
        return InputSnapshot()
    new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
    keys = [KEY_MAP[c] for c in new_values if c in KEY_MAP]
    return InputSnapshot.press(*keys)


# --------- Main App ---------
game = get_game()
if game is None:
    st.stop()

left_col, middle_col, right_col = st.columns([0.2, 0.6, 0.2])

with right_col:
    snapshot = get_keyboard_input()
    if st.button("🔁 Redraw", key="redraw_btn", use_container_width=True):
        snapshot = InputSnapshot()
    if st.button("🆕 New Game", key="new_game_btn", use_container_width=True):
        del st.session_state["game"]
        st.rerun()

game.update(snapshot)

with left_col:
    player = game.world.player
    st.info(f"**Health Point:** {player.hp} / {player.max_hp}", icon="❤️")
    st.info(f"**Position:** {player.pos.x:g}, {player.pos.y:g}", icon="🚶")
    status = game.tileset.poll()
    if status is AssetStatus.PENDING:
        st.warning("Loading tileset…", icon="⏳")

with middle_col:
    if game.shutdown_requested:
        st.info("Game closed. Start a new game to play again.")
        st.stop()
    surface = ImageSurface(game.config.screen_size, cache=st.session_state["tint_cache"])
    try:
        game.draw(surface)
    except TilesetLoadError as e:
        st.error(f"💀 {e}")
        st.stop()
    st.image(surface.image, use_container_width=True)

if game.is_loading():
    time.sleep(LOADING_RERUN_SECONDS)
    st.rerun()

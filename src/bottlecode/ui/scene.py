from __future__ import annotations

from esper import World

from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.palette import Palette
from bottlecode.ui.hit_test import Element, build_scene
from bottlecode.ui.layout import compute_board_layout
from bottlecode.utils.game_state import session_component


def build_world_scene(world: World, window_width: float, window_height: float) -> Element:
    """Element tree for what is currently on screen; rebuilt per input sample."""
    palette = session_component(world, Palette)
    board = session_component(world, GuessBoard)
    layout = compute_board_layout(window_width, window_height, palette.colors, len(board))
    return build_scene(window_width, window_height, layout, palette.colors, board.slots)

from __future__ import annotations

from esper import World

from bottlecode.components.answer import Answer
from bottlecode.components.drag_session import DragSession, DragSource
from bottlecode.components.game_state import SessionStatus
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.palette import Difficulty, Palette
from bottlecode.constants import MAX_COLORS, MIN_COLORS
from bottlecode.utils.game_state import get_status, session_component


def check_invariants(world: World) -> None:
    """Assert the session is consistent; a failure means a handler is broken."""
    palette = session_component(world, Palette)
    difficulty = session_component(world, Difficulty)
    board = session_component(world, GuessBoard)
    answer = session_component(world, Answer)
    drag = session_component(world, DragSession)

    assert MIN_COLORS <= len(palette) <= MAX_COLORS, f"palette size {len(palette)} out of bounds"
    assert MIN_COLORS <= difficulty.num_slots <= MAX_COLORS, f"num_slots {difficulty.num_slots} out of bounds"
    assert len(board) == difficulty.num_slots, f"board has {len(board)} slots, expected {difficulty.num_slots}"
    if get_status(world) is SessionStatus.NOT_STARTED:
        assert difficulty.num_slots == len(palette), "difficulty drifted from palette before start"
        assert len(answer) == 0, "answer present before start"
    else:
        assert len(answer) == difficulty.num_slots, f"answer has {len(answer)} colors, expected {difficulty.num_slots}"
        assert len(set(answer.colors)) == len(answer), "answer repeats a color"
        assert all(color in palette for color in answer.colors), "answer uses a color outside the palette"
    if drag.source is DragSource.SLOT:
        assert drag.index is not None and 0 <= drag.index < len(board), "drag source slot out of range"

from __future__ import annotations

import random
from typing import Optional, Sequence

from esper import World

from bottlecode.components.answer import Answer
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.palette import Palette
from bottlecode.session import GameSession
from bottlecode.ui.layout import compute_board_layout
from bottlecode.utils.game_state import session_component


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height


def new_session(seed: int = 0, **kwargs) -> GameSession:
    return GameSession(rng=random.Random(seed), **kwargs)


def set_answer(world: World, colors: Sequence[str]) -> None:
    """Replace the generated answer with a known one."""
    for entity, _ in world.get_component(Answer):
        world.remove_component(entity, Answer)
        world.add_component(entity, Answer(colors=tuple(colors)))
        return
    raise AssertionError("Expected an Answer component")


def fill_board(world: World, colors: Sequence[Optional[str]]) -> None:
    board = session_component(world, GuessBoard)
    assert len(colors) == len(board)
    board.slots[:] = list(colors)


def slot_center(world: World, window: DummyWindow, index: int) -> tuple[float, float]:
    palette = session_component(world, Palette)
    board = session_component(world, GuessBoard)
    layout = compute_board_layout(window.width, window.height, palette.colors, len(board))
    return layout.slots[index].center


def pool_center(world: World, window: DummyWindow, color: str) -> tuple[float, float]:
    palette = session_component(world, Palette)
    board = session_component(world, GuessBoard)
    layout = compute_board_layout(window.width, window.height, palette.colors, len(board))
    return layout.pool[palette.colors.index(color)].center

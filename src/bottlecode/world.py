import random

from esper import World

from bottlecode.components.answer import Answer
from bottlecode.components.drag_session import DragSession
from bottlecode.components.game_state import GameState, SessionStatus, ViewFlags
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.history import History
from bottlecode.components.palette import Difficulty, Palette
from bottlecode.components.touch_tracking import TouchTracking
from bottlecode.constants import DEFAULT_NUM_COLORS
from bottlecode.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    *,
    num_colors: int = DEFAULT_NUM_COLORS,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding one session entity in the NOT_STARTED state."""
    world = World()
    setattr(world, "random", rng or random.Random())

    palette = Palette.of_size(num_colors)
    world.create_entity(
        GameState(status=SessionStatus.NOT_STARTED),
        ViewFlags(),
        palette,
        Difficulty(num_slots=len(palette)),
        Answer(),
        GuessBoard.empty(len(palette)),
        History(),
        DragSession(),
        TouchTracking(),
    )
    return world

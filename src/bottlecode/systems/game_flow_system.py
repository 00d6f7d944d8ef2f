"""Round lifecycle: start (or play again) and back-to-start."""
from __future__ import annotations

import logging
import random

from esper import World

from bottlecode.components.answer import Answer
from bottlecode.components.drag_session import DragSession
from bottlecode.components.game_state import SessionStatus, ViewFlags
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.history import History
from bottlecode.components.palette import Difficulty, Palette
from bottlecode.components.touch_tracking import TouchTracking
from bottlecode.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_ROUND_RESET,
    EVENT_ROUND_START,
    EVENT_ROUND_STARTED,
    EVENT_VIEW_FLAGS_CHANGED,
    EventBus,
)
from bottlecode.utils.answer import generate_answer
from bottlecode.utils.game_state import session_component, set_status
from bottlecode.utils.invariants import check_invariants

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Moves the session between NOT_STARTED, IN_PROGRESS and WON."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.SystemRandom()
        self.event_bus.subscribe(EVENT_ROUND_START, self._on_round_start)
        self.event_bus.subscribe(EVENT_ROUND_RESET, self._on_round_reset)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_round_start(self, sender, **payload) -> None:
        palette = session_component(self.world, Palette)
        difficulty = session_component(self.world, Difficulty)
        difficulty.num_slots = len(palette)
        answer = generate_answer(palette.colors, difficulty.num_slots, self._rng)
        self._replace_answer(Answer(colors=answer))
        self._clear_round_state(difficulty.num_slots)
        set_status(self.world, self.event_bus, SessionStatus.IN_PROGRESS)
        check_invariants(self.world)
        logger.info("round started with %d slots", difficulty.num_slots)
        self.event_bus.emit(EVENT_ROUND_STARTED, num_slots=difficulty.num_slots)

    def _on_round_reset(self, sender, **payload) -> None:
        palette = session_component(self.world, Palette)
        session_component(self.world, Difficulty).num_slots = len(palette)
        self._replace_answer(Answer())
        self._clear_round_state(len(palette))
        set_status(self.world, self.event_bus, SessionStatus.NOT_STARTED)
        check_invariants(self.world)
        logger.info("session reset")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _replace_answer(self, answer: Answer) -> None:
        # Answer is frozen; swap the component rather than mutating it.
        for entity, _ in self.world.get_component(Answer):
            self.world.remove_component(entity, Answer)
            self.world.add_component(entity, answer)
            return
        raise RuntimeError("Answer component not found")

    def _clear_round_state(self, num_slots: int) -> None:
        board = session_component(self.world, GuessBoard)
        board.reset(num_slots)
        session_component(self.world, History).clear()
        session_component(self.world, DragSession).reset()
        session_component(self.world, TouchTracking).end()
        flags = session_component(self.world, ViewFlags)
        if flags.show_answer:
            flags.show_answer = False
            self.event_bus.emit(
                EVENT_VIEW_FLAGS_CHANGED,
                show_answer=flags.show_answer,
                show_history=flags.show_history,
            )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='reset', positions=list(range(num_slots)), slots=board.snapshot())

from __future__ import annotations

import logging

from esper import World

from bottlecode.components.answer import Answer
from bottlecode.components.drag_session import DragSession
from bottlecode.components.game_state import SessionStatus
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.history import History
from bottlecode.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_GUESS_GRADED,
    EVENT_GUESS_SUBMIT,
    EVENT_ROUND_WON,
    EventBus,
)
from bottlecode.utils.game_state import get_status, session_component, set_status
from bottlecode.utils.grading import grade, is_solved
from bottlecode.utils.invariants import check_invariants

logger = logging.getLogger(__name__)


class GradingSystem:
    """Grades submitted guesses and records them in the history ledger.

    A wrong guess leaves the board untouched so the player can adjust it in
    place. A full match wins the round and clears the board for the next one.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GUESS_SUBMIT, self.on_submit)

    def on_submit(self, sender, **kwargs):
        if get_status(self.world) is not SessionStatus.IN_PROGRESS:
            logger.debug("submit ignored while %s", get_status(self.world).name)
            return
        board = session_component(self.world, GuessBoard)
        if not board.is_full():
            logger.debug("submit ignored: %d slot(s) still empty", board.remaining())
            return
        answer = session_component(self.world, Answer)
        history = session_component(self.world, History)

        guess = board.snapshot()
        correct_count = grade(guess, answer.colors)
        history.record(guess, correct_count)
        self.event_bus.emit(
            EVENT_GUESS_GRADED,
            guess=guess,
            correct_count=correct_count,
            attempt=history.attempts,
        )
        if not is_solved(correct_count, len(answer)):
            return

        logger.info("round won after %d attempt(s)", history.attempts)
        board.reset()
        session_component(self.world, DragSession).reset()
        set_status(self.world, self.event_bus, SessionStatus.WON)
        check_invariants(self.world)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='won', positions=list(range(len(board))), slots=board.snapshot())
        self.event_bus.emit(EVENT_ROUND_WON, attempts=history.attempts)

from __future__ import annotations

import logging

from esper import World

from bottlecode.components.game_state import SessionStatus
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.palette import Palette
from bottlecode.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_SLOT_CLEAR_REQUEST,
    EVENT_SLOT_PLACE_REQUEST,
    EVENT_SLOT_SWAP_REQUEST,
    EventBus,
)
from bottlecode.utils.game_state import get_status, session_component
from bottlecode.utils.invariants import check_invariants

logger = logging.getLogger(__name__)


class BoardSystem:
    """Applies place/swap/clear requests to the guess board of a running round."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SLOT_PLACE_REQUEST, self.on_place)
        self.event_bus.subscribe(EVENT_SLOT_SWAP_REQUEST, self.on_swap)
        self.event_bus.subscribe(EVENT_SLOT_CLEAR_REQUEST, self.on_clear)

    @property
    def board(self) -> GuessBoard:
        return session_component(self.world, GuessBoard)

    def on_place(self, sender, **kwargs):
        index = self._slot_index(kwargs.get('index'))
        color = kwargs.get('color')
        if index is None or color is None or not self._editable():
            return
        if color not in session_component(self.world, Palette):
            logger.debug("place ignored: %r is not in the palette", color)
            return
        # A pool color always wins, whatever the slot held.
        self.board.place(index, color)
        self._changed('place', [index])

    def on_swap(self, sender, **kwargs):
        src = self._slot_index(kwargs.get('src'))
        dst = self._slot_index(kwargs.get('dst'))
        if src is None or dst is None or not self._editable():
            return
        if src == dst:
            return
        self.board.swap(src, dst)
        self._changed('swap', [src, dst])

    def on_clear(self, sender, **kwargs):
        index = self._slot_index(kwargs.get('index'))
        if index is None or not self._editable():
            return
        if self.board.is_empty_at(index):
            return
        self.board.clear(index)
        self._changed('clear', [index])

    def _slot_index(self, value) -> int | None:
        if value is None:
            return None
        try:
            index = int(value)
        except (TypeError, ValueError):
            return None
        if not 0 <= index < len(self.board):
            logger.debug("slot index %s outside board of %d", index, len(self.board))
            return None
        return index

    def _editable(self) -> bool:
        return get_status(self.world) is SessionStatus.IN_PROGRESS

    def _changed(self, reason: str, positions: list[int]) -> None:
        check_invariants(self.world)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=reason, positions=positions, slots=self.board.snapshot())

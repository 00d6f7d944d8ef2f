from __future__ import annotations

import logging

from esper import World

from bottlecode.components.drag_session import DragSession, DragSource, DragState
from bottlecode.components.game_state import SessionStatus
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.palette import Palette
from bottlecode.events.bus import (
    EVENT_DRAG_CANCEL,
    EVENT_DRAG_CANCELLED,
    EVENT_DRAG_REJECTED,
    EVENT_DRAG_START,
    EVENT_DRAG_STARTED,
    EVENT_DROP,
    EVENT_SLOT_PLACE_REQUEST,
    EVENT_SLOT_SWAP_REQUEST,
    EventBus,
)
from bottlecode.utils.game_state import get_status, session_component
from bottlecode.utils.invariants import check_invariants

logger = logging.getLogger(__name__)

SOURCE_POOL = "pool"
SOURCE_SLOT = "slot"


class DragSystem:
    """Input reconciler: turns drag start/drop/cancel into board requests.

    Every input backend (pointer, touch, sortable list) funnels into the same
    three events, so drop policy lives here only:
    - pool -> slot places (overwrites)
    - slot -> slot swaps (a move when the target is empty)
    The session always returns to idle after a drop or cancel.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_DRAG_START, self.on_drag_start)
        self.event_bus.subscribe(EVENT_DROP, self.on_drop)
        self.event_bus.subscribe(EVENT_DRAG_CANCEL, self.on_cancel)

    @property
    def session(self) -> DragSession:
        return session_component(self.world, DragSession)

    @property
    def state(self) -> DragState:
        return self.session.state

    def on_drag_start(self, sender, **kwargs):
        source = kwargs.get('source')
        if get_status(self.world) is not SessionStatus.IN_PROGRESS:
            self._reject(source, 'not_in_progress')
            return
        if self.session.active:
            # One drag at a time: resolve the old one before starting another.
            self._cancel('superseded')
        if source == SOURCE_POOL:
            color = kwargs.get('color')
            if color is None or color not in session_component(self.world, Palette):
                self._reject(source, 'unknown_color')
                return
            self.session.begin_pool(color)
            self.event_bus.emit(EVENT_DRAG_STARTED, source=source, color=color, index=None)
        elif source == SOURCE_SLOT:
            index = self._slot_index(kwargs.get('index'))
            if index is None:
                self._reject(source, 'invalid_slot')
                return
            board = session_component(self.world, GuessBoard)
            if board.is_empty_at(index):
                self._reject(source, 'empty_slot')
                return
            self.session.begin_slot(index)
            self.event_bus.emit(EVENT_DRAG_STARTED, source=source, color=board[index], index=index)
        else:
            self._reject(source, 'unknown_source')

    def on_drop(self, sender, **kwargs):
        session = self.session
        source, color, origin = session.source, session.color, session.index
        session.reset()
        target = self._slot_index(kwargs.get('target'))
        if source is DragSource.NONE:
            logger.debug("drop on %s ignored: no active drag", kwargs.get('target'))
            return
        if target is None:
            self.event_bus.emit(EVENT_DRAG_CANCELLED, reason='invalid_target')
            return
        if source is DragSource.POOL:
            self.event_bus.emit(EVENT_SLOT_PLACE_REQUEST, index=target, color=color)
        elif source is DragSource.SLOT:
            self.event_bus.emit(EVENT_SLOT_SWAP_REQUEST, src=origin, dst=target)
        check_invariants(self.world)

    def on_cancel(self, sender, **kwargs):
        if not self.session.active:
            return
        self._cancel(kwargs.get('reason') or 'cancelled')

    def _cancel(self, reason: str) -> None:
        self.session.reset()
        self.event_bus.emit(EVENT_DRAG_CANCELLED, reason=reason)

    def _reject(self, source, reason: str) -> None:
        logger.debug("drag start from %s rejected: %s", source, reason)
        self.event_bus.emit(EVENT_DRAG_REJECTED, source=source, reason=reason)

    def _slot_index(self, value) -> int | None:
        if value is None:
            return None
        try:
            index = int(value)
        except (TypeError, ValueError):
            return None
        if not 0 <= index < len(session_component(self.world, GuessBoard)):
            return None
        return index

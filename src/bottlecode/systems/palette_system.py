from __future__ import annotations

import logging

from esper import World

from bottlecode.components.game_state import SessionStatus
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.palette import Difficulty, Palette
from bottlecode.events.bus import (
    EVENT_DIFFICULTY_GROW,
    EVENT_DIFFICULTY_REJECTED,
    EVENT_DIFFICULTY_SHRINK,
    EVENT_PALETTE_CHANGED,
    EventBus,
)
from bottlecode.utils.game_state import get_status, session_component
from bottlecode.utils.invariants import check_invariants

logger = logging.getLogger(__name__)


class PaletteSystem:
    """Grows and shrinks the palette; difficulty and board follow its size.

    Resizing is only allowed before a round starts. Requests arriving in any
    other status are ignored and announced with EVENT_DIFFICULTY_REJECTED.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_DIFFICULTY_GROW, self.on_grow)
        self.event_bus.subscribe(EVENT_DIFFICULTY_SHRINK, self.on_shrink)

    def on_grow(self, sender, **kwargs):
        if not self._resizable("grow"):
            return
        palette = session_component(self.world, Palette)
        added = palette.grow()
        if added is None:
            logger.debug("grow ignored: palette already holds %d colors", len(palette))
            return
        self._sync_size(len(palette))

    def on_shrink(self, sender, **kwargs):
        if not self._resizable("shrink"):
            return
        palette = session_component(self.world, Palette)
        removed = palette.shrink()
        if removed is None:
            logger.debug("shrink ignored: palette already at %d colors", len(palette))
            return
        self._sync_size(len(palette))

    def _resizable(self, action: str) -> bool:
        status = get_status(self.world)
        if status is SessionStatus.NOT_STARTED:
            return True
        logger.debug("%s rejected while %s", action, status.name)
        self.event_bus.emit(EVENT_DIFFICULTY_REJECTED, action=action, reason=status.name.lower())
        return False

    def _sync_size(self, size: int) -> None:
        session_component(self.world, Difficulty).num_slots = size
        session_component(self.world, GuessBoard).resize(size)
        check_invariants(self.world)
        palette = session_component(self.world, Palette)
        self.event_bus.emit(EVENT_PALETTE_CHANGED, palette=palette.as_tuple(), num_slots=size)

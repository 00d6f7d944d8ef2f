from __future__ import annotations

import logging

from esper import World

from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.palette import Palette
from bottlecode.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_DRAG_START,
    EVENT_DROP,
    EVENT_PALETTE_CHANGED,
    EVENT_SORTABLE_ADD,
    EVENT_SORTABLE_UPDATE,
    EventBus,
)
from bottlecode.systems.drag_system import SOURCE_POOL, SOURCE_SLOT
from bottlecode.ui.sortable import ListNode, SortableList
from bottlecode.utils.game_state import session_component

logger = logging.getLogger(__name__)


class SortableBridgeSystem:
    """Adapts sortable-list move notifications to drag start/drop events.

    The library is only a gesture recognizer here. Its move notifications
    are the single trigger for board changes, and the node it relocated is
    discarded before the change is applied so the re-render from the board
    cannot show duplicate or phantom bottles.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        pool_view: SortableList | None = None,
        slot_view: SortableList | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.pool_view = pool_view if pool_view is not None else SortableList()
        self.slot_view = slot_view if slot_view is not None else SortableList()
        self.event_bus.subscribe(EVENT_SORTABLE_ADD, self.on_add)
        self.event_bus.subscribe(EVENT_SORTABLE_UPDATE, self.on_update)
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_state_changed)
        self.event_bus.subscribe(EVENT_PALETTE_CHANGED, self.on_state_changed)
        self.rerender()

    def on_add(self, sender, **kwargs):
        """A pool bottle was dropped into the slot list at ``new_index``."""
        item = kwargs.get('item')
        new_index = kwargs.get('new_index')
        if not isinstance(item, ListNode) or new_index is None:
            return
        self._discard(item)
        color = item.color
        target = self._clamp(new_index)
        if color is not None and target is not None:
            self.event_bus.emit(EVENT_DRAG_START, source=SOURCE_POOL, color=color)
            self.event_bus.emit(EVENT_DROP, target=target)
        self.rerender()

    def on_update(self, sender, **kwargs):
        """A slot bottle was reordered from ``old_index`` to ``new_index``."""
        item = kwargs.get('item')
        old_index = kwargs.get('old_index')
        new_index = kwargs.get('new_index')
        if not isinstance(item, ListNode) or old_index is None or new_index is None:
            return
        self._discard(item)
        source = self._clamp(old_index)
        target = self._clamp(new_index)
        if source is not None and target is not None:
            self.event_bus.emit(EVENT_DRAG_START, source=SOURCE_SLOT, index=source)
            self.event_bus.emit(EVENT_DROP, target=target)
        self.rerender()

    def on_state_changed(self, sender, **kwargs):
        self.rerender()

    def rerender(self) -> None:
        self.pool_view.render(session_component(self.world, Palette).colors)
        self.slot_view.render(session_component(self.world, GuessBoard).slots)

    def _discard(self, item: ListNode) -> None:
        # The library may have moved the node out of the pool (pull: move) or
        # inserted a clone into the slots; drop it wherever it landed.
        if not (self.slot_view.discard(item) or self.pool_view.discard(item)):
            logger.debug("sortable node %s was not in any view", item.key)

    def _clamp(self, value) -> int | None:
        try:
            index = int(value)
        except (TypeError, ValueError):
            return None
        size = len(session_component(self.world, GuessBoard))
        if size == 0 or index < 0:
            return None
        return min(index, size - 1)

from __future__ import annotations

from time import monotonic
from typing import Callable, Optional, Tuple

from esper import World

from bottlecode.components.drag_session import DragSession, DragSource
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.touch_tracking import TouchTracking
from bottlecode.constants import DOUBLE_TAP_INTERVAL
from bottlecode.events.bus import (
    EVENT_DRAG_CANCEL,
    EVENT_DRAG_START,
    EVENT_DROP,
    EVENT_HOVER_CHANGED,
    EVENT_SLOT_CLEAR_REQUEST,
    EVENT_TOUCH_END,
    EVENT_TOUCH_MOVE,
    EVENT_TOUCH_START,
    EventBus,
)
from bottlecode.systems.drag_system import SOURCE_POOL, SOURCE_SLOT
from bottlecode.ui.hit_test import resolve_pool_color, resolve_slot
from bottlecode.ui.scene import build_world_scene
from bottlecode.utils.game_state import session_component
from bottlecode.utils.input_payload import payload_point


class TouchInputSystem:
    """Synthetic drag tracking for touch screens, which have no native drag events.

    Every move sample is hit-tested to drive the hover highlight; the board
    changes only at touch end, against the last resolved slot. A double tap
    on a filled slot empties it.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        window,
        *,
        double_tap_interval: float = DOUBLE_TAP_INTERVAL,
        clock: Callable[[], float] | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.double_tap_interval = double_tap_interval
        self._clock = clock or monotonic
        self._last_tap: Optional[Tuple[int, float]] = None
        self.event_bus.subscribe(EVENT_TOUCH_START, self.on_touch_start)
        self.event_bus.subscribe(EVENT_TOUCH_MOVE, self.on_touch_move)
        self.event_bus.subscribe(EVENT_TOUCH_END, self.on_touch_end)

    @property
    def tracking(self) -> TouchTracking:
        return session_component(self.world, TouchTracking)

    def on_touch_start(self, sender, **kwargs):
        point = payload_point(kwargs)
        if point is None:
            return
        if self.tracking.active:
            self._finish()
            self.event_bus.emit(EVENT_DRAG_CANCEL, reason='superseded')
        scene = self._scene()
        color = resolve_pool_color(scene, *point)
        if color is not None:
            self.event_bus.emit(EVENT_DRAG_START, source=SOURCE_POOL, color=color)
        else:
            index = resolve_slot(scene, *point)
            if index is None or session_component(self.world, GuessBoard).is_empty_at(index):
                return
            self.event_bus.emit(EVENT_DRAG_START, source=SOURCE_SLOT, index=index)
        if session_component(self.world, DragSession).active:
            self.tracking.begin()

    def on_touch_move(self, sender, **kwargs):
        point = payload_point(kwargs)
        if point is None or not self.tracking.active:
            return
        self._hover(resolve_slot(self._scene(), *point))

    def on_touch_end(self, sender, **kwargs):
        if not self.tracking.active:
            return
        point = payload_point(kwargs)
        if point is not None:
            self._hover(resolve_slot(self._scene(), *point))
        target = self.tracking.hover_slot
        drag = session_component(self.world, DragSession)
        source_slot = drag.index if drag.source is DragSource.SLOT else None
        self._finish()
        if target is None:
            self.event_bus.emit(EVENT_DRAG_CANCEL, reason='touch_released_off_board')
            return
        if source_slot is not None and source_slot == target and self._double_tap(target):
            self.event_bus.emit(EVENT_DRAG_CANCEL, reason='double_tap')
            self.event_bus.emit(EVENT_SLOT_CLEAR_REQUEST, index=target)
            return
        self.event_bus.emit(EVENT_DROP, target=target)

    def _hover(self, slot: Optional[int]) -> None:
        tracking = self.tracking
        if slot == tracking.hover_slot:
            return
        tracking.hover_slot = slot
        self.event_bus.emit(EVENT_HOVER_CHANGED, slot=slot)

    def _finish(self) -> None:
        had_hover = self.tracking.hover_slot is not None
        self.tracking.end()
        if had_hover:
            self.event_bus.emit(EVENT_HOVER_CHANGED, slot=None)

    def _double_tap(self, index: int) -> bool:
        now = self._clock()
        last = self._last_tap
        if last is not None and last[0] == index and (now - last[1]) <= self.double_tap_interval:
            self._last_tap = None
            return True
        self._last_tap = (index, now)
        return False

    def _scene(self):
        return build_world_scene(self.world, self.window.width, self.window.height)

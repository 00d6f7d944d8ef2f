from __future__ import annotations

import math
from typing import Optional, Tuple

from esper import World

from bottlecode.components.drag_session import DragSession
from bottlecode.components.guess_board import GuessBoard
from bottlecode.constants import DRAG_START_THRESHOLD
from bottlecode.events.bus import (
    EVENT_DRAG_CANCEL,
    EVENT_DRAG_START,
    EVENT_DROP,
    EVENT_HOVER_CHANGED,
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_SLOT_CLEAR_REQUEST,
    EventBus,
)
from bottlecode.systems.drag_system import SOURCE_POOL, SOURCE_SLOT
from bottlecode.ui.hit_test import resolve_pool_color, resolve_slot
from bottlecode.ui.scene import build_world_scene
from bottlecode.utils.game_state import session_component
from bottlecode.utils.input_payload import payload_point

MOUSE_BUTTON_LEFT = 1


class PointerInputSystem:
    """Native pointer backend: press, drag and release become drag events.

    A press on a pool bottle starts a pool drag at once. A press on a filled
    slot only arms a slot drag; it becomes a real drag after the pointer
    travels DRAG_START_THRESHOLD pixels, otherwise the release is a click
    that empties the slot.
    """

    def __init__(self, world: World, event_bus: EventBus, window, *, threshold: float = DRAG_START_THRESHOLD):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.threshold = threshold
        self.hover_slot: Optional[int] = None
        self._pending: Optional[Tuple[int, float, float]] = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_DRAG, self.on_mouse_drag)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)

    def on_mouse_press(self, sender, **kwargs):
        point = payload_point(kwargs)
        if point is None or kwargs.get('button', MOUSE_BUTTON_LEFT) != MOUSE_BUTTON_LEFT:
            return
        x, y = point
        scene = self._scene()
        color = resolve_pool_color(scene, x, y)
        if color is not None:
            self._pending = None
            self.event_bus.emit(EVENT_DRAG_START, source=SOURCE_POOL, color=color)
            return
        index = resolve_slot(scene, x, y)
        if index is not None and not session_component(self.world, GuessBoard).is_empty_at(index):
            self._pending = (index, x, y)

    def on_mouse_drag(self, sender, **kwargs):
        point = payload_point(kwargs)
        if point is None:
            return
        x, y = point
        if self._pending is not None:
            index, px, py = self._pending
            if math.hypot(x - px, y - py) >= self.threshold:
                self._pending = None
                self.event_bus.emit(EVENT_DRAG_START, source=SOURCE_SLOT, index=index)
        if self._dragging():
            self._set_hover(resolve_slot(self._scene(), x, y))

    def on_mouse_release(self, sender, **kwargs):
        point = payload_point(kwargs)
        pending, self._pending = self._pending, None
        if point is None:
            self.event_bus.emit(EVENT_DRAG_CANCEL, reason='pointer_lost')
            self._set_hover(None)
            return
        x, y = point
        target = resolve_slot(self._scene(), x, y)
        if pending is not None:
            # Press and release without travelling far enough: a click.
            if target == pending[0]:
                self.event_bus.emit(EVENT_SLOT_CLEAR_REQUEST, index=target)
            return
        if not self._dragging():
            return
        self._set_hover(None)
        if target is None:
            self.event_bus.emit(EVENT_DRAG_CANCEL, reason='released_off_board')
        else:
            self.event_bus.emit(EVENT_DROP, target=target)

    def _dragging(self) -> bool:
        return session_component(self.world, DragSession).active

    def _set_hover(self, slot: Optional[int]) -> None:
        if slot == self.hover_slot:
            return
        self.hover_slot = slot
        self.event_bus.emit(EVENT_HOVER_CHANGED, slot=slot)

    def _scene(self):
        return build_world_scene(self.world, self.window.width, self.window.height)

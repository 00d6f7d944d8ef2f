from __future__ import annotations

from esper import World

from bottlecode.components.game_state import ViewFlags
from bottlecode.events.bus import (
    EVENT_SHOW_ANSWER,
    EVENT_SHOW_HISTORY,
    EVENT_VIEW_FLAGS_CHANGED,
    EventBus,
)
from bottlecode.utils.game_state import session_component


class ViewSystem:
    """Maintains the reveal-answer and show-history toggles."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SHOW_ANSWER, self.on_show_answer)
        self.event_bus.subscribe(EVENT_SHOW_HISTORY, self.on_show_history)

    def on_show_answer(self, sender, **kwargs):
        flags = session_component(self.world, ViewFlags)
        flags.show_answer = self._resolve(kwargs.get('visible'), flags.show_answer)
        self._announce(flags)

    def on_show_history(self, sender, **kwargs):
        flags = session_component(self.world, ViewFlags)
        flags.show_history = self._resolve(kwargs.get('visible'), flags.show_history)
        self._announce(flags)

    @staticmethod
    def _resolve(visible, current: bool) -> bool:
        # None toggles, anything else sets.
        if visible is None:
            return not current
        return bool(visible)

    def _announce(self, flags: ViewFlags) -> None:
        self.event_bus.emit(
            EVENT_VIEW_FLAGS_CHANGED,
            show_answer=flags.show_answer,
            show_history=flags.show_history,
        )

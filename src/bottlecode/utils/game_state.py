from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from bottlecode.components.game_state import GameState, SessionStatus
from bottlecode.events.bus import EVENT_STATUS_CHANGED, EventBus

C = TypeVar("C")


def session_component(world: World, component_type: Type[C]) -> C:
    """Return the single instance of ``component_type`` held by the session entity."""
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} component not found")


def get_status(world: World) -> SessionStatus:
    return session_component(world, GameState).status


def set_status(world: World, event_bus: EventBus, status: SessionStatus) -> None:
    """Update the session status and emit a change event when it differs."""
    state = session_component(world, GameState)
    previous = state.status
    if previous == status:
        return
    state.status = status
    event_bus.emit(EVENT_STATUS_CHANGED, previous_status=previous, new_status=status)

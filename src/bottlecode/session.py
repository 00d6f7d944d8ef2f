"""In-process API for a presentation layer.

``GameSession`` owns the event bus, the world and the core systems. Every
input method just emits the matching bus event, so a caller may equally
talk to the bus directly; queries read the session components.
"""
from __future__ import annotations

import random
from typing import Any, Dict, Optional, Tuple

from bottlecode.components.answer import Answer
from bottlecode.components.drag_session import DragSession, DragState
from bottlecode.components.game_state import SessionStatus, ViewFlags
from bottlecode.components.guess_board import GuessBoard, Slot
from bottlecode.components.history import History, HistoryEntry
from bottlecode.components.palette import Difficulty, Palette
from bottlecode.constants import DEFAULT_NUM_COLORS
from bottlecode.events.bus import (
    EVENT_DIFFICULTY_GROW,
    EVENT_DIFFICULTY_SHRINK,
    EVENT_DRAG_CANCEL,
    EVENT_DRAG_START,
    EVENT_DROP,
    EVENT_GUESS_SUBMIT,
    EVENT_ROUND_RESET,
    EVENT_ROUND_START,
    EVENT_SHOW_ANSWER,
    EVENT_SHOW_HISTORY,
    EVENT_SLOT_CLEAR_REQUEST,
    EventBus,
)
from bottlecode.systems.board import BoardSystem
from bottlecode.systems.drag_system import SOURCE_POOL, SOURCE_SLOT, DragSystem
from bottlecode.systems.game_flow_system import GameFlowSystem
from bottlecode.systems.grading_system import GradingSystem
from bottlecode.systems.palette_system import PaletteSystem
from bottlecode.systems.pointer_input import PointerInputSystem
from bottlecode.systems.sortable_bridge import SortableBridgeSystem
from bottlecode.systems.touch_input import TouchInputSystem
from bottlecode.systems.view_system import ViewSystem
from bottlecode.ui.sortable import SortableList
from bottlecode.utils.game_state import get_status, session_component
from bottlecode.world import create_world

DragOrigin = Tuple[str, Any]


class GameSession:
    def __init__(
        self,
        *,
        event_bus: EventBus | None = None,
        num_colors: int = DEFAULT_NUM_COLORS,
        rng: random.Random | None = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.event_bus, num_colors=num_colors, rng=rng)
        self.palette_system = PaletteSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.drag_system = DragSystem(self.world, self.event_bus)
        self.grading_system = GradingSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.view_system = ViewSystem(self.world, self.event_bus)

    # ------------------------------------------------------------------
    # Optional input backends
    # ------------------------------------------------------------------

    def attach_pointer(self, window) -> PointerInputSystem:
        return PointerInputSystem(self.world, self.event_bus, window)

    def attach_touch(self, window, **kwargs) -> TouchInputSystem:
        return TouchInputSystem(self.world, self.event_bus, window, **kwargs)

    def attach_sortable(
        self,
        pool_view: SortableList | None = None,
        slot_view: SortableList | None = None,
    ) -> SortableBridgeSystem:
        return SortableBridgeSystem(self.world, self.event_bus, pool_view=pool_view, slot_view=slot_view)

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def start_round(self) -> None:
        self.event_bus.emit(EVENT_ROUND_START)

    def back_to_start(self) -> None:
        self.event_bus.emit(EVENT_ROUND_RESET)

    def grow_difficulty(self) -> None:
        self.event_bus.emit(EVENT_DIFFICULTY_GROW)

    def shrink_difficulty(self) -> None:
        self.event_bus.emit(EVENT_DIFFICULTY_SHRINK)

    def drag_start(self, source: DragOrigin) -> None:
        """Start a drag from ``("pool", color)`` or ``("slot", index)``."""
        kind, value = source
        if kind == SOURCE_POOL:
            self.event_bus.emit(EVENT_DRAG_START, source=SOURCE_POOL, color=value)
        elif kind == SOURCE_SLOT:
            self.event_bus.emit(EVENT_DRAG_START, source=SOURCE_SLOT, index=value)
        else:
            raise ValueError(f"unknown drag source {kind!r}")

    def drop(self, target_slot: int) -> None:
        self.event_bus.emit(EVENT_DROP, target=target_slot)

    def cancel_drag(self) -> None:
        self.event_bus.emit(EVENT_DRAG_CANCEL, reason='cancelled')

    def clear_slot(self, index: int) -> None:
        self.event_bus.emit(EVENT_SLOT_CLEAR_REQUEST, index=index)

    def submit_guess(self) -> None:
        self.event_bus.emit(EVENT_GUESS_SUBMIT)

    def reveal_answer(self, visible: bool | None = None) -> None:
        self.event_bus.emit(EVENT_SHOW_ANSWER, visible=visible)

    def toggle_history(self, visible: bool | None = None) -> None:
        self.event_bus.emit(EVENT_SHOW_HISTORY, visible=visible)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def status(self) -> SessionStatus:
        return get_status(self.world)

    @property
    def palette(self) -> Tuple[str, ...]:
        return session_component(self.world, Palette).as_tuple()

    @property
    def num_slots(self) -> int:
        return session_component(self.world, Difficulty).num_slots

    @property
    def guess(self) -> Tuple[Slot, ...]:
        return session_component(self.world, GuessBoard).snapshot()

    @property
    def filled_count(self) -> int:
        return session_component(self.world, GuessBoard).filled_count()

    @property
    def remaining(self) -> int:
        return session_component(self.world, GuessBoard).remaining()

    @property
    def is_full(self) -> bool:
        return session_component(self.world, GuessBoard).is_full()

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return session_component(self.world, History).entries

    @property
    def attempts(self) -> int:
        return session_component(self.world, History).attempts

    @property
    def show_answer(self) -> bool:
        return session_component(self.world, ViewFlags).show_answer

    @property
    def show_history(self) -> bool:
        return session_component(self.world, ViewFlags).show_history

    @property
    def answer(self) -> Optional[Tuple[str, ...]]:
        """The hidden code, or None unless revealed."""
        if not self.show_answer:
            return None
        return session_component(self.world, Answer).colors

    @property
    def drag_state(self) -> DragState:
        return session_component(self.world, DragSession).state

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data view of everything a presentation layer renders."""
        return {
            "status": self.status.name.lower(),
            "palette": list(self.palette),
            "num_slots": self.num_slots,
            "guess": list(self.guess),
            "filled_count": self.filled_count,
            "remaining": self.remaining,
            "is_full": self.is_full,
            "history": [_entry_dict(entry) for entry in self.history],
            "attempts": self.attempts,
            "answer": None if self.answer is None else list(self.answer),
            "show_answer": self.show_answer,
            "show_history": self.show_history,
            "drag_state": self.drag_state.name.lower(),
        }


def _entry_dict(entry: HistoryEntry) -> Dict[str, Any]:
    return {"guess": list(entry.guess), "correct_count": entry.correct_count}

from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# RAW INPUT (presentation layer -> engine)
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_DRAG = "mouse_drag"            # payload: x, y
EVENT_MOUSE_RELEASE = "mouse_release"      # payload: x, y, button
EVENT_TOUCH_START = "touch_start"          # payload: x, y
EVENT_TOUCH_MOVE = "touch_move"            # payload: x, y
EVENT_TOUCH_END = "touch_end"              # payload: x=float|None, y=float|None
EVENT_SORTABLE_ADD = "sortable_add"        # payload: item=ListNode, new_index=int
EVENT_SORTABLE_UPDATE = "sortable_update"  # payload: item=ListNode, old_index=int, new_index=int


# ============================================================================
# DRAG SESSION (input reconciler)
# ============================================================================
EVENT_DRAG_START = "drag_start"            # payload: source="pool"|"slot", color=str|None, index=int|None
EVENT_DRAG_STARTED = "drag_started"        # payload: source=str, color=str|None, index=int|None
EVENT_DRAG_REJECTED = "drag_rejected"      # payload: source=str, reason=str
EVENT_DROP = "drop"                        # payload: target=int
EVENT_DRAG_CANCEL = "drag_cancel"          # payload: reason=str|None
EVENT_DRAG_CANCELLED = "drag_cancelled"    # payload: reason=str
EVENT_HOVER_CHANGED = "hover_changed"      # payload: slot=int|None


# ============================================================================
# GUESS BOARD
# ============================================================================
EVENT_SLOT_PLACE_REQUEST = "slot_place_request"    # payload: index=int, color=str
EVENT_SLOT_SWAP_REQUEST = "slot_swap_request"      # payload: src=int, dst=int
EVENT_SLOT_CLEAR_REQUEST = "slot_clear_request"    # payload: index=int
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, positions=list[int], slots=tuple


# ============================================================================
# PALETTE & DIFFICULTY
# ============================================================================
EVENT_DIFFICULTY_GROW = "difficulty_grow"          # payload: None
EVENT_DIFFICULTY_SHRINK = "difficulty_shrink"      # payload: None
EVENT_DIFFICULTY_REJECTED = "difficulty_rejected"  # payload: action=str, reason=str
EVENT_PALETTE_CHANGED = "palette_changed"          # payload: palette=tuple, num_slots=int


# ============================================================================
# ROUND FLOW & GRADING
# ============================================================================
EVENT_ROUND_START = "round_start"                  # payload: None
EVENT_ROUND_STARTED = "round_started"              # payload: num_slots=int
EVENT_ROUND_RESET = "round_reset"                  # payload: None
EVENT_GUESS_SUBMIT = "guess_submit"                # payload: None
EVENT_GUESS_GRADED = "guess_graded"                # payload: guess=tuple, correct_count=int, attempt=int
EVENT_ROUND_WON = "round_won"                      # payload: attempts=int
EVENT_STATUS_CHANGED = "status_changed"            # payload: previous_status=SessionStatus, new_status=SessionStatus


# ============================================================================
# VIEW FLAGS
# ============================================================================
EVENT_SHOW_ANSWER = "show_answer"                  # payload: visible=bool|None (None toggles)
EVENT_SHOW_HISTORY = "show_history"                # payload: visible=bool|None (None toggles)
EVENT_VIEW_FLAGS_CHANGED = "view_flags_changed"    # payload: show_answer=bool, show_history=bool

from bottlecode.components.drag_session import DragSession, DragSource, DragState
from bottlecode.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_DRAG_CANCELLED,
    EVENT_DRAG_REJECTED,
    EVENT_DRAG_START,
    EVENT_DROP,
)
from bottlecode.utils.game_state import session_component
from tests.helpers import fill_board, new_session


def _started(board=None, seed=0):
    session = new_session(seed=seed)
    session.start_round()
    if board is not None:
        fill_board(session.world, board)
    return session


def test_pool_drop_overwrites_occupied_slot():
    session = _started(["red", "yellow", "blue", None])
    session.drag_start(("pool", "red"))
    session.drop(2)
    assert session.guess == ("red", "yellow", "red", None)
    assert session.drag_state is DragState.IDLE


def test_repeated_pool_drop_is_idempotent():
    session = _started(["red", "yellow", "blue", None])
    session.drag_start(("pool", "green"))
    session.drop(1)
    once = session.guess
    session.drag_start(("pool", "green"))
    session.drop(1)
    assert session.guess == once


def test_slot_drop_on_occupied_slot_swaps():
    session = _started(["red", "blue", "green", "yellow"])
    session.drag_start(("slot", 0))
    session.drop(3)
    assert session.guess == ("yellow", "blue", "green", "red")


def test_slot_drop_on_empty_slot_moves():
    session = _started(["red", None, None, None])
    session.drag_start(("slot", 0))
    session.drop(2)
    assert session.guess == (None, None, "red", None)


def test_slot_drop_on_itself_is_a_noop():
    session = _started(["red", None, "green", None])
    changes = []
    session.event_bus.subscribe(EVENT_BOARD_CHANGED, lambda sender, **kw: changes.append(kw))
    session.drag_start(("slot", 0))
    session.drop(0)
    assert session.guess == ("red", None, "green", None)
    assert changes == []
    assert session.drag_state is DragState.IDLE


def test_drag_from_empty_slot_is_rejected_and_drop_does_nothing():
    session = _started(["red", None, "green", "yellow"])
    rejected = []
    session.event_bus.subscribe(EVENT_DRAG_REJECTED, lambda sender, **kw: rejected.append(kw))

    session.drag_start(("slot", 1))
    assert session.drag_state is DragState.IDLE
    assert rejected[-1]["reason"] == "empty_slot"

    for target in range(4):
        session.drop(target)
    assert session.guess == ("red", None, "green", "yellow")


def test_drop_without_session_is_a_noop():
    session = _started(["red", None, None, None])
    session.drop(1)
    assert session.guess == ("red", None, None, None)


def test_session_resets_even_when_drop_target_is_invalid():
    session = _started()
    cancelled = []
    session.event_bus.subscribe(EVENT_DRAG_CANCELLED, lambda sender, **kw: cancelled.append(kw))
    session.drag_start(("pool", "blue"))
    session.event_bus.emit(EVENT_DROP, target=99)
    assert session.drag_state is DragState.IDLE
    assert session.guess == (None,) * 4
    assert cancelled[-1]["reason"] == "invalid_target"


def test_cancel_clears_session_and_keeps_board():
    session = _started(["red", "blue", None, None])
    session.drag_start(("slot", 1))
    assert session.drag_state is DragState.DRAGGING_FROM_SLOT
    session.cancel_drag()
    assert session.drag_state is DragState.IDLE
    assert session.guess == ("red", "blue", None, None)


def test_new_drag_supersedes_active_one():
    session = _started(["red", "blue", None, None])
    cancelled = []
    session.event_bus.subscribe(EVENT_DRAG_CANCELLED, lambda sender, **kw: cancelled.append(kw))
    session.drag_start(("slot", 0))
    session.drag_start(("pool", "yellow"))
    assert cancelled[-1]["reason"] == "superseded"
    drag = session_component(session.world, DragSession)
    assert drag.source is DragSource.POOL
    assert drag.color == "yellow"
    assert drag.index is None
    session.drop(0)
    assert session.guess == ("yellow", "blue", None, None)


def test_pool_color_outside_palette_is_rejected():
    session = _started()
    session.drag_start(("pool", "cyan"))
    assert session.drag_state is DragState.IDLE


def test_drag_ignored_before_round_starts():
    session = new_session()
    rejected = []
    session.event_bus.subscribe(EVENT_DRAG_REJECTED, lambda sender, **kw: rejected.append(kw))
    session.drag_start(("pool", "red"))
    session.drop(0)
    assert session.guess == (None,) * 4
    assert rejected[-1]["reason"] == "not_in_progress"


def test_state_machine_returns_to_idle_after_every_gesture():
    session = _started()
    assert session.drag_state is DragState.IDLE
    session.drag_start(("pool", "red"))
    assert session.drag_state is DragState.DRAGGING_FROM_POOL
    session.drop(0)
    assert session.drag_state is DragState.IDLE
    session.drag_start(("slot", 0))
    assert session.drag_state is DragState.DRAGGING_FROM_SLOT
    session.cancel_drag()
    assert session.drag_state is DragState.IDLE


def test_malformed_payloads_are_ignored():
    session = _started(["red", None, None, None])
    session.event_bus.emit(EVENT_DRAG_START, source="slot", index="zero")
    session.event_bus.emit(EVENT_DRAG_START, source="wormhole")
    session.event_bus.emit(EVENT_DROP)
    assert session.drag_state is DragState.IDLE
    assert session.guess == ("red", None, None, None)


def test_clear_slot_works_independently_of_drag():
    session = _started(["red", "blue", None, None])
    session.drag_start(("pool", "green"))
    session.clear_slot(1)
    assert session.guess == ("red", None, None, None)
    assert session.drag_state is DragState.DRAGGING_FROM_POOL
    session.drop(1)
    assert session.guess == ("red", "green", None, None)

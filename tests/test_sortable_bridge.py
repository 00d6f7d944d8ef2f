from bottlecode.events.bus import EVENT_SORTABLE_ADD, EVENT_SORTABLE_UPDATE
from bottlecode.ui.sortable import ListNode, SortableList
from tests.helpers import fill_board, new_session


def _setup(board=None):
    session = new_session()
    pool_view, slot_view = SortableList(), SortableList()
    bridge = session.attach_sortable(pool_view=pool_view, slot_view=slot_view)
    session.start_round()
    if board is not None:
        fill_board(session.world, board)
        bridge.rerender()
    return session, pool_view, slot_view


def _library_clone_into_slots(pool_view, slot_view, color, new_index):
    """What the library does on a pool -> slots drag with pull='clone'."""
    source = next(node for node in pool_view.nodes if node.color == color)
    clone = source.clone()
    slot_view.nodes.insert(new_index, clone)
    return clone


def _library_reorder(slot_view, old_index, new_index):
    node = slot_view.nodes.pop(old_index)
    slot_view.nodes.insert(new_index, node)
    return node


def test_views_are_rendered_from_state():
    session, pool_view, slot_view = _setup(["red", None, "blue", None])
    assert pool_view.colors() == session.palette
    assert slot_view.colors() == session.guess


def test_add_from_pool_overwrites_without_phantom_nodes():
    session, pool_view, slot_view = _setup(["red", "blue", None, None])
    clone = _library_clone_into_slots(pool_view, slot_view, "green", 1)
    assert len(slot_view) == 5

    session.event_bus.emit(EVENT_SORTABLE_ADD, item=clone, new_index=1)

    assert session.guess == ("red", "green", None, None)
    assert len(slot_view) == session.num_slots
    assert slot_view.colors() == session.guess
    assert all(node is not clone for node in slot_view.nodes)
    assert pool_view.colors() == session.palette


def test_add_past_the_end_targets_last_slot():
    session, pool_view, slot_view = _setup()
    clone = _library_clone_into_slots(pool_view, slot_view, "yellow", 4)
    session.event_bus.emit(EVENT_SORTABLE_ADD, item=clone, new_index=4)
    assert session.guess == (None, None, None, "yellow")
    assert slot_view.colors() == session.guess


def test_pool_move_mode_does_not_deplete_the_pool():
    session, pool_view, slot_view = _setup()
    node = next(n for n in pool_view.nodes if n.color == "red")
    pool_view.nodes.remove(node)
    slot_view.nodes.insert(0, node)
    session.event_bus.emit(EVENT_SORTABLE_ADD, item=node, new_index=0)
    assert session.guess == ("red", None, None, None)
    assert pool_view.colors() == session.palette
    assert slot_view.colors() == session.guess


def test_reorder_swaps_slots_and_view_mirrors_board():
    session, _, slot_view = _setup(["red", "blue", "green", "yellow"])
    node = _library_reorder(slot_view, 0, 3)
    # The library's own order would be blue, green, yellow, red.
    assert slot_view.colors() == ("blue", "green", "yellow", "red")

    session.event_bus.emit(EVENT_SORTABLE_UPDATE, item=node, old_index=0, new_index=3)

    assert session.guess == ("yellow", "blue", "green", "red")
    assert slot_view.colors() == session.guess
    assert len(slot_view) == 4


def test_reorder_of_empty_slot_changes_nothing():
    session, _, slot_view = _setup(["red", None, None, None])
    node = _library_reorder(slot_view, 1, 0)
    session.event_bus.emit(EVENT_SORTABLE_UPDATE, item=node, old_index=1, new_index=0)
    assert session.guess == ("red", None, None, None)
    assert slot_view.colors() == session.guess


def test_repeated_adds_never_grow_the_view():
    session, pool_view, slot_view = _setup()
    for index, color in enumerate(["red", "red", "blue", "red", "green"]):
        target = index % 4
        clone = _library_clone_into_slots(pool_view, slot_view, color, target)
        session.event_bus.emit(EVENT_SORTABLE_ADD, item=clone, new_index=target)
        assert len(slot_view) == 4
    assert session.guess == ("green", "red", "blue", "red")


def test_library_events_ignored_before_round():
    session = new_session()
    pool_view, slot_view = SortableList(), SortableList()
    session.attach_sortable(pool_view=pool_view, slot_view=slot_view)
    clone = _library_clone_into_slots(pool_view, slot_view, "red", 0)
    session.event_bus.emit(EVENT_SORTABLE_ADD, item=clone, new_index=0)
    assert session.guess == (None,) * 4
    assert slot_view.colors() == session.guess


def test_malformed_library_events_are_ignored():
    session, _, slot_view = _setup(["red", None, None, None])
    session.event_bus.emit(EVENT_SORTABLE_ADD, item="not-a-node", new_index=0)
    session.event_bus.emit(EVENT_SORTABLE_UPDATE, item=ListNode(color="red"), old_index=None, new_index=1)
    assert session.guess == ("red", None, None, None)


def test_bridge_keeps_the_views_it_is_given_even_when_empty():
    session = new_session()
    pool_view, slot_view = SortableList(), SortableList()
    bridge = session.attach_sortable(pool_view=pool_view, slot_view=slot_view)
    assert bridge.pool_view is pool_view
    assert bridge.slot_view is slot_view
    assert pool_view.colors() == session.palette
    assert slot_view.colors() == session.guess

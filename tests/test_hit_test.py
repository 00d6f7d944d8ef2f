from bottlecode.ui.hit_test import (
    KIND_BOTTLE_CAP,
    KIND_SLOT,
    KIND_SLOT_NUMBER,
    build_scene,
    element_from_point,
    resolve_pool_color,
    resolve_slot,
)
from bottlecode.ui.layout import Rect, centered_row, compute_board_layout

PALETTE = ["red", "blue", "green", "yellow"]


def _scene(slots):
    layout = compute_board_layout(800, 600, PALETTE, len(slots))
    return layout, build_scene(800, 600, layout, PALETTE, slots)


def test_bottle_parts_inside_a_slot_resolve_to_the_slot():
    layout, scene = _scene(["red", None, "blue", None])
    slot = next(e for e in scene.walk() if e.kind == KIND_SLOT and e.data["index"] == 2)
    cap = next(e for e in slot.walk() if e.kind == KIND_BOTTLE_CAP)
    x, y = cap.rect.center

    hit = element_from_point(scene, x, y)

    assert hit is cap
    assert resolve_slot(scene, x, y) == 2


def test_slot_number_label_resolves_to_its_slot():
    _, scene = _scene([None, None, None, None])
    label = next(e for e in scene.walk() if e.kind == KIND_SLOT_NUMBER and e.parent.data["index"] == 3)
    assert resolve_slot(scene, *label.rect.center) == 3


def test_empty_slot_resolves_to_itself():
    layout, scene = _scene([None, None, None, None])
    assert resolve_slot(scene, *layout.slots[1].center) == 1


def test_points_outside_slots_resolve_to_none():
    layout, scene = _scene(["red", None, None, None])
    assert resolve_slot(scene, 5, 5) is None
    gap_x = (layout.slots[0].right + layout.slots[1].left) / 2
    assert resolve_slot(scene, gap_x, layout.slots[0].center[1]) is None
    assert resolve_slot(scene, -50, -50) is None


def test_pool_bottles_resolve_to_their_color():
    layout, scene = _scene([None] * 4)
    for color, rect in zip(PALETTE, layout.pool):
        assert resolve_pool_color(scene, *rect.center) == color
        assert resolve_slot(scene, *rect.center) is None


def test_centered_row_shrinks_to_fit_narrow_windows():
    rects = centered_row(8, 72, 12, 400, 0)
    assert rects[0].left >= 0
    assert rects[-1].right <= 400 + 1e-9
    assert all(r.width == rects[0].width for r in rects)


def test_rect_contains_edges():
    rect = Rect(10, 10, 20, 20)
    assert rect.contains(10, 10)
    assert rect.contains(30, 30)
    assert not rect.contains(31, 15)

"""Retained element tree and point hit-testing.

The tree mirrors what the renderer paints: a pool container of bottles and a
slot container of slots, each slot holding a number label and, when filled,
a bottle with its own nested parts. Later siblings are painted on top of
earlier ones, so the topmost element under a point is the deepest, last
child that contains it. Resolving a slot walks up from that element, so a
slot's contents never hide the slot itself.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence

from bottlecode.ui.layout import BoardLayout, Rect

KIND_ROOT = "root"
KIND_POOL = "pool"
KIND_POOL_BOTTLE = "pool_bottle"
KIND_SLOTS = "slots"
KIND_SLOT = "slot"
KIND_SLOT_NUMBER = "slot_number"
KIND_BOTTLE = "bottle"
KIND_BOTTLE_CAP = "bottle_cap"
KIND_BOTTLE_BODY = "bottle_body"


@dataclass(eq=False)
class Element:
    kind: str
    rect: Rect
    data: Dict[str, Any] = field(default_factory=dict)
    children: List["Element"] = field(default_factory=list)
    parent: Optional["Element"] = field(default=None, repr=False)

    def add(self, child: "Element") -> "Element":
        child.parent = self
        self.children.append(child)
        return child

    def closest(self, kind: str) -> Optional["Element"]:
        node: Optional[Element] = self
        while node is not None:
            if node.kind == kind:
                return node
            node = node.parent
        return None

    def walk(self) -> Iterator["Element"]:
        yield self
        for child in self.children:
            yield from child.walk()


def element_from_point(root: Element, x: float, y: float) -> Optional[Element]:
    """Return the topmost element containing (x, y), or None."""
    for child in reversed(root.children):
        hit = element_from_point(child, x, y)
        if hit is not None:
            return hit
    if root.rect.contains(x, y):
        return root
    return None


def resolve_slot(root: Element, x: float, y: float) -> Optional[int]:
    hit = element_from_point(root, x, y)
    if hit is None:
        return None
    slot = hit.closest(KIND_SLOT)
    if slot is None:
        return None
    return slot.data.get("index")


def resolve_pool_color(root: Element, x: float, y: float) -> Optional[str]:
    hit = element_from_point(root, x, y)
    if hit is None:
        return None
    bottle = hit.closest(KIND_POOL_BOTTLE)
    if bottle is None:
        return None
    return bottle.data.get("color")


def _bottle(kind: str, rect: Rect, color: str, **data: Any) -> Element:
    bottle = Element(kind, rect, data={"color": color, **data})
    cap_height = rect.height * 0.2
    bottle.add(Element(KIND_BOTTLE_BODY, Rect(rect.left, rect.bottom, rect.width, rect.height - cap_height)))
    bottle.add(Element(KIND_BOTTLE_CAP, Rect(rect.left + rect.width * 0.3, rect.top - cap_height, rect.width * 0.4, cap_height)))
    return bottle


def _bounding(rects: Sequence[Rect]) -> Rect:
    if not rects:
        return Rect(0, 0, 0, 0)
    left = min(r.left for r in rects)
    bottom = min(r.bottom for r in rects)
    right = max(r.right for r in rects)
    top = max(r.top for r in rects)
    return Rect(left, bottom, right - left, top - bottom)


def build_scene(
    window_width: float,
    window_height: float,
    layout: BoardLayout,
    palette: Sequence[str],
    slots: Sequence[Optional[str]],
) -> Element:
    """Build the element tree for the current palette and board."""
    root = Element(KIND_ROOT, Rect(0, 0, window_width, window_height))

    pool = root.add(Element(KIND_POOL, _bounding(layout.pool)))
    for color, rect in zip(palette, layout.pool):
        pool.add(_bottle(KIND_POOL_BOTTLE, rect, color))

    container = root.add(Element(KIND_SLOTS, _bounding(layout.slots)))
    for index, (color, rect) in enumerate(zip(slots, layout.slots)):
        slot = container.add(Element(KIND_SLOT, rect, data={"index": index}))
        slot.add(Element(KIND_SLOT_NUMBER, Rect(rect.left + 2, rect.top - 14, 12, 12), data={"label": str(index + 1)}))
        if color is not None:
            slot.add(_bottle(KIND_BOTTLE, layout.bottle_in_slot(index), color, index=index))
    return root

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from bottlecode.constants import (
    BOTTLE_PADDING,
    POOL_BOTTLE_SIZE,
    POOL_GAP,
    POOL_ROW_Y,
    SLOT_GAP,
    SLOT_ROW_Y,
    SLOT_SIZE,
)


@dataclass(frozen=True, slots=True)
class Rect:
    left: float
    bottom: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height

    @property
    def center(self) -> tuple[float, float]:
        return self.left + self.width / 2, self.bottom + self.height / 2

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.bottom <= y <= self.top

    def inset(self, pad: float) -> "Rect":
        return Rect(self.left + pad, self.bottom + pad, max(0.0, self.width - 2 * pad), max(0.0, self.height - 2 * pad))


def centered_row(count: int, size: float, gap: float, window_width: float, bottom: float) -> List[Rect]:
    """Lay ``count`` squares of ``size`` in a horizontally centred row."""
    if count <= 0:
        return []
    total = count * size + (count - 1) * gap
    # Shrink uniformly when the row would not fit the window.
    if total > window_width:
        scale = window_width / total
        size *= scale
        gap *= scale
        total = window_width
    start_x = (window_width - total) / 2
    return [Rect(start_x + i * (size + gap), bottom, size, size) for i in range(count)]


@dataclass(frozen=True, slots=True)
class BoardLayout:
    pool: List[Rect]
    slots: List[Rect]

    def bottle_in_slot(self, index: int) -> Rect:
        return self.slots[index].inset(BOTTLE_PADDING)


def compute_board_layout(window_width: float, window_height: float, palette: Sequence[str], num_slots: int) -> BoardLayout:
    """Return pool and slot rectangles; used by both rendering and hit-testing."""
    # Rows are anchored proportionally so the layout survives window resizes.
    scale_y = window_height / 600.0
    pool = centered_row(len(palette), POOL_BOTTLE_SIZE, POOL_GAP, window_width, POOL_ROW_Y * scale_y)
    slots = centered_row(num_slots, SLOT_SIZE, SLOT_GAP, window_width, SLOT_ROW_Y * scale_y)
    return BoardLayout(pool=pool, slots=slots)

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from esper import World

from bottlecode.components.answer import Answer
from bottlecode.components.drag_session import DragSession, DragSource
from bottlecode.components.game_state import SessionStatus, ViewFlags
from bottlecode.components.guess_board import GuessBoard
from bottlecode.components.history import History
from bottlecode.components.palette import Palette
from bottlecode.components.touch_tracking import TouchTracking
from bottlecode.constants import COLOR_RGB, HISTORY_ROW_HEIGHT, HISTORY_TOP_Y
from bottlecode.events.bus import EVENT_HOVER_CHANGED, EventBus
from bottlecode.ui.hit_test import KIND_BOTTLE, KIND_POOL_BOTTLE, KIND_SLOT, build_scene
from bottlecode.ui.layout import Rect, centered_row, compute_board_layout
from bottlecode.utils.game_state import get_status, session_component

RGB = Tuple[int, int, int]
SLOT_FILL: RGB = (44, 48, 66)
SLOT_HOVER: RGB = (88, 96, 140)
SLOT_OUTLINE: RGB = (120, 126, 160)
DRAG_SOURCE_OUTLINE: RGB = (255, 255, 255)
TEXT: RGB = (230, 230, 240)
HISTORY_BOTTLE = 16


@dataclass(frozen=True, slots=True)
class DrawItem:
    kind: str  # "fill" | "outline" | "text"
    rect: Rect
    color: RGB
    text: str = ""


class RenderSystem:
    """Draws the session as flat rectangles.

    ``process`` always rebuilds ``draw_list`` from the components so headless
    tests can inspect what would be painted; arcade calls are skipped when no
    window is active.
    """

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.draw_list: List[DrawItem] = []
        self.hover_slot: Optional[int] = None
        self.event_bus.subscribe(EVENT_HOVER_CHANGED, self.on_hover_changed)

    def on_hover_changed(self, sender, **kwargs):
        self.hover_slot = kwargs.get('slot')

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        self.draw_list = self.build_draw_list()
        try:
            arcade.get_window()
        except Exception:
            return
        for item in self.draw_list:
            r = item.rect
            if item.kind == "fill":
                arcade.draw_lrbt_rectangle_filled(r.left, r.right, r.bottom, r.top, item.color)
            elif item.kind == "outline":
                arcade.draw_lrbt_rectangle_outline(r.left, r.right, r.bottom, r.top, item.color, border_width=2)
            elif item.kind == "text":
                arcade.draw_text(item.text, r.left, r.bottom, item.color, 14)

    def build_draw_list(self) -> List[DrawItem]:
        width, height = self.window.width, self.window.height
        status = get_status(self.world)
        items: List[DrawItem] = []
        if status is SessionStatus.NOT_STARTED:
            palette = session_component(self.world, Palette)
            items.append(DrawItem("text", Rect(width / 2 - 160, height / 2, 0, 0), TEXT,
                                  f"Difficulty: {len(palette)} bottles  [-] shrink  [+] grow  [Enter] start"))
            return items

        palette = session_component(self.world, Palette)
        board = session_component(self.world, GuessBoard)
        layout = compute_board_layout(width, height, palette.colors, len(board))
        scene = build_scene(width, height, layout, palette.colors, board.slots)
        hover = self._hover_slot()
        drag = session_component(self.world, DragSession)
        for element in scene.walk():
            if element.kind == KIND_SLOT:
                index = element.data["index"]
                items.append(DrawItem("fill", element.rect, SLOT_HOVER if index == hover else SLOT_FILL))
                outline = SLOT_OUTLINE
                if drag.source is DragSource.SLOT and drag.index == index:
                    outline = DRAG_SOURCE_OUTLINE
                items.append(DrawItem("outline", element.rect, outline))
            elif element.kind in (KIND_POOL_BOTTLE, KIND_BOTTLE):
                items.append(DrawItem("fill", element.rect, COLOR_RGB[element.data["color"]]))

        if board.is_full():
            label = "Enter: submit"
        else:
            remaining = board.remaining()
            label = f"Need {remaining} more {'bottle' if remaining == 1 else 'bottles'}"
        items.append(DrawItem("text", Rect(20, 20, 0, 0), TEXT, label))

        flags = session_component(self.world, ViewFlags)
        if flags.show_answer:
            answer = session_component(self.world, Answer)
            for color, rect in zip(answer.colors, centered_row(len(answer), 28, 6, width, height - 50)):
                items.append(DrawItem("fill", rect, COLOR_RGB[color]))
        if flags.show_history:
            items.extend(self._history_items(width))
        if status is SessionStatus.WON:
            attempts = session_component(self.world, History).attempts
            noun = "attempt" if attempts == 1 else "attempts"
            items.append(DrawItem("text", Rect(width / 2 - 120, height - 90, 0, 0), TEXT,
                                  f"Perfect! Solved in {attempts} {noun}. Enter: play again"))
        return items

    def _history_items(self, width: float) -> List[DrawItem]:
        items: List[DrawItem] = []
        history = session_component(self.world, History)
        for row, entry in enumerate(history.entries):
            bottom = HISTORY_TOP_Y - row * HISTORY_ROW_HEIGHT
            if bottom < 0:
                break
            items.append(DrawItem("text", Rect(20, bottom, 0, 0), TEXT, f"#{row + 1}"))
            for col, color in enumerate(entry.guess):
                rect = Rect(60 + col * (HISTORY_BOTTLE + 4), bottom, HISTORY_BOTTLE, HISTORY_BOTTLE)
                items.append(DrawItem("fill", rect, COLOR_RGB.get(color or "", SLOT_FILL)))
            items.append(DrawItem("text", Rect(60 + len(entry.guess) * (HISTORY_BOTTLE + 4) + 10, bottom, 0, 0),
                                  TEXT, f"{entry.correct_count} correct"))
        return items

    def _hover_slot(self) -> Optional[int]:
        tracking = session_component(self.world, TouchTracking)
        if tracking.active:
            return tracking.hover_slot
        return self.hover_slot

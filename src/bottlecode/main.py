"""Entry point for the Color Bottle Puzzle.

Wires a GameSession to an Arcade window: mouse events go to the pointer
backend, keys drive the round and the view toggles.
"""
import logging
import os
import random

from arcade import Window, color, key, run, set_background_color

from bottlecode.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from bottlecode.components.game_state import SessionStatus
from bottlecode.events.bus import (
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
)
from bottlecode.rendering.render_system import RenderSystem
from bottlecode.session import GameSession


class BottleWindow(Window):
    def __init__(self, session: GameSession):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Color Bottle Puzzle", resizable=True)
        self.session = session
        self.event_bus = session.event_bus
        self.pointer_input_system = session.attach_pointer(self)
        self.render_system = RenderSystem(session.world, self.event_bus, self)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_DRAG, x=x, y=y)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        session = self.session
        status = session.status
        if symbol in (key.ENTER, key.RETURN):
            if status is SessionStatus.IN_PROGRESS:
                session.submit_guess()
            else:
                session.start_round()
        elif symbol in (key.PLUS, key.EQUAL, key.NUM_ADD):
            session.grow_difficulty()
        elif symbol in (key.MINUS, key.NUM_SUBTRACT):
            session.shrink_difficulty()
        elif symbol == key.A:
            session.reveal_answer()
        elif symbol == key.H:
            session.toggle_history()
        elif symbol in (key.ESCAPE, key.BACKSPACE):
            session.back_to_start()


def main():
    logging.basicConfig(level=os.getenv("BOTTLECODE_LOG_LEVEL", "WARNING").upper())
    seed = os.getenv("BOTTLECODE_SEED")
    rng = random.Random(int(seed)) if seed else None
    BottleWindow(GameSession(rng=rng))
    run()


if __name__ == "__main__":
    main()

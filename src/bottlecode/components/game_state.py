"""Session status and view flags stored on the session entity."""
from dataclasses import dataclass
from enum import Enum, auto


class SessionStatus(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()


@dataclass
class GameState:
    """Singleton component storing the round lifecycle status."""
    status: SessionStatus = SessionStatus.NOT_STARTED


@dataclass(slots=True)
class ViewFlags:
    """Presentation toggles. Never consulted by grading or generation."""
    show_answer: bool = False
    show_history: bool = True

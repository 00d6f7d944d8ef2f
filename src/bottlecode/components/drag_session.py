from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class DragSource(Enum):
    NONE = auto()
    POOL = auto()
    SLOT = auto()


class DragState(Enum):
    """Reconciler states; the machine is cyclic and always returns to IDLE."""
    IDLE = auto()
    DRAGGING_FROM_POOL = auto()
    DRAGGING_FROM_SLOT = auto()


@dataclass(slots=True)
class DragSession:
    """The single in-flight drag, if any.

    color is set only for POOL drags, index only for SLOT drags.
    """
    source: DragSource = DragSource.NONE
    color: Optional[str] = None
    index: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.source is not DragSource.NONE

    @property
    def state(self) -> DragState:
        if self.source is DragSource.POOL:
            return DragState.DRAGGING_FROM_POOL
        if self.source is DragSource.SLOT:
            return DragState.DRAGGING_FROM_SLOT
        return DragState.IDLE

    def begin_pool(self, color: str) -> None:
        self.source = DragSource.POOL
        self.color = color
        self.index = None

    def begin_slot(self, index: int) -> None:
        self.source = DragSource.SLOT
        self.color = None
        self.index = index

    def reset(self) -> None:
        self.source = DragSource.NONE
        self.color = None
        self.index = None

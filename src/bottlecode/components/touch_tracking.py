from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class TouchTracking:
    """Synthetic touch drag state.

    hover_slot is the last slot resolved by hit-testing a movement sample; it
    drives the hover highlight and is the drop target at release.
    """
    active: bool = False
    hover_slot: Optional[int] = None

    def begin(self) -> None:
        self.active = True
        self.hover_slot = None

    def end(self) -> None:
        self.active = False
        self.hover_slot = None

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Answer:
    """Hidden code for the current round. Empty while no round is running."""
    colors: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.colors)

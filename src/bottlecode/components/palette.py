from dataclasses import dataclass, field
from typing import List, Tuple

from bottlecode.constants import COLOR_SUPERSET, DEFAULT_NUM_COLORS, MAX_COLORS, MIN_COLORS


@dataclass(slots=True)
class Palette:
    """Ordered colors currently in play; always a prefix of COLOR_SUPERSET."""
    colors: List[str] = field(default_factory=lambda: list(COLOR_SUPERSET[:DEFAULT_NUM_COLORS]))

    def __post_init__(self) -> None:
        if not MIN_COLORS <= len(self.colors) <= MAX_COLORS:
            raise ValueError(f"palette size must be within [{MIN_COLORS}, {MAX_COLORS}], got {len(self.colors)}")
        if len(set(self.colors)) != len(self.colors):
            raise ValueError("palette colors must be distinct")

    @classmethod
    def of_size(cls, size: int) -> "Palette":
        return cls(colors=list(COLOR_SUPERSET[:size]))

    def can_grow(self) -> bool:
        return len(self.colors) < MAX_COLORS

    def can_shrink(self) -> bool:
        return len(self.colors) > MIN_COLORS

    def grow(self) -> str | None:
        """Append the next superset color. Returns it, or None at the upper bound."""
        if not self.can_grow():
            return None
        color = COLOR_SUPERSET[len(self.colors)]
        self.colors.append(color)
        return color

    def shrink(self) -> str | None:
        """Drop the most recently appended color. Returns it, or None at the lower bound."""
        if not self.can_shrink():
            return None
        return self.colors.pop()

    def as_tuple(self) -> Tuple[str, ...]:
        return tuple(self.colors)

    def __contains__(self, color: object) -> bool:
        return color in self.colors

    def __len__(self) -> int:
        return len(self.colors)


@dataclass(slots=True)
class Difficulty:
    """Slot count of the current round; re-derived from the palette on start."""
    num_slots: int = DEFAULT_NUM_COLORS

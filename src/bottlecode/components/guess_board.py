from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Slot = Optional[str]


@dataclass(slots=True)
class GuessBoard:
    """Ordered guess slots, each None (empty) or a color.

    Colors are never consumed from the pool, so the same color may occupy
    several slots.
    """
    slots: List[Slot] = field(default_factory=list)

    @classmethod
    def empty(cls, size: int) -> "GuessBoard":
        return cls(slots=[None] * size)

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> Slot:
        return self.slots[self._check(index)]

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self.slots):
            raise IndexError(f"slot index {index} out of range for board of {len(self.slots)}")
        return index

    def place(self, index: int, color: str) -> None:
        self.slots[self._check(index)] = color

    def clear(self, index: int) -> Slot:
        idx = self._check(index)
        previous = self.slots[idx]
        self.slots[idx] = None
        return previous

    def swap(self, i: int, j: int) -> None:
        # Degenerates to a move when one side is empty and to a no-op when i == j.
        a, b = self._check(i), self._check(j)
        self.slots[a], self.slots[b] = self.slots[b], self.slots[a]

    def is_empty_at(self, index: int) -> bool:
        return self.slots[self._check(index)] is None

    def filled_count(self) -> int:
        return sum(1 for slot in self.slots if slot is not None)

    def remaining(self) -> int:
        return len(self.slots) - self.filled_count()

    def is_full(self) -> bool:
        return all(slot is not None for slot in self.slots)

    def resize(self, size: int) -> None:
        """Truncate from the end or pad with empty slots, keeping retained indices."""
        if size < len(self.slots):
            del self.slots[size:]
        else:
            self.slots.extend([None] * (size - len(self.slots)))

    def reset(self, size: int | None = None) -> None:
        self.slots = [None] * (len(self.slots) if size is None else size)

    def snapshot(self) -> Tuple[Slot, ...]:
        return tuple(self.slots)

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    guess: Tuple[Optional[str], ...]
    correct_count: int


@dataclass(slots=True)
class History:
    """Append-only ledger of graded guesses in submission order."""
    _entries: List[HistoryEntry] = field(default_factory=list)

    def record(self, guess: Sequence[Optional[str]], correct_count: int) -> HistoryEntry:
        entry = HistoryEntry(guess=tuple(guess), correct_count=correct_count)
        self._entries.append(entry)
        return entry

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def attempts(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

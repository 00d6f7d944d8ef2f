from __future__ import annotations

from typing import Optional, Sequence


def grade(guess: Sequence[Optional[str]], answer: Sequence[str]) -> int:
    """Count positions where the guessed color equals the answer color.

    Strictly positional: a right color in the wrong slot scores nothing.
    Only defined for a complete guess of the answer's length.
    """
    if len(guess) != len(answer):
        raise ValueError(f"guess has {len(guess)} slots, answer has {len(answer)}")
    if any(color is None for color in guess):
        raise ValueError("cannot grade a guess with empty slots")
    return sum(1 for guessed, hidden in zip(guess, answer) if guessed == hidden)


def is_solved(correct_count: int, num_slots: int) -> bool:
    return correct_count == num_slots

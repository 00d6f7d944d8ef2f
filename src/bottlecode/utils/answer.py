from __future__ import annotations

import random
from typing import Sequence, Tuple


def generate_answer(palette: Sequence[str], num_slots: int, rng: random.Random | None = None) -> Tuple[str, ...]:
    """Pick a uniformly random ordered selection of ``num_slots`` distinct palette colors."""
    if not 1 <= num_slots <= len(palette):
        raise ValueError(f"num_slots must be within [1, {len(palette)}], got {num_slots}")
    if len(set(palette)) != len(palette):
        raise ValueError("palette colors must be distinct")
    generator = rng or random.Random()
    return tuple(generator.sample(list(palette), num_slots))

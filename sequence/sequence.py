"""
sequence.py — The Array Being Sorted
=====================================
Single source of truth for the values on screen.  The controller owns
one Sequence; the algorithm generators read it, and only the consumer
of their events writes to it.

Responsibilities:
  1. In-place replacement                   (replace)
  2. Random generation factory              (generate_random)
  3. Snapshot helpers                       (copy)
  4. Invariant checks                       (is_sorted / is_permutation_of)

Design decisions:
  - Values live in a plain list so generators can index it directly.
  - There is no insert / delete: a run only reorders or overwrites.
"""

import random
from collections import Counter
from typing import Iterable, List, Optional


MIN_VALUE = 10     # smallest bar
MAX_VALUE = 309    # tallest bar (inclusive)


class Sequence:
    """
    Attributes:
        values : The live list of integers.  Generators receive this exact
                 list object, so never rebind it during a run.
    """

    def __init__(self, values: Optional[Iterable[int]] = None):
        self.values: List[int] = list(values) if values is not None else []

    # ==================================================================
    # CONTENTS
    # ==================================================================
    def replace(self, values: Iterable[int]) -> None:
        """Overwrite every value in place (keeps the list identity)."""
        self.values[:] = list(values)

    # ==================================================================
    # FACTORY
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        size: int,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "Sequence":
        """
        Independently drawn integers in [MIN_VALUE, MAX_VALUE].

        Args:
            size : Number of bars.
            rng  : Random source to draw from (wins over `seed`).
            seed : Convenience for reproducible sequences.
        """
        if rng is None:
            rng = random.Random(seed)
        return cls(rng.randint(MIN_VALUE, MAX_VALUE) for _ in range(max(0, size)))

    # ==================================================================
    # SNAPSHOT / CHECKS
    # ==================================================================
    def copy(self) -> List[int]:
        return list(self.values)

    def is_sorted(self) -> bool:
        return all(a <= b for a, b in zip(self.values, self.values[1:]))

    def is_permutation_of(self, other: Iterable[int]) -> bool:
        return Counter(self.values) == Counter(other)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, idx: int) -> int:
        return self.values[idx]

    def __iter__(self):
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Sequence(n={len(self.values)}, values={self.values})"

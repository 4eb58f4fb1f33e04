"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields an Event at every meaningful step:
  1. Compare the adjacent pair (j, j+1)
  2. Swap them when they are out of order

Runs the full n-1 passes; there is no early-exit flag, so an already
sorted input still shows every comparison.
"""

from typing import Generator, List

from algorithms.event import Event, compare, swap


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                   # 0
    "    n ← len(a)",                        # 1
    "    for i in 0 … n-2:",                 # 2
    "        for j in 0 … n-i-2:",           # 3
    "            if a[j] > a[j+1]:",         # 4
    "                swap(a[j], a[j+1])",    # 5
]


def bubble_sort(values: List[int]) -> Generator[Event, None, None]:
    """
    Yields Events for every comparison and swap of bubble sort.

    Args:
        values : The live list.  Read-only here; the consumer applies swaps.
    """
    n = len(values)
    for i in range(n - 1):
        for j in range(n - i - 1):
            yield compare(
                j, j + 1, line=4,
                explanation=f"Pass {i + 1}: compare a[{j}]={values[j]} with a[{j + 1}]={values[j + 1]}.",
            )
            if values[j] > values[j + 1]:
                yield swap(
                    j, j + 1, line=5,
                    explanation=f"{values[j]} > {values[j + 1]}, so the larger value bubbles right.",
                )

"""
quick.py — Quick Sort (Lomuto partition)
=========================================
Pivot is the last element of the range.  Every a[j] in [low, high) is
compared against the pivot; smaller values are swapped into the growing
left block (skipped when i == j), then the pivot is swapped into its
final slot (skipped when it is already there).
"""

from typing import Generator, List

from algorithms.event import Event, compare, swap


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",                 # 0
    "    if low < high:",                            # 1
    "        pi ← partition(a, low, high)",          # 2
    "        quick_sort(a, low, pi-1)",              # 3
    "        quick_sort(a, pi+1, high)",             # 4
    "def partition(a, low, high):",                  # 5
    "    pivot ← a[high];  i ← low - 1",             # 6
    "    for j in low … high-1:",                    # 7
    "        if a[j] < pivot:",                      # 8
    "            i ← i + 1",                         # 9
    "            if i ≠ j: swap(a[i], a[j])",        # 10
    "    if i+1 ≠ high: swap(a[i+1], a[high])",      # 11
    "    return i + 1",                              # 12
]


def quick_sort(values: List[int]) -> Generator[Event, None, None]:
    yield from _quick_sort(values, 0, len(values) - 1)


def _quick_sort(values: List[int], low: int, high: int) -> Generator[Event, None, None]:
    if low < high:
        pi = yield from _partition(values, low, high)
        yield from _quick_sort(values, low, pi - 1)
        yield from _quick_sort(values, pi + 1, high)


def _partition(values: List[int], low: int, high: int) -> Generator[Event, None, int]:
    """Yields the partition's events and returns the pivot's final index."""
    pivot = values[high]
    i = low - 1

    for j in range(low, high):
        yield compare(
            j, high, line=8,
            explanation=f"Is a[{j}]={values[j]} smaller than the pivot {pivot}?",
        )
        if values[j] < pivot:
            i += 1
            if i != j:
                yield swap(
                    i, j, line=10,
                    explanation=f"{values[j]} < {pivot}: move it into the left block at position {i}.",
                )

    if i + 1 != high:
        yield swap(
            i + 1, high, line=11,
            explanation=f"Place pivot {pivot} at its final position {i + 1}.",
        )
    return i + 1

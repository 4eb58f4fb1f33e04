"""
selection.py — Selection Sort
==============================
For each position i, scan the unsorted remainder for its minimum, then
swap that minimum into place.  At most one swap per outer position; when
the minimum is already at i nothing is swapped (and nothing is counted).
"""

from typing import Generator, List

from algorithms.event import Event, compare, swap


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                # 0
    "    for i in 0 … n-2:",                 # 1
    "        min ← i",                       # 2
    "        for j in i+1 … n-1:",           # 3
    "            if a[j] < a[min]:",         # 4
    "                min ← j",               # 5
    "        if min ≠ i:",                   # 6
    "            swap(a[i], a[min])",        # 7
]


def selection_sort(values: List[int]) -> Generator[Event, None, None]:
    n = len(values)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            yield compare(
                j, min_idx, line=4,
                explanation=f"Is a[{j}]={values[j]} smaller than the current minimum a[{min_idx}]={values[min_idx]}?",
            )
            if values[j] < values[min_idx]:
                min_idx = j

        if min_idx != i:
            yield swap(
                i, min_idx, line=7,
                explanation=f"Minimum of the unsorted part is {values[min_idx]}; move it to position {i}.",
            )

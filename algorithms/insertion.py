"""
insertion.py — Insertion Sort
==============================
Takes the key at position i and shifts every larger value in the sorted
prefix one slot right until the key's place is found.

Each right-shift is emitted as SWAP(j, j+1): the larger value moves right
and the key moves one slot left.  The list therefore always holds the
same values between steps (no half-written "hole").  The loop only shifts
on a strict `>`, so equal values keep their relative order (stable).

Every evaluated comparison is emitted and counted, including the one that
finds `a[j] <= key` and ends the inner loop.
"""

from typing import Generator, List

from algorithms.event import Event, compare, swap


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                # 0
    "    for i in 1 … n-1:",                 # 1
    "        key ← a[i]",                    # 2
    "        j ← i - 1",                     # 3
    "        while j ≥ 0 and a[j] > key:",   # 4
    "            a[j+1] ← a[j]",             # 5
    "            j ← j - 1",                 # 6
    "        a[j+1] ← key",                  # 7
]


def insertion_sort(values: List[int]) -> Generator[Event, None, None]:
    n = len(values)
    for i in range(1, n):
        key = values[i]
        j = i - 1
        while j >= 0:
            yield compare(
                j, j + 1, line=4,
                explanation=f"Key {key}: is a[{j}]={values[j]} greater than the key?",
            )
            if values[j] <= key:
                break
            yield swap(
                j, j + 1, line=5,
                explanation=f"Shift {values[j]} right; key {key} moves down to position {j}.",
            )
            j -= 1

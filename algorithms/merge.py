"""
merge.py — Merge Sort
======================
Top-down recursive merge sort.  `mid = (left + right) // 2`.

The merge step copies both runs, compares their heads (ties go to the
left run, which keeps the sort stable) and writes the winner back.
Every write-back, including the two flush loops, is an OVERWRITE event.

COMPARE(k, r) names the slot about to be written and the live right head.
The left head has no live position once a right value has been written
over it, so the left-run value only appears in the explanation.  While a
merge is in progress the list can hold a value twice; the multiset is
whole again once that merge finishes.
"""

from typing import Generator, List

from algorithms.event import Event, compare, overwrite


PSEUDOCODE: List[str] = [
    "def merge_sort(a, left, right):",               # 0
    "    if left < right:",                          # 1
    "        mid ← ⌊(left + right) / 2⌋",            # 2
    "        merge_sort(a, left, mid)",              # 3
    "        merge_sort(a, mid+1, right)",           # 4
    "        merge(a, left, mid, right)",            # 5
    "def merge(a, left, mid, right):",               # 6
    "    L ← a[left…mid];  R ← a[mid+1…right]",      # 7
    "    while L and R not exhausted:",              # 8
    "        if L[i] ≤ R[j]: a[k] ← L[i]; i += 1",   # 9
    "        else:           a[k] ← R[j]; j += 1",   # 10
    "    copy remaining L into a[k…]",               # 11
    "    copy remaining R into a[k…]",               # 12
]


def merge_sort(values: List[int]) -> Generator[Event, None, None]:
    yield from _merge_sort(values, 0, len(values) - 1)


def _merge_sort(values: List[int], left: int, right: int) -> Generator[Event, None, None]:
    if left < right:
        mid = (left + right) // 2
        yield from _merge_sort(values, left, mid)
        yield from _merge_sort(values, mid + 1, right)
        yield from _merge(values, left, mid, right)


def _merge(values: List[int], left: int, mid: int, right: int) -> Generator[Event, None, None]:
    left_run  = values[left:mid + 1]
    right_run = values[mid + 1:right + 1]

    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        yield compare(
            k, mid + 1 + j, line=8,
            explanation=f"Merge [{left}…{right}]: compare heads {left_run[i]} and {right_run[j]}.",
        )
        if left_run[i] <= right_run[j]:
            yield overwrite(k, left_run[i], line=9, explanation=f"Write {left_run[i]} from the left run to a[{k}].")
            i += 1
        else:
            yield overwrite(k, right_run[j], line=10, explanation=f"Write {right_run[j]} from the right run to a[{k}].")
            j += 1
        k += 1

    while i < len(left_run):
        yield overwrite(k, left_run[i], line=11, explanation=f"Flush {left_run[i]} from the left run to a[{k}].")
        i += 1
        k += 1

    while j < len(right_run):
        yield overwrite(k, right_run[j], line=12, explanation=f"Flush {right_run[j]} from the right run to a[{k}].")
        j += 1
        k += 1

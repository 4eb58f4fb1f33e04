"""
heap.py — Heap Sort
====================
Build a max-heap bottom-up (heapify from n//2 - 1 down to 0), then
repeatedly swap the root with the end of the shrinking heap and sift the
new root down.

heapify compares each existing child against the current "largest"
candidate, and recurses into the child it swapped with.
"""

from typing import Generator, List

from algorithms.event import Event, compare, swap


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",                             # 0
    "    for i in n/2-1 … 0: heapify(a, n, i)",      # 1
    "    for i in n-1 … 1:",                         # 2
    "        swap(a[0], a[i])",                      # 3
    "        heapify(a, i, 0)",                      # 4
    "def heapify(a, n, i):",                         # 5
    "    largest ← i;  l ← 2i+1;  r ← 2i+2",         # 6
    "    if l < n and a[l] > a[largest]: largest ← l",  # 7
    "    if r < n and a[r] > a[largest]: largest ← r",  # 8
    "    if largest ≠ i:",                           # 9
    "        swap(a[i], a[largest])",                # 10
    "        heapify(a, n, largest)",                # 11
]


def heap_sort(values: List[int]) -> Generator[Event, None, None]:
    n = len(values)

    # build max heap
    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(values, n, i)

    # extract
    for i in range(n - 1, 0, -1):
        yield swap(
            0, i, line=3,
            explanation=f"Move the heap maximum {values[0]} to position {i}; the heap shrinks to size {i}.",
        )
        yield from _heapify(values, i, 0)


def _heapify(values: List[int], n: int, i: int) -> Generator[Event, None, None]:
    largest = i
    left = 2 * i + 1
    right = 2 * i + 2

    if left < n:
        yield compare(
            left, largest, line=7,
            explanation=f"Left child a[{left}]={values[left]} vs largest a[{largest}]={values[largest]}.",
        )
        if values[left] > values[largest]:
            largest = left

    if right < n:
        yield compare(
            right, largest, line=8,
            explanation=f"Right child a[{right}]={values[right]} vs largest a[{largest}]={values[largest]}.",
        )
        if values[right] > values[largest]:
            largest = right

    if largest != i:
        yield swap(
            i, largest, line=10,
            explanation=f"Child {values[largest]} beats parent {values[i]}: sift the parent down.",
        )
        yield from _heapify(values, n, largest)

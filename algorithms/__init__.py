"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows
about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, stable, in_place, …),
        …
    }

The controller, the recorder and the UI all consume AlgoInfo, so adding
an algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.heap      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc
from algorithms.event     import Event, EventKind, apply_event, drain


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bubble"
    label:            str                    # human label, e.g. "Bubble Sort"
    fn:               Callable               # the generator function
    pseudocode:       List[str]              # lines for the side-panel
    tags:             List[str] = field(default_factory=list)
    stable:           bool     = False
    in_place:         bool     = True
    complexity_time:  str      = ""          # e.g. "O(n²)"
    complexity_space: str      = ""          # e.g. "O(1)"
    description:      str      = ""
    characteristics:  List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "tags":             list(self.tags),
            "stable":           self.stable,
            "in_place":         self.in_place,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
            "characteristics":  list(self.characteristics),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        tags=["quadratic", "stable", "in-place"], stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly steps through the list, compares adjacent elements "
                    "and swaps them if they are in the wrong order.",
        characteristics=[
            "Simple to understand and implement",
            "Good for small datasets",
            "Stable sorting algorithm",
            "In-place sorting",
        ],
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        tags=["quadratic", "in-place"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Divides the list into a sorted and an unsorted part and repeatedly "
                    "moves the smallest unsorted element to the end of the sorted part.",
        characteristics=[
            "Simple implementation",
            "Performs well on small lists",
            "In-place sorting",
            "Not stable",
        ],
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        tags=["quadratic", "stable", "in-place", "adaptive"], stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Builds the sorted array one item at a time by inserting each new "
                    "element into its place in the sorted prefix.",
        characteristics=[
            "Efficient for small data sets",
            "Adaptive algorithm",
            "Stable sorting",
            "In-place sorting",
        ],
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        tags=["divide-and-conquer", "stable"], stable=True, in_place=False,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Divide and conquer: split the list in half, sort each half "
                    "recursively, then merge the two sorted halves.",
        characteristics=[
            "Guaranteed O(n log n) performance",
            "Stable sorting algorithm",
            "Good for large datasets",
            "Not in-place",
        ],
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        tags=["divide-and-conquer", "in-place"],
        complexity_time="O(n log n) average, O(n²) worst case", complexity_space="O(log n)",
        description="Partitions the list around a pivot so smaller values end up on its "
                    "left, then sorts both sides recursively.",
        characteristics=[
            "Excellent average-case performance",
            "In-place sorting",
            "Not stable",
            "Good cache performance",
        ],
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        tags=["in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Arranges the list as a binary max-heap, then repeatedly moves the "
                    "maximum to the end and restores the heap.",
        characteristics=[
            "Guaranteed O(n log n) performance",
            "In-place sorting",
            "Not stable",
            "Good for large datasets",
        ],
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "Event",
    "EventKind",
    "apply_event",
    "drain",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]

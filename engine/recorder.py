"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete, un-paced algorithm run (every Event) and computes
the metrics the Analytics panel and Comparison Mode need.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick", values=[5, 3, 8, 1])
    rec.run_to_completion()          # exhausts the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot

Comparison Mode:
    Two Recorders run on the SAME input, then compare(rec1, rec2) →
    ComparisonResult.

The recorder works on its own copy of the values, so it never touches
the sequence a controller is animating.  Its counts are the reference
the animated run must match.
"""

import time
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any, Iterable

from algorithms import get_algorithm, AlgoInfo
from algorithms.event import Event, drain
from engine.statistics import Statistics
from sequence import Sequence


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str       = ""
    algo_label:   str       = ""
    size:         int       = 0
    comparisons:  int       = 0
    swaps:        int       = 0
    writes:       int       = 0
    total_events: int       = 0
    wall_time_ms: float     = 0.0        # un-paced wall-clock time
    sorted_ok:    bool      = False      # sorted AND a permutation of the input
    result:       List[int] = field(default_factory=list)


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""
    winner_swaps:       str = ""
    winner_events:      str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        events  : Full list of Events from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.events:  List[Event]          = []
        self.metrics: Optional[RunMetrics] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._input:     List[int]          = []
        self._values:    List[int]          = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Iterable[int]) -> None:
        """Remember the algorithm and take a private copy of the input."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._input     = list(values)
        self._values    = list(self._input)
        self.events     = []
        self.metrics    = None

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every event, compute metrics."""
        if self._algo_info is None:
            raise RuntimeError("Call start() first.")

        stats = Statistics()
        started = time.monotonic()
        self.events = drain(self._algo_info.fn, self._values, on_event=stats.record)
        wall_ms = (time.monotonic() - started) * 1000

        result = Sequence(self._values)
        self.metrics = RunMetrics(
            algo_key=self._algo_info.key,
            algo_label=self._algo_info.label,
            size=len(self._input),
            comparisons=stats.comparisons,
            swaps=stats.swaps,
            writes=stats.writes,
            total_events=len(self.events),
            wall_time_ms=round(wall_ms, 2),
            sorted_ok=result.is_sorted() and result.is_permutation_of(self._input),
            result=result.copy(),
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "input":    list(self._input),
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "events":   [e.to_dict() for e in self.events],
        }


def record(algo_key: str, values: Iterable[int]) -> Recorder:
    """start() + run_to_completion() in one call."""
    rec = Recorder()
    rec.start(algo_key, values)
    rec.run_to_completion()
    return rec


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_swaps=winner(l.swaps, r.swaps),
        winner_events=winner(l.total_events, r.total_events),
    )

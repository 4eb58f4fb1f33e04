"""
statistics.py — Run Counters
=============================
Comparison / swap / write counters plus wall-clock timing for one run.

`record()` is the single place that decides which counter an Event
bumps, so the animated controller and the non-visual recorder always
agree on the final numbers.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from algorithms.event import Event, EventKind


@dataclass
class Statistics:
    comparisons: int             = 0
    swaps:       int             = 0
    writes:      int             = 0          # merge write-backs
    started_at:  Optional[float] = None       # clock() at run start
    finished_at: Optional[float] = None       # clock() when the run ended

    def record(self, event: Event) -> None:
        if event.kind is EventKind.COMPARE:
            self.comparisons += 1
        elif event.kind is EventKind.SWAP:
            self.swaps += 1
        elif event.kind is EventKind.OVERWRITE:
            self.writes += 1

    def reset(self) -> None:
        self.comparisons = 0
        self.swaps       = 0
        self.writes      = 0
        self.started_at  = None
        self.finished_at = None

    def start(self, now: float) -> None:
        self.reset()
        self.started_at = now

    def finish(self, now: float) -> None:
        if self.started_at is not None and self.finished_at is None:
            self.finished_at = now

    def elapsed_ms(self, now: float) -> float:
        """Milliseconds since start; frozen once finished, 0 before any run."""
        if self.started_at is None:
            return 0.0
        end = self.finished_at if self.finished_at is not None else now
        return round((end - self.started_at) * 1000, 2)

    def as_dict(self, now: float) -> Dict[str, Any]:
        return {
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
            "writes":      self.writes,
            "elapsed_ms":  self.elapsed_ms(now),
        }

"""
frame.py — Web Renderer Collaborator
=====================================
The controller pushes every event into a FrameRenderer; the browser
polls /api/state and gets the latest frame back.  A frame is everything
needed to paint one moment of the run:

    • values            – bar heights
    • markers           – {index: [marker, …]}
    • stats             – comparisons / swaps / writes / elapsed_ms
    • controls_enabled  – False while a run is active
    • algo_key, pseudocode_line, explanation – the event being animated
    • version           – bumped on every change, so clients can skip repaints

The run thread writes, request threads read, so every access goes
through one lock and readers get copies.
"""

import threading
from typing import Any, Dict, List, Optional, Set

from algorithms.event import Event
from engine.renderer import Renderer
from sequence import BarState


class FrameRenderer(Renderer):

    def __init__(self):
        self._lock = threading.Lock()
        self._values:           List[int]           = []
        self._markers:          Dict[int, Set[str]] = {}
        self._stats:            Dict[str, Any]      = {}
        self._controls_enabled: bool                = True
        self._algo_key:         Optional[str]       = None
        self._pseudocode_line:  int                 = -1
        self._explanation:      str                 = ""
        self._version:          int                 = 0

    # ------------------------------------------------------------------
    # Renderer hooks (called by the controller)
    # ------------------------------------------------------------------
    def draw(self, values: List[int]) -> None:
        with self._lock:
            self._values = list(values)
            self._version += 1

    def mark(self, index: int, marker: BarState) -> None:
        with self._lock:
            self._markers.setdefault(index, set()).add(BarState.parse(marker).value)
            self._version += 1

    def unmark(self, index: int, marker: BarState) -> None:
        with self._lock:
            marks = self._markers.get(index)
            if marks is not None:
                marks.discard(BarState.parse(marker).value)
                if not marks:
                    del self._markers[index]
            self._version += 1

    def clear_marks(self) -> None:
        with self._lock:
            self._markers.clear()
            self._version += 1

    def show_stats(self, stats: Dict[str, Any]) -> None:
        with self._lock:
            self._stats = dict(stats)
            self._version += 1

    def show_event(self, algo_key: str, event: Event) -> None:
        with self._lock:
            self._algo_key        = algo_key
            self._pseudocode_line = event.pseudocode_line
            self._explanation     = event.explanation
            self._version += 1

    def set_controls_enabled(self, enabled: bool) -> None:
        with self._lock:
            self._controls_enabled = enabled
            if enabled:
                self._pseudocode_line = -1
            self._version += 1

    # ------------------------------------------------------------------
    # Read side (request threads)
    # ------------------------------------------------------------------
    def frame(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "values":           list(self._values),
                "markers":          {i: sorted(m) for i, m in self._markers.items()},
                "stats":            dict(self._stats),
                "controls_enabled": self._controls_enabled,
                "algo_key":         self._algo_key,
                "pseudocode_line":  self._pseudocode_line,
                "explanation":      self._explanation,
                "version":          self._version,
            }

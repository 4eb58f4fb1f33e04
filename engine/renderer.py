"""
renderer.py — Renderer Collaborator
====================================
The controller calls these hooks synchronously at every event.  It does
not care how they draw; the base class is a silent no-op renderer, so a
controller built without one (tests, recorder-only use) still works.

Hooks:
  • draw(values)                 – redraw every bar
  • mark(index, marker)          – add a named marker (BarState) to one bar
  • unmark(index, marker)        – remove it again
  • clear_marks()                – drop every marker
  • show_stats(stats)            – publish {comparisons, swaps, writes, elapsed_ms}
  • show_event(algo_key, event)  – the event about to be animated (pseudocode / explanation)
  • set_controls_enabled(flag)   – disable controls while a run is active
"""

from typing import Any, Dict, List

from algorithms.event import Event
from sequence import BarState


class Renderer:
    def draw(self, values: List[int]) -> None:
        pass

    def mark(self, index: int, marker: BarState) -> None:
        pass

    def unmark(self, index: int, marker: BarState) -> None:
        pass

    def clear_marks(self) -> None:
        pass

    def show_stats(self, stats: Dict[str, Any]) -> None:
        pass

    def show_event(self, algo_key: str, event: Event) -> None:
        pass

    def set_controls_enabled(self, enabled: bool) -> None:
        pass

"""
engine/
-------
Animation & recording layer.

    from engine import AnimationController, Recorder, compare
"""

from engine.errors     import SortInvariantError
from engine.statistics import Statistics
from engine.renderer   import Renderer
from engine.controller import (
    AnimationController,
    RunState,
    DEFAULT_SIZE, MIN_SIZE, MAX_SIZE,
    DEFAULT_SPEED, MIN_SPEED, MAX_SPEED,
)
from engine.recorder   import Recorder, RunMetrics, ComparisonResult, compare, record

__all__ = [
    "AnimationController",
    "RunState",
    "Renderer",
    "Statistics",
    "SortInvariantError",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "record",
    "DEFAULT_SIZE",
    "MIN_SIZE",
    "MAX_SIZE",
    "DEFAULT_SPEED",
    "MIN_SPEED",
    "MAX_SPEED",
]

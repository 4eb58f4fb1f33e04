"""
controller.py — Animation Controller
=====================================
The controller is the ONLY object the UI talks to during a run.  It owns
the Sequence, the Statistics, the pre-run snapshot and the run-lock, and
it drives one algorithm generator to completion, pausing after every
event so each step is visible.

State machine:
    IDLE     →  run()           →  RUNNING
    RUNNING  →  (events done, sorted sweep done)  →  IDLE
    RUNNING  →  (any exception) →  IDLE   (logged, never re-raised)

While RUNNING, generate() / reset() / load() / run() are rejected as
no-ops.  Nothing is queued.

Pacing:
    delay = (11 - speed) * 50 ms, speed in [1, 10].  Speed is read again
    at every pause, so a change mid-run applies to the next step.

Threading:
    A run is a single thread of control.  The web app runs it on one
    background thread (start()); only the check-and-set of the run state
    is locked, so request threads can read values and statistics at any
    time.
"""

import logging
import random
import threading
import time
from enum import Enum
from typing import Callable, Iterable, List, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.event import Event, EventKind, apply_event
from engine.errors import SortInvariantError
from engine.renderer import Renderer
from engine.statistics import Statistics
from sequence import BarState, Sequence


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Bounds & defaults
# ---------------------------------------------------------------------------
DEFAULT_SIZE  = 30
MIN_SIZE      = 5
MAX_SIZE      = 100

DEFAULT_SPEED = 5
MIN_SPEED     = 1
MAX_SPEED     = 10

DELAY_UNIT_MS = 50


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, int(value)))


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE    = "idle"
    RUNNING = "running"


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class AnimationController:
    """
    Attributes:
        sequence : The Sequence being sorted.  Renderers only read it.
        renderer : Collaborator notified at every event.

    Args:
        renderer : Renderer to notify (a silent one if None).
        size     : Initial bar count, clamped to [MIN_SIZE, MAX_SIZE].
        speed    : Initial speed, clamped to [MIN_SPEED, MAX_SPEED].
        values   : Start from these values instead of random ones.
        sleep    : Pause function, seconds → None.  Tests pass a no-op.
        clock    : Monotonic clock in seconds, for elapsed time.
        rng      : Random source used by generate().
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        size: int = DEFAULT_SIZE,
        speed: int = DEFAULT_SPEED,
        values: Optional[Iterable[int]] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        self.renderer: Renderer   = renderer or Renderer()
        self.sequence: Sequence   = Sequence()
        self.stats:    Statistics = Statistics()

        self._size:     int                 = clamp(size, MIN_SIZE, MAX_SIZE)
        self._speed:    int                 = clamp(speed, MIN_SPEED, MAX_SPEED)
        self._state:    RunState            = RunState.IDLE
        self._snapshot: Optional[List[int]] = None
        self._active:   Optional[str]       = None
        self._lock                          = threading.Lock()

        self._sleep = sleep
        self._clock = clock
        self._rng   = rng or random.Random()

        if values is not None:
            self.load(values)
        else:
            self.generate()

    # ------------------------------------------------------------------
    # Sequence lifecycle
    # ------------------------------------------------------------------
    def generate(self, size: Optional[int] = None) -> bool:
        """Replace the values with fresh random bars.  No-op while running."""
        with self._lock:
            if self._state is RunState.RUNNING:
                logger.debug("generate() rejected: a run is active")
                return False
            self._size = clamp(self._size if size is None else size, MIN_SIZE, MAX_SIZE)
            fresh = Sequence.generate_random(self._size, rng=self._rng)
            self.sequence.replace(fresh.values)
            self._snapshot = None
            self.stats.reset()

        logger.debug("Generated %d values", self._size)
        self._redraw()
        return True

    def reset(self) -> bool:
        """Restore the values captured at the start of the last run."""
        with self._lock:
            if self._state is RunState.RUNNING:
                logger.debug("reset() rejected: a run is active")
                return False
            if self._snapshot is not None:
                self.sequence.replace(self._snapshot)
            self.stats.reset()

        self._redraw()
        return True

    def load(self, values: Iterable[int]) -> bool:
        """Use caller-supplied values (e.g. a textbook example).  No-op while running."""
        with self._lock:
            if self._state is RunState.RUNNING:
                logger.debug("load() rejected: a run is active")
                return False
            self.sequence.replace(values)
            self._size     = len(self.sequence)
            self._snapshot = None
            self.stats.reset()

        self._redraw()
        return True

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_speed(self, speed: int) -> int:
        self._speed = clamp(speed, MIN_SPEED, MAX_SPEED)
        return self._speed

    def set_size(self, size: int) -> int:
        """Clamp and remember the size; regenerates immediately when idle."""
        self._size = clamp(size, MIN_SIZE, MAX_SIZE)
        if not self.is_running:
            self.generate()
        return self._size

    def delay_ms(self) -> int:
        return (11 - self._speed) * DELAY_UNIT_MS

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(self, algo_key: str) -> bool:
        """
        Animate one algorithm to completion on the calling thread.
        Returns True when the run finished cleanly, False when it was
        rejected or failed.
        """
        info = self._lookup(algo_key)
        if info is None or not self._try_begin(info):
            return False
        return self._execute(info)

    def start(self, algo_key: str) -> Optional[threading.Thread]:
        """
        Same as run() but on a background thread.  The run-lock is taken
        before this returns, so a second start() is rejected right away.
        Returns the thread, or None when rejected.
        """
        info = self._lookup(algo_key)
        if info is None or not self._try_begin(info):
            return None
        worker = threading.Thread(
            target=self._execute, args=(info,), name=f"sort-{info.key}", daemon=True,
        )
        try:
            worker.start()
        except RuntimeError:
            logger.exception("Could not start a worker for %s", info.key)
            self._end()
            return None
        return worker

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def values(self) -> List[int]:
        return self.sequence.copy()

    @property
    def statistics(self) -> dict:
        return self.stats.as_dict(self._clock())

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is RunState.RUNNING

    @property
    def active_algorithm(self) -> Optional[str]:
        return self._active

    @property
    def snapshot(self) -> Optional[List[int]]:
        return list(self._snapshot) if self._snapshot is not None else None

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def size(self) -> int:
        return self._size

    # ------------------------------------------------------------------
    # Internal: run phases
    # ------------------------------------------------------------------
    def _lookup(self, algo_key: str) -> Optional[AlgoInfo]:
        info = get_algorithm(algo_key)
        if info is None:
            logger.warning("Unknown algorithm %r; run ignored", algo_key)
        return info

    def _try_begin(self, info: AlgoInfo) -> bool:
        with self._lock:
            if self._state is RunState.RUNNING:
                logger.debug("run(%s) rejected: %s is still running", info.key, self._active)
                return False
            self._state    = RunState.RUNNING
            self._active   = info.key
            self._snapshot = self.sequence.copy()
            self.stats.start(self._clock())
        return True

    def _execute(self, info: AlgoInfo) -> bool:
        logger.info("Run started: %s on %d values", info.key, len(self.sequence))
        ok = False
        try:
            self.renderer.set_controls_enabled(False)
            self.renderer.clear_marks()
            self.renderer.draw(self.sequence.copy())
            self._publish_stats()

            for event in info.fn(self.sequence.values):
                self._animate(info.key, event)

            self._verify(info)
            self._mark_all_sorted()
            ok = True
        except Exception:
            logger.exception("Sorting run failed: %s", info.key)
        finally:
            self._end()

        logger.info(
            "Run %s: %s (%d comparisons, %d swaps, %d writes)",
            "finished" if ok else "aborted", info.key,
            self.stats.comparisons, self.stats.swaps, self.stats.writes,
        )
        return ok

    def _end(self) -> None:
        """Back to IDLE: freeze the clock and hand the controls back."""
        self.stats.finish(self._clock())
        with self._lock:
            self._state  = RunState.IDLE
            self._active = None
        self._publish_stats()
        self.renderer.set_controls_enabled(True)

    def _animate(self, algo_key: str, event: Event) -> None:
        self.renderer.show_event(algo_key, event)

        if event.kind is EventKind.COMPARE:
            self.stats.record(event)
            self._publish_stats()
            self._mark(event.indices, BarState.COMPARING)
            self._pause()
            self._unmark(event.indices, BarState.COMPARING)
            return

        self._mark(event.indices, BarState.SWAPPING)
        self._pause()

        apply_event(self.sequence.values, event)
        self.stats.record(event)
        self._publish_stats()
        self.renderer.draw(self.sequence.copy())
        self._mark(event.indices, BarState.SWAPPING)

        self._pause()
        self._unmark(event.indices, BarState.SWAPPING)

    def _verify(self, info: AlgoInfo) -> None:
        if not self.sequence.is_sorted():
            raise SortInvariantError(f"{info.label} finished with an unsorted sequence")
        if not self.sequence.is_permutation_of(self._snapshot or []):
            raise SortInvariantError(f"{info.label} changed the values it was sorting")

    def _mark_all_sorted(self) -> None:
        for idx in range(len(self.sequence)):
            self.renderer.mark(idx, BarState.SORTED)
            self._pause()

    # ------------------------------------------------------------------
    # Internal: helpers
    # ------------------------------------------------------------------
    def _pause(self) -> None:
        self._sleep(self.delay_ms() / 1000.0)

    def _mark(self, indices: List[int], marker: BarState) -> None:
        for idx in indices:
            self.renderer.mark(idx, marker)

    def _unmark(self, indices: List[int], marker: BarState) -> None:
        for idx in indices:
            self.renderer.unmark(idx, marker)

    def _publish_stats(self) -> None:
        self.renderer.show_stats(self.statistics)

    def _redraw(self) -> None:
        self.renderer.clear_marks()
        self.renderer.draw(self.sequence.copy())
        self._publish_stats()

import logging
import random
import threading

import pytest

from algorithms import REGISTRY, AlgoInfo
from algorithms.event import compare, overwrite
from engine import RunState, record
from engine.controller import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE
from sequence import MAX_VALUE, MIN_VALUE

from conftest import RecordingRenderer


def counters(controller):
    stats = controller.statistics
    return stats["comparisons"], stats["swaps"], stats["writes"]


# ---------------------------------------------------------------------------
# Construction / generate / reset
# ---------------------------------------------------------------------------
def test_default_construction_generates_random_values(make_controller):
    c = make_controller(rng=random.Random(3))
    assert len(c.values) == DEFAULT_SIZE
    assert all(MIN_VALUE <= v <= MAX_VALUE for v in c.values)
    assert c.state is RunState.IDLE
    assert counters(c) == (0, 0, 0)


def test_generate_twice_resets_stats(make_controller):
    c = make_controller([5, 3, 8, 1])
    c.run("bubble")
    assert counters(c) != (0, 0, 0)

    for _ in range(2):
        assert c.generate(10)
        assert counters(c) == (0, 0, 0)
        assert c.statistics["elapsed_ms"] == 0
        assert len(c.values) == 10
        assert all(MIN_VALUE <= v <= MAX_VALUE for v in c.values)


@pytest.mark.parametrize("requested, expected", [(0, MIN_SIZE), (-3, MIN_SIZE), (1000, MAX_SIZE), (42, 42)])
def test_generate_clamps_size(make_controller, requested, expected):
    c = make_controller()
    c.generate(requested)
    assert len(c.values) == expected
    assert c.size == expected


def test_reset_restores_pre_run_values(make_controller):
    c = make_controller([9, 4, 7, 1, 5])
    c.run("heap")
    assert c.values == [1, 4, 5, 7, 9]

    assert c.reset()
    assert c.values == [9, 4, 7, 1, 5]
    assert counters(c) == (0, 0, 0)


def test_reset_without_run_keeps_current_values(make_controller):
    c = make_controller([3, 1, 2])
    assert c.reset()
    assert c.values == [3, 1, 2]


def test_generate_drops_the_old_snapshot(make_controller):
    c = make_controller([3, 1, 2], rng=random.Random(5))
    c.run("quick")
    c.generate(8)
    fresh = c.values
    c.reset()
    assert c.values == fresh


# ---------------------------------------------------------------------------
# Speed / size configuration
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("speed, clamped, delay", [(1, 1, 500), (10, 10, 50), (0, 1, 500), (99, 10, 50), (5, 5, 300)])
def test_speed_is_clamped_and_sets_delay(make_controller, speed, clamped, delay):
    c = make_controller([1])
    assert c.set_speed(speed) == clamped
    assert c.delay_ms() == delay


def test_set_size_regenerates_when_idle(make_controller):
    c = make_controller([1, 2])
    assert c.set_size(12) == 12
    assert len(c.values) == 12


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------
def test_bubble_scenario(make_controller, renderer):
    c = make_controller([5, 3, 8, 1])
    assert c.run("bubble")

    assert c.values == [1, 3, 5, 8]
    assert counters(c) == (6, 4, 0)
    assert c.state is RunState.IDLE

    events = [call for call in renderer.calls if call[0] == "event"]
    assert events[:3] == [("event", "compare", 0, 1), ("event", "swap", 0, 1), ("event", "compare", 1, 2)]


def test_empty_sequence_completes_immediately(make_controller, sleeps):
    c = make_controller([])
    assert c.run("merge")
    assert c.values == []
    assert counters(c) == (0, 0, 0)
    assert sleeps == []


def test_selection_on_sorted_input(make_controller):
    c = make_controller([1, 2, 3, 4])
    c.run("selection")
    assert counters(c)[:2] == (6, 0)


def test_quick_two_elements(make_controller):
    c = make_controller([2, 1])
    c.run("quick")
    assert c.values == [1, 2]
    assert counters(c)[:2] == (1, 1)


def test_pause_after_every_step(make_controller, sleeps):
    c = make_controller([2, 1], speed=6)
    c.run("bubble")
    # compare: 1 pause, swap: before + after, sorted sweep: one per bar
    assert sleeps == [0.25] * 5


def test_speed_change_applies_to_next_pause(make_controller, renderer, sleeps):
    c = make_controller([3, 2, 1], speed=1)

    original = renderer.show_event

    def speed_up(algo_key, event):
        original(algo_key, event)
        c.set_speed(10)

    renderer.show_event = speed_up
    c.run("bubble")
    assert sleeps
    assert set(sleeps) == {0.05}


def test_marks_and_controls_order(make_controller, renderer):
    c = make_controller([2, 1])
    c.run("bubble")
    calls = [call for call in renderer.calls if call[0] in ("controls", "mark", "unmark")]

    assert calls[0] == ("controls", False)
    assert calls[-1] == ("controls", True)
    assert ("mark", 0, "comparing") in calls
    assert ("mark", 1, "swapping") in calls
    sorted_marks = [call for call in calls if call[1:] and call[-1] == "sorted"]
    assert sorted_marks == [("mark", 0, "sorted"), ("mark", 1, "sorted")]


def test_swap_redraws_after_mutation(make_controller, renderer):
    c = make_controller([2, 1])
    c.run("bubble")
    assert [1, 2] in renderer.draws


@pytest.mark.parametrize("key", list(REGISTRY))
def test_stats_match_reference_run(make_controller, renderer, key):
    values = [random.Random(11).randint(10, 309) for _ in range(20)]
    c = make_controller(values)
    c.run(key)

    reference = record(key, values).metrics
    assert counters(c) == (reference.comparisons, reference.swaps, reference.writes)
    assert c.values == reference.result

    # published after every single event, never going backwards
    published = renderer.stats
    for before, after in zip(published, published[1:]):
        assert after["comparisons"] >= before["comparisons"]
        assert after["swaps"] >= before["swaps"]
        assert after["writes"] >= before["writes"]


def test_elapsed_time_is_frozen_after_run(make_controller):
    c = make_controller([4, 3, 2, 1])
    c.run("insertion")
    first = c.statistics["elapsed_ms"]
    assert first > 0
    assert c.statistics["elapsed_ms"] == first


# ---------------------------------------------------------------------------
# Run-lock
# ---------------------------------------------------------------------------
def test_operations_rejected_while_running(make_controller):
    renderer = RecordingRenderer()
    c = make_controller([4, 1, 3, 2], renderer=renderer)
    seen = {}

    original = renderer.show_event

    def interfere(algo_key, event):
        original(algo_key, event)
        if seen:
            return
        before = (c.values, counters(c), c.state, c.snapshot)
        seen["results"] = [c.run("quick"), c.generate(50), c.reset(), c.load([1, 2])]
        seen["start"] = c.start("heap")
        seen["same"] = before == (c.values, counters(c), c.state, c.snapshot)

    renderer.show_event = interfere
    assert c.run("bubble")

    assert seen["results"] == [False, False, False, False]
    assert seen["start"] is None
    assert seen["same"]
    assert c.values == [1, 2, 3, 4]


def test_background_start_holds_the_lock(make_controller, gate):
    c = make_controller([3, 2, 1], sleep=gate)

    worker = c.start("bubble")
    assert worker is not None
    assert c.is_running
    assert c.active_algorithm == "bubble"
    assert c.start("heap") is None
    assert not c.generate()
    assert not c.reset()

    gate.open()
    worker.join(timeout=5)
    assert not c.is_running
    assert c.values == [1, 2, 3]


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------
def _exploding(values):
    yield compare(0, 1)
    raise RuntimeError("boom")


def _corrupting(values):
    yield overwrite(0, 999)


def _register(monkeypatch, key, fn):
    monkeypatch.setitem(REGISTRY, key, AlgoInfo(key=key, label=key.title(), fn=fn, pseudocode=["x"]))


def test_unknown_algorithm_is_ignored(make_controller, caplog):
    c = make_controller([2, 1])
    with caplog.at_level(logging.WARNING):
        assert not c.run("bogo")
    assert c.values == [2, 1]
    assert c.state is RunState.IDLE
    assert counters(c) == (0, 0, 0)
    assert "Unknown algorithm" in caplog.text


def test_engine_error_is_logged_and_releases_lock(make_controller, renderer, monkeypatch, caplog):
    _register(monkeypatch, "exploding", _exploding)
    c = make_controller([2, 1])

    with caplog.at_level(logging.ERROR):
        assert c.run("exploding") is False

    assert c.state is RunState.IDLE
    assert renderer.calls[-1] == ("controls", True)
    assert "Sorting run failed: exploding" in caplog.text
    # the lock is free again
    assert c.run("bubble")


def test_invariant_violation_is_caught(make_controller, monkeypatch, caplog):
    _register(monkeypatch, "corrupting", _corrupting)
    c = make_controller([1, 2, 3])

    with caplog.at_level(logging.ERROR):
        assert c.run("corrupting") is False

    assert "SortInvariantError" in caplog.text
    assert c.state is RunState.IDLE
    # no rollback on failure
    assert c.values == [999, 2, 3]


def test_failed_thread_start_returns_to_idle(make_controller, monkeypatch, caplog):
    def refuse(self):
        raise RuntimeError("can't start new thread")

    monkeypatch.setattr(threading.Thread, "start", refuse)
    c = make_controller([3, 1, 2])

    with caplog.at_level(logging.ERROR, logger="engine.controller"):
        assert c.start("bubble") is None

    assert c.state is RunState.IDLE
    assert c.active_algorithm is None
    assert "Could not start a worker for bubble" in caplog.text

    monkeypatch.undo()
    assert c.run("bubble")
    assert c.values == [1, 2, 3]


# ---------------------------------------------------------------------------
# Loading explicit values
# ---------------------------------------------------------------------------
def test_load_reports_the_loaded_size(make_controller):
    c = make_controller()
    assert c.load([4, 0, 2])
    assert c.size == 3
    assert c.values == [4, 0, 2]

    # the next generate brings the size back into range
    c.generate()
    assert c.size == MIN_SIZE
    assert len(c.values) == MIN_SIZE

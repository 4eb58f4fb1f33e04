import random

from sequence import BarState, Sequence, MIN_VALUE, MAX_VALUE
from ui import FrameRenderer, render_bars
from ui.canvas import bar_state
from algorithms.event import compare


# ---------------------------------------------------------------------------
# Sequence
# ---------------------------------------------------------------------------
def test_generate_random_range_and_seed():
    a = Sequence.generate_random(50, seed=7)
    b = Sequence.generate_random(50, rng=random.Random(7))
    assert len(a) == 50
    assert a.values == b.values
    assert all(MIN_VALUE <= v <= MAX_VALUE for v in a)


def test_generate_random_negative_size_is_empty():
    assert len(Sequence.generate_random(-4, seed=1)) == 0


def test_replace_keeps_list_identity():
    seq = Sequence([3, 2, 1])
    live = seq.values
    seq.replace([7, 8])
    assert live is seq.values
    assert live == [7, 8]


def test_checks():
    seq = Sequence([1, 2, 2, 5])
    assert seq.is_sorted()
    assert seq.is_permutation_of([2, 5, 1, 2])
    assert not seq.is_permutation_of([1, 2, 5])
    assert not Sequence([2, 1]).is_sorted()
    assert Sequence([]).is_sorted()


def test_bar_state_parse():
    assert BarState.parse("sorted") is BarState.SORTED
    assert BarState.parse(BarState.COMPARING) is BarState.COMPARING


# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
def test_render_bars_one_group_per_value():
    svg = render_bars([10, 20, 30], {1: ["comparing"]})
    assert svg.startswith("<svg")
    assert svg.count('class="bar ') == 3
    assert 'class="bar comparing" data-index="1" data-value="20"' in svg


def test_render_bars_empty():
    svg = render_bars([])
    assert "Empty sequence" in svg


def test_marker_priority():
    assert bar_state(["sorted", "swapping", "comparing"]) == "swapping"
    assert bar_state(["sorted", "comparing"]) == "comparing"
    assert bar_state([]) == "default"


# ---------------------------------------------------------------------------
# FrameRenderer
# ---------------------------------------------------------------------------
def test_frame_renderer_tracks_markers_and_versions():
    fr = FrameRenderer()
    fr.draw([3, 1])
    fr.mark(0, BarState.COMPARING)
    fr.mark(0, BarState.SORTED)
    fr.mark(1, BarState.COMPARING)
    fr.unmark(1, BarState.COMPARING)
    fr.show_event("bubble", compare(0, 1, line=4, explanation="look"))
    fr.set_controls_enabled(False)

    frame = fr.frame()
    assert frame["values"] == [3, 1]
    assert frame["markers"] == {0: ["comparing", "sorted"]}
    assert frame["algo_key"] == "bubble"
    assert frame["pseudocode_line"] == 4
    assert frame["explanation"] == "look"
    assert frame["controls_enabled"] is False
    assert frame["version"] == 7

    fr.clear_marks()
    fr.set_controls_enabled(True)
    frame = fr.frame()
    assert frame["markers"] == {}
    assert frame["pseudocode_line"] == -1


def test_frame_is_a_copy():
    fr = FrameRenderer()
    fr.draw([1, 2])
    frame = fr.frame()
    frame["values"].append(99)
    assert fr.frame()["values"] == [1, 2]

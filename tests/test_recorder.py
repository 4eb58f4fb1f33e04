import pytest

from engine import Recorder, compare, record


def test_run_to_completion_metrics():
    rec = record("bubble", [5, 3, 8, 1])
    m = rec.get_metrics()

    assert m.algo_key == "bubble"
    assert m.algo_label == "Bubble Sort"
    assert m.size == 4
    assert (m.comparisons, m.swaps, m.writes) == (6, 4, 0)
    assert m.total_events == 10
    assert m.sorted_ok
    assert m.result == [1, 3, 5, 8]


def test_recorder_works_on_a_copy():
    values = [3, 1, 2]
    record("heap", values)
    assert values == [3, 1, 2]


def test_merge_counts_writes():
    m = record("merge", [2, 1]).metrics
    assert (m.comparisons, m.swaps, m.writes) == (1, 0, 2)


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError):
        Recorder().start("bogo", [1, 2])


def test_run_before_start_raises():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_export_is_serialisable():
    data = record("quick", [2, 1]).export()
    assert data["algo_key"] == "quick"
    assert data["input"] == [2, 1]
    assert data["metrics"]["swaps"] == 1
    assert [e["kind"] for e in data["events"]] == ["compare", "swap"]


def test_compare_picks_winners():
    values = [1, 2, 3, 4, 5, 6]
    result = compare(record("bubble", values), record("insertion", values))

    # insertion needs one comparison per element on sorted input
    assert result.left.comparisons == 15
    assert result.right.comparisons == 5
    assert result.winner_comparisons == "Insertion Sort"
    assert result.winner_swaps == "tie"
    assert result.winner_events == "Insertion Sort"
    assert result.to_dict()["left"]["algo_key"] == "bubble"

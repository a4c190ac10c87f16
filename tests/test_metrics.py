import tracemalloc

from jug_lab.core.metrics import MeasuredRun, SearchResult
from jug_lab.core.state import PuzzleState


def test_readings_before_entering():
    m = MeasuredRun()
    assert m.elapsed == 0.0
    assert m.peak_kb == 0


def test_peak_and_elapsed_after_run():
    with MeasuredRun() as m:
        blob = [0] * 200_000
        inside = m.peak_kb
        assert m.elapsed >= 0.0
    del blob
    assert inside > 0
    assert m.peak_kb >= inside
    done = m.elapsed
    assert done >= 0.0
    assert m.elapsed == done  # frozen after exit


def test_nested_runs_leave_outer_trace_running():
    was_tracing = tracemalloc.is_tracing()
    with MeasuredRun():
        with MeasuredRun():
            pass
        assert tracemalloc.is_tracing()
    assert tracemalloc.is_tracing() == was_tracing


def test_result_without_path():
    r = SearchResult("DFS", False, cutoff=True)
    assert r.moves is None
    row = r.to_row()
    assert row["path"] == [] and row["cutoff"] is True


def test_result_moves_counts_edges():
    s0 = PuzzleState.from_amounts(5, 3)
    assert SearchResult("BFS", True, path=[s0]).moves == 0

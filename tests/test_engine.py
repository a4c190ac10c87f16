import itertools
import logging

import pytest

from jug_lab.algorithms.bfs import breadth_first_search
from jug_lab.algorithms.dfs import depth_first_search
from jug_lab.algorithms.engine import Phase, SearchEngine, SearchSession
from jug_lab.core.errors import InvalidContainer, InvalidStrategy, SearchNotSolved
from jug_lab.core.frontiers import FIFOQueue, LIFOStack, Strategy
from jug_lab.core.state import PuzzleState
from jug_lab.problems.water_jug import WaterJugProblem, classify_move


def _engine(caps, start, goal, **kw):
    return SearchEngine(PuzzleState.from_amounts(*caps, *start), goal, **kw)


def _assert_valid_path(path, start, goal):
    assert path[0] == start
    assert path[0].parent is None
    assert path[-1] == goal
    for prev, nxt in zip(path, path[1:]):
        assert classify_move(prev, nxt) is not None, f"{prev} -> {nxt} is not a single move"


def test_new_engine_is_ready():
    e = _engine((5, 3), (0, 0), (4, 0))
    assert e.phase is Phase.READY
    assert e.session is None
    with pytest.raises(SearchNotSolved):
        e.retrieve_path()


def test_bfs_five_three_measure_four():
    e = _engine((5, 3), (0, 0), (4, 0))
    assert e.find_path_if_exists("BFS") is True
    assert e.phase is Phase.SOLVED
    path = e.retrieve_path()
    assert [s.amounts for s in path] == [
        (0, 0), (5, 0), (2, 3), (2, 0), (0, 2), (5, 2), (4, 3), (4, 0),
    ]
    _assert_valid_path(path, e.start, e.goal)
    assert e.session.found_goal.depth == 7


def test_bfs_reaches_four_and_three_in_six_moves():
    e = _engine((5, 3), (0, 0), (4, 3))
    assert e.find_path_if_exists(Strategy.BFS)
    assert len(e.retrieve_path()) - 1 == 6


@pytest.mark.parametrize("strategy", ["BFS", "DFS"])
def test_unsolvable_four_two(strategy):
    e = _engine((4, 2), (0, 0), (1, 0))
    assert e.find_path_if_exists(strategy) is False
    assert e.phase is Phase.EXHAUSTED
    # every reachable value-state is expanded exactly once
    assert e.session.expanded == 6
    assert len(e.session.visited) == 6
    with pytest.raises(SearchNotSolved):
        e.retrieve_path()


@pytest.mark.parametrize("strategy", ["BFS", "DFS"])
def test_exhausts_whole_reachable_space(strategy):
    e = _engine((5, 3), (0, 0), (2, 2))
    assert not e.find_path_if_exists(strategy)
    assert e.session.expanded == 16
    assert e.session.frontier.is_empty()


@pytest.mark.parametrize("strategy", ["BFS", "DFS"])
def test_start_equals_goal(strategy):
    e = _engine((3, 5), (0, 0), (0, 0))
    assert e.find_path_if_exists(strategy)
    assert e.retrieve_path() == [e.start]
    assert e.session.expanded == 0


def test_invalid_container_scenario():
    with pytest.raises(InvalidContainer):
        PuzzleState.from_amounts(3, 5, 5, 0)
    with pytest.raises(InvalidContainer):
        _engine((5, 3), (0, 0), (6, 0))


def test_invalid_strategy_fails_before_any_work():
    e = _engine((5, 3), (0, 0), (4, 0))
    with pytest.raises(InvalidStrategy):
        e.find_path_if_exists("A*")
    assert e.phase is Phase.READY
    assert e.session is None


def test_invalid_strategy_keeps_previous_solution():
    e = _engine((5, 3), (0, 0), (4, 0))
    assert e.find_path_if_exists("BFS")
    before = e.retrieve_path()
    with pytest.raises(InvalidStrategy):
        e.find_path_if_exists("best-first")
    assert e.phase is Phase.SOLVED
    assert e.retrieve_path() == before


def test_rerun_resets_bookkeeping():
    e = _engine((5, 3), (0, 0), (4, 0))
    e.find_path_if_exists("BFS")
    first = e.session
    assert isinstance(first.frontier, FIFOQueue)
    assert e.find_path_if_exists("DFS")
    second = e.session
    assert isinstance(second, SearchSession)
    assert second is not first
    assert isinstance(second.frontier, LIFOStack)
    assert second.strategy is Strategy.DFS
    _assert_valid_path(e.retrieve_path(), e.start, e.goal)


def test_goal_parent_is_ignored():
    start = PuzzleState.from_amounts(5, 3)
    other_root = PuzzleState.from_amounts(5, 3, 5, 3)
    goal = PuzzleState(start.container_a.with_amount(4), start.container_b, parent=other_root)
    e = SearchEngine(start, goal)
    assert e.find_path_if_exists("BFS")
    assert e.retrieve_path()[0] is start


def test_dfs_is_deterministic():
    paths = []
    for _ in range(2):
        e = _engine((5, 3), (0, 0), (4, 0))
        assert e.find_path_if_exists("DFS")
        paths.append([s.amounts for s in e.retrieve_path()])
    assert paths[0] == paths[1]


def test_max_expansions_cuts_the_search_off():
    e = _engine((5, 3), (0, 0), (4, 0), max_expansions=3)
    assert e.find_path_if_exists("BFS") is False
    assert e.phase is Phase.CUTOFF
    assert e.session.cutoff
    assert e.session.expanded == 3
    with pytest.raises(SearchNotSolved):
        e.retrieve_path()


def test_cutoff_run_result_flags_the_limit():
    r = _engine((5, 3), (0, 0), (4, 0), max_expansions=3).run("BFS")
    assert not r.success
    assert r.cutoff
    assert r.nodes_expanded == 3


@pytest.mark.parametrize("strategy", ["bfs", " Dfs ", "dfs"])
def test_strategy_names_are_exact(strategy):
    e = _engine((5, 3), (0, 0), (4, 0))
    with pytest.raises(InvalidStrategy):
        e.find_path_if_exists(strategy)


def test_goal_test_runs_before_expansion_cap():
    e = _engine((5, 3), (0, 0), (0, 0), max_expansions=0)
    assert e.find_path_if_exists("BFS")
    assert not e.session.cutoff


def test_processed_states_in_bfs_order():
    e = _engine((5, 3), (0, 0), (2, 2))
    e.find_path_if_exists("BFS")
    assert [s.amounts for s in e.session.visited.processed[:3]] == [(0, 0), (5, 0), (0, 3)]


def test_engine_logs_outcome(caplog):
    e = _engine((4, 2), (0, 0), (1, 0))
    with caplog.at_level(logging.INFO, logger="jug_lab.algorithms.engine"):
        e.find_path_if_exists("BFS")
    assert "no solution" in caplog.text


def test_run_packages_result(five_three):
    e = SearchEngine.for_problem(five_three)
    r = e.run("BFS")
    assert r.algo == "BFS"
    assert r.success
    assert r.moves == 7
    assert r.actions == [
        "Fill A", "Pour A->B", "Empty B", "Pour A->B", "Fill A", "Pour A->B", "Empty B",
    ]
    assert r.nodes_expanded == e.session.expanded
    assert r.time_s >= 0
    row = r.to_row()
    assert row["path"][-1] == [4, 0]
    assert row["moves"] == 7


def test_functional_wrappers(five_three):
    bfs = breadth_first_search(five_three)
    dfs = depth_first_search(five_three)
    assert bfs.algo == "BFS" and dfs.algo == "DFS"
    assert bfs.success and dfs.success
    _assert_valid_path(dfs.path, five_three.initial_state(), five_three.goal_state())
    assert bfs.moves <= dfs.moves


def test_wrapper_reports_failure():
    r = breadth_first_search(WaterJugProblem(4, 2, goal=(1, 0)))
    assert not r.success
    assert r.path == []
    assert r.moves is None
    assert r.actions == []


@pytest.mark.parametrize("caps, goal", [
    ((5, 3), (4, 0)),
    ((3, 5), (0, 4)),
    ((8, 5), (4, 0)),
    ((7, 5), (6, 0)),
    ((9, 4), (6, 0)),
])
def test_bfs_never_longer_than_dfs(caps, goal):
    p = WaterJugProblem(*caps, goal=goal)
    bfs, dfs = breadth_first_search(p), depth_first_search(p)
    assert bfs.success and dfs.success
    assert bfs.moves <= dfs.moves
    _assert_valid_path(bfs.path, p.initial_state(), p.goal_state())
    _assert_valid_path(dfs.path, p.initial_state(), p.goal_state())


def test_all_small_puzzles_terminate_and_agree():
    """Every goal for every capacity pair up to 4: both strategies agree on
    solvability, match the gcd condition, and return valid paths."""
    for cap_a, cap_b in itertools.product(range(5), range(5)):
        for goal in itertools.product(range(cap_a + 1), range(cap_b + 1)):
            p = WaterJugProblem(cap_a, cap_b, goal=goal)
            bfs, dfs = breadth_first_search(p), depth_first_search(p)
            assert bfs.success == dfs.success == p.reachable_from_empty(), repr(p)
            assert bfs.nodes_expanded <= (cap_a + 1) * (cap_b + 1)
            assert dfs.nodes_expanded <= (cap_a + 1) * (cap_b + 1)
            if bfs.success:
                _assert_valid_path(bfs.path, p.initial_state(), p.goal_state())
                _assert_valid_path(dfs.path, p.initial_state(), p.goal_state())
                assert bfs.moves <= dfs.moves


def test_expansions_logged_only_at_debug(caplog):
    e = _engine((5, 3), (0, 0), (5, 0))
    with caplog.at_level(logging.INFO, logger="jug_lab.algorithms.engine"):
        e.find_path_if_exists("BFS")
    assert "expand" not in caplog.text
    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="jug_lab.algorithms.engine"):
        e.find_path_if_exists("BFS")
    assert "expand (0, 0) -> (5, 0) (0, 3)" in caplog.text

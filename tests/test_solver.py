# tests/test_solver.py
import os
import sys
from collections import deque

import pytest

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from maze_carver.builders import Algorithm, PrimSimpleBuilder, PrimSingleOpenBuilder, generate
from maze_carver.errors import (
    EmptyGridError,
    MissingEntranceError,
    MissingExitError,
    NoPathFoundError,
    SolveError,
)
from maze_carver.grid import CellState, Grid
from maze_carver.renderer import TraceRenderer
from maze_carver.solver import BreadthFirstSolver, path_length, solve
from scripted_random import ScriptedRandom


def _reference_distance(grid):
    """
    Independent BFS over every cell (no early exit) from start to end
    """
    start = grid.find(CellState.START)
    end = grid.find(CellState.END)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for n in grid.passage_neighbors(cell):
            if n not in dist:
                dist[n] = dist[cell] + 1
                queue.append(n)
    return dist.get(end)


def _is_connected_path(path):
    return all(
        abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
        for a, b in zip(path, path[1:])
    )


def test_prim_simple_fixture_path():
    grid = PrimSimpleBuilder(Grid(7), rng=ScriptedRandom([0, 0, 2])).run()

    path = solve(grid)

    assert path == [(3, 4), (3, 3), (3, 2), (2, 2), (1, 2)]
    assert path_length(path) == 4


def test_prim_single_open_fixture_path():
    grid = PrimSingleOpenBuilder(Grid(5), rng=ScriptedRandom([0, 0, 2])).run()

    path = solve(grid)

    assert path == [(3, 3), (3, 2), (2, 2), (1, 2)]
    assert path_length(path) == 3


def test_path_runs_from_end_to_start():
    grid = generate(Algorithm.ITERATIVE_DFS, 25, seed=9).grid

    path = solve(grid)

    assert grid.get(path[0]) is CellState.END
    assert grid.get(path[-1]) is CellState.START
    assert _is_connected_path(path)
    assert all(grid.is_passage(cell) for cell in path)
    assert len(set(path)) == len(path)


def test_expansion_order_picks_north_then_south_then_west_then_east():
    # Two equal-length routes around a block; the northern one wins
    grid = Grid.from_strings([
        "#######",
        "#.....#",
        "#S###E#",
        "#.....#",
        "#######",
        "#######",
        "#######",
    ])

    path = solve(grid)

    assert path_length(path) == 6
    assert path[-2] == (1, 1)
    assert (1, 3) in path


def test_solver_is_deterministic():
    grid = generate(Algorithm.PRIM_SINGLE_OPEN, 21, seed=3).grid
    assert solve(grid) == solve(grid)


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("seed", range(5))
def test_path_is_shortest(algorithm, seed):
    grid = generate(algorithm, 23, seed=seed).grid

    path = solve(grid)

    assert path_length(path) == _reference_distance(grid)


def test_never_generated_grid():
    with pytest.raises(EmptyGridError):
        solve(Grid(7))


def test_missing_entrance():
    grid = Grid.from_strings(["#####", "#..E#", "#####", "#####", "#####"])
    with pytest.raises(MissingEntranceError):
        solve(grid)


def test_missing_exit():
    grid = generate(Algorithm.PRIM_SIMPLE, 11, seed=1).grid
    grid.set(grid.find(CellState.END), CellState.PASSAGE)

    with pytest.raises(MissingExitError):
        solve(grid)


def test_two_exits_are_rejected():
    grid = Grid.from_strings(["#####", "#S.E#", "#.###", "#..E#", "#####"])

    with pytest.raises(MissingExitError):
        solve(grid)


def test_two_entrances_are_rejected():
    grid = generate(Algorithm.PRIM_SIMPLE, 11, seed=1).grid
    end = grid.find(CellState.END)
    extra = next(c for c in grid.passage_neighbors(end) if grid.get(c) is CellState.PASSAGE)
    grid.set(extra, CellState.START)

    with pytest.raises(MissingEntranceError):
        BreadthFirstSolver(grid)


def test_unreachable_exit():
    grid = Grid.from_strings([
        "#######",
        "#S.#..#",
        "#..#.E#",
        "####..#",
        "#.....#",
        "#######",
        "#######",
    ])

    with pytest.raises(NoPathFoundError):
        solve(grid)


def test_solver_errors_share_a_base_class():
    with pytest.raises(SolveError):
        solve(Grid(5))


def test_stepwise_solver_reports_to_renderer():
    grid = generate(Algorithm.PRIM_WEIGHTED, 15, seed=2).grid
    trace = TraceRenderer()
    solver = BreadthFirstSolver(grid, renderer=trace)

    visited = []
    while not solver.done:
        visited.append(solver.step())

    assert visited[0] == solver.start
    assert visited[-1] == solver.end
    assert solver.step() is None
    assert solver.visited[solver.start] is None

    explored = [e[1] for e in trace.events if e[0] == "explored"]
    assert explored == visited[1:-1]
    assert trace.events[-1] == ("path", solver.path)


def test_path_length_of_short_paths():
    assert path_length([]) == 0
    assert path_length([(1, 1)]) == 0
    assert path_length([(1, 1), (1, 2)]) == 1

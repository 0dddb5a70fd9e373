# tests/test_renderer.py
import os
import sys

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from maze_carver.builders import Algorithm, create_builder
from maze_carver.grid import CellState
from maze_carver.renderer import CanvasRenderer, Renderer
from maze_carver.solver import BreadthFirstSolver


def test_base_renderer_hooks_do_nothing():
    renderer = Renderer()
    renderer.cell_changed((1, 1), CellState.PASSAGE)
    renderer.cell_explored((1, 1))
    renderer.path_found([(1, 1)])
    renderer.completed(None)


def test_canvas_keeps_a_single_current_cell():
    canvas = CanvasRenderer(7)

    canvas.cell_changed((1, 2), CellState.PASSAGE)
    canvas.cell_changed((2, 2), CellState.PASSAGE)

    assert canvas.paint[1][2] == "passage"
    assert canvas.paint[2][2] == "current"
    assert canvas.current == (2, 2)
    assert canvas.counts()["current"] == 1


def test_canvas_matches_grid_after_build():
    canvas = CanvasRenderer(15)
    builder = create_builder(Algorithm.PRIM_SIMPLE, 15, seed=6, renderer=canvas)
    grid = builder.run()

    assert canvas.finished
    assert canvas.current is None
    for r in range(15):
        for c in range(15):
            assert canvas.paint[r][c] == grid.cells[r][c].value


def test_canvas_shows_search_and_path():
    canvas = CanvasRenderer(15)
    grid = create_builder(Algorithm.ITERATIVE_DFS, 15, seed=6, renderer=canvas).run()

    path = BreadthFirstSolver(grid, renderer=canvas).run()

    counts = canvas.counts()
    assert counts["start"] == 1
    assert counts["end"] == 1
    assert counts["path"] == len(path) - 2
    r, c = path[1]
    assert canvas.paint[r][c] == "path"


def test_canvas_reset():
    canvas = CanvasRenderer(5)
    canvas.cell_changed((1, 1), CellState.START)
    canvas.completed(type("G", (), {"cells": [[CellState.WALL] * 5] * 5})())

    canvas.reset()

    assert canvas.counts() == {"wall": 25}
    assert not canvas.finished
